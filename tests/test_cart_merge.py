"""
Transaction tests for CartRepository.add_or_increment.

These run against a file-backed SQLite database so that separate sessions
hold separate connections and real SQLite locks.
"""
import threading

import pytest
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import SQLModel, Session, create_engine, select

from app.core.config import settings
from app.db.session import enable_sqlite_transactions
from app.models.cart import Cart
from app.models.product import Product
from app.repositories.cart import CartRepository


@pytest.fixture
def file_engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'cart.db'}",
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_transactions(engine)

    @event.listens_for(engine, "connect")
    def _enforce_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        session.add(Product(pid="p1", name="Oversized Hoodie", image="hoodie.jpg", price=59000))
        session.commit()

    yield engine
    engine.dispose()


def cart_rows(engine, id="u1"):
    with Session(engine) as session:
        return session.exec(select(Cart.cid, Cart.qty).where(Cart.id == id).order_by(Cart.cid)).all()


class TestConcurrentMerge:
    def test_racing_merges_of_a_new_line_leave_one_row(self, file_engine):
        """Both merges finish their lookup before either writes."""
        lookups_done = threading.Barrier(2, timeout=10)
        seen = threading.local()

        def hold_after_first_lookup(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith("SELECT") and "FROM cart" in statement:
                if not getattr(seen, "lookup", False):
                    seen.lookup = True
                    lookups_done.wait()

        event.listen(file_engine, "after_cursor_execute", hold_after_first_lookup)

        errors = []

        def merge():
            try:
                with Session(file_engine) as session:
                    CartRepository(session).add_or_increment("M", 1, "p1", "u1")
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=merge) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        event.remove(file_engine, "after_cursor_execute", hold_after_first_lookup)

        assert errors == []
        rows = cart_rows(file_engine)
        assert len(rows) == 1
        assert rows[0].qty == 2

    def test_sequential_merges_from_separate_sessions(self, file_engine):
        for _ in range(3):
            with Session(file_engine) as session:
                CartRepository(session).add_or_increment("M", 1, "p1", "u1")

        rows = cart_rows(file_engine)
        assert len(rows) == 1
        assert rows[0].qty == 3


class TestMergeRollback:
    def test_failed_merge_leaves_nothing_behind(self, file_engine):
        with Session(file_engine) as session:
            repository = CartRepository(session)

            with pytest.raises(IntegrityError):
                repository.add_or_increment("M", 1, "missing", "u1")

            # The session was rolled back and stays usable
            assert repository.count_by_user_id("u1") == 0
            assert repository.add_or_increment("M", 2, "p1", "u1") == 1
            assert repository.count_by_user_id("u1") == 2

        assert len(cart_rows(file_engine)) == 1

    def test_lock_conflict_is_retried(self, session, products, monkeypatch):
        repository = CartRepository(session)
        merge_once = repository._merge_once
        calls = []

        def locked_first_time(*args):
            calls.append(args)
            if len(calls) == 1:
                raise OperationalError("INSERT INTO cart", {}, Exception("database is locked"))
            return merge_once(*args)

        monkeypatch.setattr(repository, "_merge_once", locked_first_time)

        assert repository.add_or_increment("M", 2, "p1", "u1") == 1
        assert len(calls) == 2
        assert repository.count_by_user_id("u1") == 2

    def test_gives_up_after_configured_attempts(self, session, products, monkeypatch):
        monkeypatch.setattr(settings, "CART_MERGE_ATTEMPTS", 3)
        repository = CartRepository(session)
        calls = []

        def always_locked(*args):
            calls.append(args)
            raise OperationalError("INSERT INTO cart", {}, Exception("database is locked"))

        monkeypatch.setattr(repository, "_merge_once", always_locked)

        with pytest.raises(OperationalError):
            repository.add_or_increment("M", 1, "p1", "u1")
        assert len(calls) == 3
        assert repository.count_by_user_id("u1") == 0
