import logging
from typing import List
from sqlalchemy import update, delete, func, case, and_
from sqlalchemy.engine import Row
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlmodel import Session, select

from app.core.config import settings
from app.models.cart import Cart
from app.models.product import Product
from app.schemas.cart import CartItemRead

logger = logging.getLogger(__name__)

class CartRepository:
    """SQL access for the ``cart`` table.

    Every method issues a single parameterized statement except
    ``add_or_increment``, which runs its lookup and write in one transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def update_qty(self, cid: int, type: str) -> int:
        """Apply a +1 / -1 quantity step to one row. Returns rows affected."""
        stmt = update(Cart).where(Cart.cid == cid)
        if type == "+":
            stmt = stmt.values(qty=Cart.qty + 1)
        elif type == "-":
            if settings.CART_QTY_FLOOR_AT_ZERO:
                stmt = stmt.where(Cart.qty > 0)
            stmt = stmt.values(qty=Cart.qty - 1)
        else:
            raise ValueError(f"type must be '+' or '-', got {type!r}")

        result = self.session.exec(stmt)
        self.session.commit()
        logger.info("cart qty %s on cid=%s, rows=%s", type, cid, result.rowcount)
        return result.rowcount

    def check_qty(self, pid: str, size: str, id: str) -> Row:
        """Best-match lookup over a member's cart rows.

        Each row scores 1 when its (pid, size) equals the request, 0 otherwise.
        Returns the top (cid, checkQty) row; raises NoResultFound when the
        member has nothing in the cart.
        """
        score = func.sum(case((and_(Cart.pid == pid, Cart.size == size), 1), else_=0)).label("checkQty")
        stmt = (
            select(Cart.cid, score)
            .where(Cart.id == id)
            .group_by(Cart.cid, Cart.id)
            .order_by(score.desc(), Cart.cid.desc())
            .limit(1)
        )
        return self.session.exec(stmt).one()

    def add(self, size: str, qty: int, pid: str, id: str) -> int:
        item = Cart(size=size, qty=qty, pid=pid, id=id)
        self.session.add(item)
        self.session.commit()
        logger.info("cart add cid=%s member=%s pid=%s size=%s qty=%s", item.cid, id, pid, size, qty)
        return 1

    def find_by_user_id(self, id: str) -> List[CartItemRead]:
        """Member's cart rows joined with product info, newest first."""
        rows = self.session.exec(
            select(Cart, Product)
            .join(Product, Cart.pid == Product.pid)
            .where(Cart.id == id)
            .order_by(Cart.cdate.desc(), Cart.cid.desc())
        ).all()

        return [
            CartItemRead(
                cid=cart.cid,
                size=cart.size,
                qty=cart.qty,
                pid=cart.pid,
                id=cart.id,
                cdate=cart.cdate,
                image=product.image,
                name=product.name,
                price=product.price,
            )
            for cart, product in rows
        ]

    def remove(self, cid: int) -> int:
        result = self.session.exec(delete(Cart).where(Cart.cid == cid))
        self.session.commit()
        logger.info("cart remove cid=%s, rows=%s", cid, result.rowcount)
        return result.rowcount

    def count_by_user_id(self, id: str) -> int:
        return self.session.exec(
            select(func.coalesce(func.sum(Cart.qty), 0)).where(Cart.id == id)
        ).one()

    def add_or_increment(self, size: str, qty: int, pid: str, id: str) -> int:
        """Insert a line or bump the existing (id, pid, size) line.

        Lookup and write run in one serializable transaction. When two merges
        race on the same key the loser fails with a lock or serialization
        error, is rolled back and tried again, and then sees the winner's row.
        """
        attempts = settings.CART_MERGE_ATTEMPTS
        for attempt in range(1, attempts + 1):
            try:
                existing = self._merge_once(size, qty, pid, id)
            except OperationalError:
                self.session.rollback()
                if attempt == attempts:
                    raise
                logger.warning(
                    "cart merge conflict member=%s pid=%s size=%s, retry %s/%s",
                    id, pid, size, attempt, attempts - 1
                )
                continue
            except SQLAlchemyError:
                self.session.rollback()
                raise

            logger.info("cart merge member=%s pid=%s size=%s qty=%s existing=%s", id, pid, size, qty, existing)
            return 1

    def _merge_once(self, size: str, qty: int, pid: str, id: str) -> bool:
        # SQLite transactions are already serializable; other backends need it set
        # before the first statement of the transaction
        if self.session.get_bind().dialect.name != "sqlite":
            self.session.connection(execution_options={"isolation_level": "SERIALIZABLE"})

        existing = self.session.exec(
            select(Cart)
            .where(Cart.id == id, Cart.pid == pid, Cart.size == size)
            .order_by(Cart.cid)
            .with_for_update()
        ).first()

        if existing:
            existing.qty = existing.qty + qty
            self.session.add(existing)
        else:
            self.session.add(Cart(size=size, qty=qty, pid=pid, id=id))

        self.session.commit()
        return existing is not None
