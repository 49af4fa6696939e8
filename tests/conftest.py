"""
Pytest configuration and fixtures.

Each test gets a fresh in-memory SQLite database shared across requests via
StaticPool, with ``get_session`` overridden so the app never touches the
configured DATABASE_URL.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.db.session import get_session
from app.main import app
from app.models.product import Product
from app.models.support import Support


@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def products(session):
    """Seed the product rows cart lines join against."""
    rows = [
        Product(pid="p1", name="Oversized Hoodie", image="hoodie.jpg", price=59000),
        Product(pid="p2", name="Wide Denim Pants", image="denim.jpg", price=45000),
    ]
    for product in rows:
        session.add(product)
    session.commit()
    return rows


@pytest.fixture(scope="function")
def client(engine, products):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def support_notices(session):
    rows = [
        Support(stype="notice", title="Holiday shipping schedule", content="Orders ship after the 3rd."),
        Support(stype="faq", title="How do I change my size?", content="Remove the line and add it again."),
    ]
    for row in rows:
        session.add(row)
    session.commit()
    return rows
