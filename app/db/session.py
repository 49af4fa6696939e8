from sqlalchemy import event
from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

def enable_sqlite_transactions(engine):
    """Emit BEGIN from SQLAlchemy instead of letting pysqlite defer it.

    pysqlite only opens a transaction at the first INSERT/UPDATE/DELETE, so a
    SELECT made earlier in the same unit of work holds no lock. With this hook
    the read and the write share one SQLite transaction.
    """
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

# check_same_thread is needed for SQLite, remove for MySQL/PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
if engine.dialect.name == "sqlite":
    enable_sqlite_transactions(engine)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)
