from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import DATABASE_URL, SQL_ECHO


def build_engine(url: str, echo: bool = False):
    """Create an engine; SQLite gets thread sharing and foreign key enforcement."""
    is_sqlite = url.startswith("sqlite")
    connect_args = {'check_same_thread': False} if is_sqlite else {}
    engine = create_engine(
        url,
        connect_args=connect_args,
        echo=echo,
        pool_pre_ping=True,  # Verify connections are alive before using
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(DATABASE_URL, echo=SQL_ECHO)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
