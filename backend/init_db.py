from database import engine as default_engine, Base
import models  # noqa: F401  registers tables on Base.metadata
from sqlalchemy import inspect, text
import logging

logger = logging.getLogger(__name__)

AUDIT_COLUMNS = {
    'created_by': "VARCHAR",
    'updated_by': "VARCHAR",
    'deleted_at': "DATETIME",
    'deleted_by': "VARCHAR",
}


def _check_column_exists(inspector, table: str, column: str) -> bool:
    """Check if a column exists in a table"""
    columns = [col['name'] for col in inspector.get_columns(table)]
    return column in columns


def _add_column_if_missing(engine, inspector, table: str, column: str, column_def: str):
    """Add a column to a table if it doesn't exist"""
    if not _check_column_exists(inspector, table, column):
        logger.info(f"Running migration: Adding '{column}' column to {table} table...")
        with engine.connect() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {column_def}"))
            conn.commit()
        logger.info(f"Migration complete: '{column}' column added to {table}")
        return True
    return False


def _run_essential_migrations(engine) -> int:
    """
    Bring databases created before auditing and prerequisites were tracked
    up to the current schema. Safe to run on every startup.

    Returns:
        Number of columns added
    """
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    migrations_run = 0

    for table in ('students', 'courses', 'teachers'):
        if table not in tables:
            continue
        for column, column_def in AUDIT_COLUMNS.items():
            if _add_column_if_missing(engine, inspector, table, column, column_def):
                migrations_run += 1

    if 'courses' in tables:
        if _add_column_if_missing(engine, inspector, 'courses', 'prerequisite_credit_hours', "INTEGER NOT NULL DEFAULT 0"):
            migrations_run += 1

    if migrations_run:
        logger.info(f"Applied {migrations_run} schema migration(s)")
    return migrations_run


def init_database(engine=None):
    """Create all tables and apply pending column migrations"""
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)

    try:
        _run_essential_migrations(engine)
    except Exception as e:
        logger.warning(f"Migration warning (non-fatal): {e}")

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
