from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

from init_db import init_database


def memory_engine():
    return create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)


def test_creates_all_tables():
    engine = memory_engine()
    init_database(engine)
    tables = set(inspect(engine).get_table_names())
    assert {"students", "courses", "teachers"} <= tables


def test_adds_missing_columns_to_older_courses_table():
    engine = memory_engine()
    with engine.connect() as conn:
        conn.execute(text("CREATE TABLE courses (id VARCHAR PRIMARY KEY, title VARCHAR)"))
        conn.commit()

    init_database(engine)

    columns = {col["name"] for col in inspect(engine).get_columns("courses")}
    assert "prerequisite_credit_hours" in columns
    assert "deleted_at" in columns
