import pytest
from sqlalchemy import inspect
from sqlalchemy.engine import make_url
from app.core import database
from app.core.config import Settings, settings
from app.models import Base
from app.crud.course import course as crud_course
from app.schemas.course import CourseCreate


def test_get_db_closes_session(monkeypatch, session_factory):
    monkeypatch.setattr(database, "SessionLocal", session_factory)
    gen = database.get_db()
    db = next(gen)
    crud_course.create(db, obj_in=CourseCreate(name="Scoped"))
    with pytest.raises(StopIteration):
        next(gen)

    check = session_factory()
    try:
        assert crud_course.count(check) == 1
    finally:
        check.close()


def test_transactional_db_rolls_back_on_error(monkeypatch, session_factory):
    monkeypatch.setattr(database, "SessionLocal", session_factory)
    gen = database.get_transactional_db()
    db = next(gen)
    crud_course.create(db, obj_in=CourseCreate(name="Never kept"), commit=False)
    with pytest.raises(RuntimeError):
        gen.throw(RuntimeError("boom"))

    check = session_factory()
    try:
        assert crud_course.count(check) == 0
    finally:
        check.close()


def test_transactional_db_commits_on_success(monkeypatch, session_factory):
    monkeypatch.setattr(database, "SessionLocal", session_factory)
    gen = database.get_transactional_db()
    db = next(gen)
    crud_course.create(db, obj_in=CourseCreate(name="Kept"), commit=False)
    with pytest.raises(StopIteration):
        next(gen)

    check = session_factory()
    try:
        assert crud_course.count(check) == 1
    finally:
        check.close()


def test_engine_uses_configured_isolation_level(database_engine, is_postgres):
    if not is_postgres:
        pytest.skip("isolation level is only configured on PostgreSQL")
    with database_engine.connect() as connection:
        assert connection.get_isolation_level() == settings.DB_ISOLATION_LEVEL


def test_main_init_then_drop(monkeypatch, tmp_path):
    import main as entrypoint

    engine = database.create_db_engine(f"sqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setattr(entrypoint, "engine", engine)
    monkeypatch.setattr(entrypoint, "configure_logging", lambda: None)
    try:
        entrypoint.main(["init"])
        assert set(inspect(engine).get_table_names()) == set(Base.metadata.tables)

        entrypoint.main(["drop"])
        assert inspect(engine).get_table_names() == []
    finally:
        engine.dispose()


def test_assembled_database_url_uses_psycopg2_driver():
    assembled = Settings(
        DATABASE_URL="", DATABASE_USER="lp", DATABASE_PASSWORD="secret",
        DATABASE_HOST="db", DATABASE_PORT="5433", DATABASE_NAME="learning",
    )
    assert assembled.DATABASE_URL == "postgresql+psycopg2://lp:secret@db:5433/learning"
    assert make_url(assembled.DATABASE_URL).get_driver_name() == "psycopg2"
