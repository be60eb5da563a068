import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from sqlalchemy.orm import sessionmaker
from app.core.config import settings
from app.core.database import create_db_engine
from app.db.init_db import drop_db, init_db
from tests.helpers import factories

test_db_url = settings.TEST_DATABASE_URL

@pytest.fixture(scope="function")
def database_engine(tmp_path):
    url = test_db_url or f"sqlite:///{tmp_path / 'test.db'}"
    engine = create_db_engine(url)
    if not url.startswith("sqlite"):
        drop_db(engine)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()

@pytest.fixture(scope="function")
def session_factory(database_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=database_engine)

@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.rollback()
        db.close()

@pytest.fixture
def is_postgres(database_engine):
    return database_engine.dialect.name == "postgresql"

@pytest.fixture
def program(db_session):
    return factories.create_program(db_session)

@pytest.fixture
def student(db_session):
    return factories.create_user(db_session)

@pytest.fixture
def course(db_session):
    return factories.create_course(db_session)

@pytest.fixture
def lesson(db_session, course):
    return factories.create_lesson(db_session, course_id=course.id, position=1)

@pytest.fixture
def enrollment(db_session, student, program):
    return factories.create_enrollment(db_session, user_id=student.id, program_id=program.id)
