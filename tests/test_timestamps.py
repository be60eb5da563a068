from datetime import datetime
from sqlalchemy import text, update
from sqlalchemy.orm import Session
from app.crud.course import course as crud_course
from app.crud.enrollment import enrollment as crud_enrollment
from app.crud.teaching_group import teaching_group as crud_teaching_group
from app.core.constants import EnrollmentStatusEnum
from app.models import Base
from app.models.course import Course
from app.core.timestamps import timestamped_tables
from tests.helpers import factories

JUNCTION_TABLES = {"course_modules", "program_modules"}


def test_every_entity_table_is_timestamped():
    names = {table.name for table in timestamped_tables(Base.metadata)}
    assert names == set(Base.metadata.tables) - JUNCTION_TABLES
    assert len(names) == 14


def test_insert_sets_created_and_updated_equal(db_session: Session, course, program, student, enrollment):
    for row in (course, program, student, enrollment):
        db_session.refresh(row)
        assert row.created_at is not None
        assert row.created_at == row.updated_at


def test_orm_update_does_not_decrease_updated_at(db_session: Session, course):
    before = course.updated_at
    updated = crud_course.update(db_session, db_obj=course, obj_in={"name": "SQL 102"})
    assert updated.name == "SQL 102"
    assert updated.updated_at >= before
    assert updated.updated_at >= updated.created_at


def test_caller_supplied_updated_at_is_overwritten(db_session: Session, course):
    stale = datetime(2000, 1, 1)
    updated = crud_course.update(db_session, db_obj=course, obj_in={"name": "Renamed", "updated_at": stale})
    assert updated.updated_at.year > 2000


def test_core_update_is_stamped_by_trigger(db_session: Session, course):
    db_session.execute(
        update(Course)
        .where(Course.id == course.id)
        .values(description="changed outside the ORM", updated_at=datetime(2000, 1, 1))
        .execution_options(synchronize_session=False)
    )
    db_session.commit()
    db_session.refresh(course)
    assert course.description == "changed outside the ORM"
    assert course.updated_at.year > 2000


def test_raw_sql_update_is_stamped_by_trigger(db_session: Session, student, program, enrollment):
    db_session.execute(
        text("UPDATE enrollments SET status = 'active', updated_at = '2000-01-01 00:00:00' WHERE id = :id"),
        {"id": enrollment.id},
    )
    db_session.commit()
    refreshed = crud_enrollment.get(db_session, id=enrollment.id)
    db_session.refresh(refreshed)
    assert refreshed.status == EnrollmentStatusEnum.ACTIVE
    assert refreshed.updated_at.year > 2000


def test_no_op_flush_leaves_updated_at_alone(db_session: Session):
    group = factories.create_teaching_group(db_session, slug="data-team")
    stamped = group.updated_at
    crud_teaching_group.update(db_session, db_obj=group, obj_in={})
    assert group.updated_at == stamped
