import pytest
from sqlalchemy.orm import Session
from app.crud.course import course as crud_course
from app.crud.enrollment import enrollment as crud_enrollment
from app.crud.lesson import lesson as crud_lesson
from app.crud.module import module as crud_module
from app.crud.user import user as crud_user
from tests.helpers import factories


def test_soft_deleting_course_keeps_its_lessons(db_session: Session, course):
    first = factories.create_lesson(db_session, course_id=course.id, position=1, name="Select")
    second = factories.create_lesson(db_session, course_id=course.id, position=2, name="Join")

    deleted = crud_course.delete(db_session, id=course.id)
    assert deleted.deleted_at is not None
    assert crud_course.get(db_session, id=course.id) is None

    lessons = crud_lesson.get_by_course(db_session, course_id=course.id)
    assert [lesson.id for lesson in lessons] == [first.id, second.id]
    assert all(lesson.deleted_at is None for lesson in lessons)


def test_soft_deleted_rows_need_explicit_inclusion(db_session: Session, course):
    crud_course.delete(db_session, id=course.id)

    assert crud_course.get_multi(db_session) == []
    assert crud_course.count(db_session) == 0
    hidden = crud_course.get(db_session, id=course.id, include_deleted=True)
    assert hidden is not None
    assert hidden.is_deleted
    assert crud_course.count(db_session, include_deleted=True) == 1


def test_restore_makes_row_live_again(db_session: Session, course):
    crud_course.delete(db_session, id=course.id)
    restored = crud_course.restore(db_session, id=course.id)
    assert restored.deleted_at is None
    assert crud_course.get(db_session, id=course.id) is not None


def test_deleting_twice_is_a_no_op(db_session: Session, course):
    crud_course.delete(db_session, id=course.id)
    assert crud_course.delete(db_session, id=course.id) is None


def test_soft_deleted_lesson_hidden_from_course_listing(db_session: Session, course):
    kept = factories.create_lesson(db_session, course_id=course.id, position=1)
    dropped = factories.create_lesson(db_session, course_id=course.id, position=2)
    crud_lesson.delete(db_session, id=dropped.id)

    assert [lesson.id for lesson in crud_lesson.get_by_course(db_session, course_id=course.id)] == [kept.id]
    everything = crud_lesson.get_by_course(db_session, course_id=course.id, include_deleted=True)
    assert {lesson.id for lesson in everything} == {kept.id, dropped.id}


def test_soft_deleted_module_keeps_junction_rows(db_session: Session, course):
    module = factories.create_module(db_session)
    crud_module.add_to_course(db_session, module_id=module.id, course_id=course.id)
    crud_module.delete(db_session, id=module.id)

    assert crud_module.get_by_course(db_session, course_id=course.id) == []
    assert len(crud_module.get_by_course(db_session, course_id=course.id, include_deleted=True)) == 1


def test_soft_deleted_user_keeps_enrollments(db_session: Session, student, program, enrollment):
    crud_user.delete(db_session, id=student.id)
    assert crud_user.get(db_session, id=student.id) is None
    assert crud_user.get_by_email_with_soft_deleted(db_session, email=student.email) is not None
    assert crud_enrollment.get_by_user(db_session, user_id=student.id)[0].id == enrollment.id


def test_restore_rejected_for_hard_deleted_tables(db_session: Session, enrollment):
    with pytest.raises(TypeError):
        crud_enrollment.restore(db_session, id=enrollment.id)
