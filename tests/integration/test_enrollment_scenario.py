import pytest
from decimal import Decimal
from sqlalchemy.orm import Session
from app.core.constants import EnrollmentStatusEnum, PaymentStatusEnum, UserRoleEnum
from app.core.exceptions import UniqueViolation
from app.crud.course import course as crud_course
from app.crud.enrollment import enrollment as crud_enrollment
from app.crud.lesson import lesson as crud_lesson
from app.crud.module import module as crud_module
from app.crud.payment import payment as crud_payment
from app.crud.program import program as crud_program
from app.crud.user import user as crud_user
from app.schemas.course import CourseCreate
from app.schemas.enrollment import EnrollmentCreate
from app.schemas.lesson import LessonCreate
from app.schemas.module import ModuleCreate
from app.schemas.payment import PaymentCreate
from app.schemas.program import ProgramCreate
from app.schemas.user import UserCreate


def test_program_to_payment_flow(db_session: Session):
    """
    Build a program with a module, a course and a lesson, enroll a student and
    record a pending payment. A second enrollment for the same pair must fail.
    """
    print("\n[TEST] Program to payment flow")

    print("[1] Creating program and module")
    program = crud_program.create(db_session, obj_in=ProgramCreate(
        name="Intro to SQL", price=Decimal("99.00"), program_type="certificate"
    ))
    module = crud_module.create(db_session, obj_in=ModuleCreate(name="Basics"))
    crud_module.add_to_program(db_session, module_id=module.id, program_id=program.id)

    print("[2] Creating course and lesson")
    course = crud_course.create(db_session, obj_in=CourseCreate(name="SQL 101"))
    crud_module.add_to_course(db_session, module_id=module.id, course_id=course.id)
    lesson = crud_lesson.create(db_session, obj_in=LessonCreate(name="SELECT", course_id=course.id, position=1))

    print("[3] Enrolling student and recording payment")
    student = crud_user.create(db_session, obj_in=UserCreate(name="Ada", email="a@x.com", role=UserRoleEnum.STUDENT))
    enrollment = crud_enrollment.create(db_session, obj_in=EnrollmentCreate(
        user_id=student.id, program_id=program.id, status=EnrollmentStatusEnum.PENDING
    ))
    payment = crud_payment.create(db_session, obj_in=PaymentCreate(
        enrollment_id=enrollment.id, amount=Decimal("99.00"), status=PaymentStatusEnum.PENDING
    ))
    print(f"[OK] Enrollment {enrollment.id} with payment {payment.id}")

    assert program.price == Decimal("99.00")
    assert program.program_type == "certificate"
    assert student.role == "student"
    assert enrollment.status == EnrollmentStatusEnum.PENDING
    assert payment.status == PaymentStatusEnum.PENDING
    assert payment.paid_at is None
    assert [m.id for m in crud_module.get_by_program(db_session, program_id=program.id)] == [module.id]
    assert [m.id for m in crud_module.get_by_course(db_session, course_id=course.id)] == [module.id]
    assert [l.id for l in crud_lesson.get_by_course(db_session, course_id=course.id)] == [lesson.id]

    print("[4] Re-enrolling the same student")
    with pytest.raises(UniqueViolation) as exc_info:
        crud_enrollment.create(db_session, obj_in=EnrollmentCreate(
            user_id=student.id, program_id=program.id, status=EnrollmentStatusEnum.ACTIVE
        ))
    assert exc_info.value.constraint == "enrollments_user_id_program_id_key"
    assert crud_payment.get_by_enrollment(db_session, enrollment_id=enrollment.id)[0].id == payment.id
    print("[OK] Duplicate enrollment rejected")
