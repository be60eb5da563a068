import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session
from app.core.constants import (
    BlogStatusEnum,
    EnrollmentStatusEnum,
    PaymentStatusEnum,
    ProgramCompletionStatusEnum,
    ProgramTypeEnum,
    UserRoleEnum,
)
from app.crud.blog import blog as crud_blog
from app.crud.certificate import certificate as crud_certificate
from app.crud.course import course as crud_course
from app.crud.discussion import discussion as crud_discussion
from app.crud.enrollment import enrollment as crud_enrollment
from app.crud.exercise import exercise as crud_exercise
from app.crud.lesson import lesson as crud_lesson
from app.crud.module import module as crud_module
from app.crud.payment import payment as crud_payment
from app.crud.program import program as crud_program
from app.crud.program_completion import program_completion as crud_program_completion
from app.crud.quiz import quiz as crud_quiz
from app.crud.teaching_group import teaching_group as crud_teaching_group
from app.crud.user import user as crud_user
from app.schemas.blog import BlogCreate
from app.schemas.certificate import CertificateCreate
from app.schemas.course import CourseCreate
from app.schemas.discussion import DiscussionCreate
from app.schemas.enrollment import EnrollmentCreate
from app.schemas.exercise import ExerciseCreate
from app.schemas.lesson import LessonCreate
from app.schemas.module import ModuleCreate
from app.schemas.payment import PaymentCreate
from app.schemas.program import ProgramCreate
from app.schemas.program_completion import ProgramCompletionCreate
from app.schemas.quiz import QuizCreate
from app.schemas.teaching_group import TeachingGroupCreate
from app.schemas.user import UserCreate

SAMPLE_QUIZ = {
    "questions": [
        {
            "text": "Which clause filters rows?",
            "answers": [{"text": "WHERE", "is_correct": True}, {"text": "ORDER BY"}],
            "children": [{"text": "Does WHERE run before GROUP BY?", "answers": [{"text": "Yes", "is_correct": True}]}],
        }
    ]
}


def unique_suffix() -> str:
    return uuid.uuid4().hex[:8]


def create_program(db: Session, *, name: str = "Intro to SQL", price: str = "99.00",
                   program_type: Optional[ProgramTypeEnum] = ProgramTypeEnum.CERTIFICATE):
    return crud_program.create(db, obj_in=ProgramCreate(name=name, price=Decimal(price), program_type=program_type))


def create_module(db: Session, *, name: str = "Basics"):
    return crud_module.create(db, obj_in=ModuleCreate(name=name))


def create_course(db: Session, *, name: str = "SQL 101"):
    return crud_course.create(db, obj_in=CourseCreate(name=name, description="Relational basics"))


def create_lesson(db: Session, *, course_id: Optional[int], position: Optional[int] = None, name: str = "Lesson"):
    return crud_lesson.create(db, obj_in=LessonCreate(name=name, course_id=course_id, position=position))


def create_teaching_group(db: Session, *, slug: Optional[str] = None):
    return crud_teaching_group.create(db, obj_in=TeachingGroupCreate(slug=slug or f"group-{unique_suffix()}"))


def create_user(db: Session, *, email: Optional[str] = None, role: UserRoleEnum = UserRoleEnum.STUDENT,
                teaching_group_id: Optional[int] = None, name: str = "Test User"):
    return crud_user.create(db, obj_in=UserCreate(
        name=name,
        email=email or f"user-{unique_suffix()}@example.com",
        role=role,
        password_hash="not-a-real-hash",
        teaching_group_id=teaching_group_id,
    ))


def create_enrollment(db: Session, *, user_id: int, program_id: int,
                      status: EnrollmentStatusEnum = EnrollmentStatusEnum.PENDING):
    return crud_enrollment.create(db, obj_in=EnrollmentCreate(user_id=user_id, program_id=program_id, status=status))


def create_payment(db: Session, *, enrollment_id: int, amount: str = "99.00",
                   status: PaymentStatusEnum = PaymentStatusEnum.PENDING, paid_at: Optional[datetime] = None):
    return crud_payment.create(db, obj_in=PaymentCreate(
        enrollment_id=enrollment_id, amount=Decimal(amount), status=status, paid_at=paid_at
    ))


def create_program_completion(db: Session, *, user_id: int, program_id: int,
                              status: ProgramCompletionStatusEnum = ProgramCompletionStatusEnum.ACTIVE):
    return crud_program_completion.create(db, obj_in=ProgramCompletionCreate(
        user_id=user_id, program_id=program_id, status=status, started_at=datetime.now(timezone.utc)
    ))


def create_certificate(db: Session, *, user_id: int, program_id: int, issued_at: Optional[datetime] = None):
    return crud_certificate.create(db, obj_in=CertificateCreate(
        user_id=user_id,
        program_id=program_id,
        url=f"https://certs.example.com/{unique_suffix()}.pdf",
        issued_at=issued_at or datetime.now(timezone.utc),
    ))


def create_quiz(db: Session, *, lesson_id: int, name: str = "Checkpoint"):
    return crud_quiz.create(db, obj_in=QuizCreate(lesson_id=lesson_id, name=name, content=SAMPLE_QUIZ))


def create_exercise(db: Session, *, lesson_id: int, name: str = "Write a SELECT"):
    return crud_exercise.create(db, obj_in=ExerciseCreate(
        lesson_id=lesson_id, name=name, url="https://exercises.example.com/select"
    ))


def create_discussion(db: Session, *, lesson_id: int, user_id: int):
    return crud_discussion.create(db, obj_in=DiscussionCreate(
        lesson_id=lesson_id, user_id=user_id, text={"body": "Why is NULL not equal to NULL?", "replies": []}
    ))


def create_blog(db: Session, *, user_id: int, status: BlogStatusEnum = BlogStatusEnum.CREATED, name: str = "Notes"):
    return crud_blog.create(db, obj_in=BlogCreate(user_id=user_id, name=name, content="Body", status=status))
