import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pydantic import ValidationError
from app.core.constants import EnrollmentStatusEnum
from app.schemas.enrollment import EnrollmentCreate
from app.schemas.lesson import LessonCreate
from app.schemas.payment import PaymentCreate
from app.schemas.program import Program, ProgramCreate
from app.schemas.program_completion import ProgramCompletionCreate, ProgramCompletionUpdate
from app.schemas.quiz import QuizCreate, QuizUpdate
from app.schemas.teaching_group import TeachingGroupCreate
from app.schemas.user import UserCreate, UserUpdate


@pytest.mark.parametrize("price", ["0", "-10"])
def test_program_price_validated_early(price):
    with pytest.raises(ValidationError):
        ProgramCreate(name="Free", price=Decimal(price))


def test_program_price_precision():
    assert ProgramCreate(name="Cheap", price=Decimal("0.01")).price == Decimal("0.01")
    with pytest.raises(ValidationError):
        ProgramCreate(name="Odd", price=Decimal("1.001"))


def test_program_type_is_a_closed_set_on_write():
    assert ProgramCreate(name="BSc", price=Decimal("10"), program_type="degree").program_type == "degree"
    with pytest.raises(ValidationError):
        ProgramCreate(name="Bootcamp", price=Decimal("10"), program_type="bootcamp")


def test_program_read_schema_accepts_legacy_program_type():
    program = Program(id=1, name="Old", price=Decimal("5"), program_type="bootcamp")
    assert program.program_type == "bootcamp"


def test_payment_amount_validated_early():
    with pytest.raises(ValidationError):
        PaymentCreate(enrollment_id=1, amount=Decimal("0"))


def test_lesson_position_validated_early():
    with pytest.raises(ValidationError):
        LessonCreate(name="Zero", position=0)
    assert LessonCreate(name="One", position=1).position == 1


def test_user_role_and_email():
    user = UserCreate(name="Ada", email="Ada@Example.com")
    assert user.email == "ada@example.com"
    assert user.role == "student"
    with pytest.raises(ValidationError):
        UserCreate(name="Eve", email="eve@example.com", role="superuser")
    with pytest.raises(ValidationError):
        UserCreate(name="Bob", email="not-an-email")
    with pytest.raises(ValidationError):
        UserUpdate(name="   ")


def test_enrollment_status_defaults_to_pending():
    enrollment = EnrollmentCreate(user_id=1, program_id=2)
    assert enrollment.status == EnrollmentStatusEnum.PENDING.value
    with pytest.raises(ValidationError):
        EnrollmentCreate(user_id=1, program_id=2, status="paused")


def test_completion_cannot_finish_before_it_starts():
    started = datetime.now(timezone.utc)
    with pytest.raises(ValidationError):
        ProgramCompletionCreate(user_id=1, program_id=1, started_at=started, completed_at=started - timedelta(days=1))


def test_completion_update_cannot_finish_before_it_starts():
    started = datetime(2024, 2, 1, tzinfo=timezone.utc)
    with pytest.raises(ValidationError):
        ProgramCompletionUpdate(started_at=started, completed_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert ProgramCompletionUpdate(completed_at=started).completed_at == started


def test_teaching_group_slug_format():
    assert TeachingGroupCreate(slug="data-team").slug == "data-team"
    with pytest.raises(ValidationError):
        TeachingGroupCreate(slug="Data Team")


def test_quiz_content_shape():
    QuizCreate(lesson_id=1, name="Q", content={"questions": [{"text": "Why?", "answers": [{"text": "Because"}]}]})
    with pytest.raises(ValidationError):
        QuizCreate(lesson_id=1, name="Q", content={"questions": [{"answers": []}]})
    with pytest.raises(ValidationError):
        QuizUpdate(content={"questions": "none"})
