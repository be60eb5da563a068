from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.constants import ProgramCompletionStatusEnum
from app.crud.base import CRUDBase
from app.models.program_completion import ProgramCompletion
from app.schemas.program_completion import ProgramCompletionCreate, ProgramCompletionUpdate, check_completion_window


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite returns naive values for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CRUDProgramCompletion(CRUDBase[ProgramCompletion, ProgramCompletionCreate, ProgramCompletionUpdate]):
    def get_by_user_and_program(self, db: Session, *, user_id: int, program_id: int) -> Optional[ProgramCompletion]:
        return db.query(ProgramCompletion).filter(
            ProgramCompletion.user_id == user_id,
            ProgramCompletion.program_id == program_id
        ).first()

    def get_by_user(self, db: Session, *, user_id: int) -> List[ProgramCompletion]:
        return (
            db.query(ProgramCompletion)
            .filter(ProgramCompletion.user_id == user_id)
            .order_by(ProgramCompletion.id)
            .all()
        )

    def get_by_status(self, db: Session, *, status: ProgramCompletionStatusEnum, program_id: Optional[int] = None) -> List[ProgramCompletion]:
        query = db.query(ProgramCompletion).filter(
            ProgramCompletion.status == ProgramCompletionStatusEnum(status)
        )
        if program_id is not None:
            query = query.filter(ProgramCompletion.program_id == program_id)
        return query.order_by(ProgramCompletion.id).all()

    def mark_completed(self, db: Session, *, completion: ProgramCompletion, completed_at: Optional[datetime] = None) -> ProgramCompletion:
        completed_at = completed_at or datetime.now(timezone.utc)
        check_completion_window(_as_utc(completion.started_at), _as_utc(completed_at))
        return self.update(db, db_obj=completion, obj_in={
            "status": ProgramCompletionStatusEnum.COMPLETED,
            "completed_at": completed_at,
        })


program_completion = CRUDProgramCompletion(ProgramCompletion)
