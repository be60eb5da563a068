from sqlalchemy.orm import Session
from typing import List

from app.core.constants import ProgramTypeEnum
from app.crud.base import CRUDBase
from app.models.program import Program
from app.models.program_module import ProgramModule
from app.schemas.program import ProgramCreate, ProgramUpdate


class CRUDProgram(CRUDBase[Program, ProgramCreate, ProgramUpdate]):

    def get_by_type(self, db: Session, *, program_type: ProgramTypeEnum, skip: int = 0, limit: int = 100) -> List[Program]:
        return (
            db.query(Program)
            .filter(Program.program_type == ProgramTypeEnum(program_type).value)
            .order_by(Program.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_module(self, db: Session, *, module_id: int) -> List[Program]:
        return (
            db.query(Program)
            .join(ProgramModule, ProgramModule.program_id == Program.id)
            .filter(ProgramModule.module_id == module_id)
            .order_by(Program.id)
            .all()
        )


program = CRUDProgram(Program)
