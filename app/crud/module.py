from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.decorators import translate_integrity_errors
from app.crud.base import CRUDBase
from app.models.course_module import CourseModule
from app.models.module import Module
from app.models.program_module import ProgramModule
from app.schemas.module import ModuleCreate, ModuleUpdate


class CRUDModule(CRUDBase[Module, ModuleCreate, ModuleUpdate]):

    def get_by_course(self, db: Session, *, course_id: int, include_deleted: bool = False) -> List[Module]:
        return (
            self._query(db, include_deleted=include_deleted)
            .join(CourseModule, CourseModule.module_id == Module.id)
            .filter(CourseModule.course_id == course_id)
            .order_by(Module.id)
            .all()
        )

    def get_by_program(self, db: Session, *, program_id: int, include_deleted: bool = False) -> List[Module]:
        return (
            self._query(db, include_deleted=include_deleted)
            .join(ProgramModule, ProgramModule.module_id == Module.id)
            .filter(ProgramModule.program_id == program_id)
            .order_by(Module.id)
            .all()
        )

    @translate_integrity_errors
    def add_to_course(self, db: Session, *, module_id: int, course_id: int, commit: bool = True) -> CourseModule:
        link = db.get(CourseModule, (course_id, module_id))
        if link is None:
            link = CourseModule(course_id=course_id, module_id=module_id)
            db.add(link)
            db.flush()
        if commit:
            db.commit()
        return link

    @translate_integrity_errors
    def remove_from_course(self, db: Session, *, module_id: int, course_id: int, commit: bool = True) -> Optional[CourseModule]:
        link = db.get(CourseModule, (course_id, module_id))
        if link is not None:
            db.delete(link)
            db.flush()
            if commit:
                db.commit()
        return link

    @translate_integrity_errors
    def add_to_program(self, db: Session, *, module_id: int, program_id: int, commit: bool = True) -> ProgramModule:
        link = db.get(ProgramModule, (module_id, program_id))
        if link is None:
            link = ProgramModule(module_id=module_id, program_id=program_id)
            db.add(link)
            db.flush()
        if commit:
            db.commit()
        return link

    @translate_integrity_errors
    def remove_from_program(self, db: Session, *, module_id: int, program_id: int, commit: bool = True) -> Optional[ProgramModule]:
        link = db.get(ProgramModule, (module_id, program_id))
        if link is not None:
            db.delete(link)
            db.flush()
            if commit:
                db.commit()
        return link


module = CRUDModule(Module)
