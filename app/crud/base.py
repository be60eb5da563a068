from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session
from app.core.database import Base
from app.core.decorators import translate_integrity_errors
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Repository for one model.

    Models carrying ``deleted_at`` are soft-deletable: every read hides deleted
    rows unless ``include_deleted=True`` is passed, and ``delete`` only stamps
    the marker. Other models are removed for real.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def soft_deletable(self) -> bool:
        return hasattr(self.model, 'deleted_at')

    def _query(self, db: Session, *, include_deleted: bool = False) -> Query:
        query = db.query(self.model)
        if self.soft_deletable and not include_deleted:
            query = query.filter(self.model.deleted_at.is_(None))
        return query

    def _column_names(self) -> List[str]:
        return [attr.key for attr in inspect(self.model).column_attrs]

    def get(self, db: Session, id: Any, *, include_deleted: bool = False) -> Optional[ModelType]:
        return self._query(db, include_deleted=include_deleted).filter(self.model.id == id).first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100, include_deleted: bool = False
    ) -> List[ModelType]:
        return (
            self._query(db, include_deleted=include_deleted)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self, db: Session, *, include_deleted: bool = False) -> int:
        return self._query(db, include_deleted=include_deleted).count()

    @translate_integrity_errors
    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], commit: bool = True) -> ModelType:
        if isinstance(obj_in, dict):
            obj_in_data = obj_in
        else:
            obj_in_data = obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.flush() # Populate ID and server defaults
        db.refresh(db_obj)
        if commit:
            db.commit()
        return db_obj

    @translate_integrity_errors
    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]], commit: bool = True
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field in self._column_names():
            if field in update_data:
                setattr(db_obj, field, update_data[field])
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    @translate_integrity_errors
    def delete(self, db: Session, *, id: int, commit: bool = True) -> Optional[ModelType]:
        obj = self.get(db, id=id)
        if not obj:
            return None

        if self.soft_deletable:
            obj.deleted_at = datetime.now(timezone.utc)
            db.add(obj)
            db.flush()
            logger.info(f"Soft deleted {self.model.__tablename__} id={id}")
        else:
            db.delete(obj)
            db.flush()
        if commit:
            db.commit()
        return obj

    @translate_integrity_errors
    def restore(self, db: Session, *, id: int, commit: bool = True) -> Optional[ModelType]:
        if not self.soft_deletable:
            raise TypeError(f"{self.model.__name__} is not soft-deletable")
        obj = self.get(db, id=id, include_deleted=True)
        if not obj or obj.deleted_at is None:
            return obj
        obj.deleted_at = None
        db.add(obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(obj)
        logger.info(f"Restored {self.model.__tablename__} id={id}")
        return obj
