from sqlalchemy import Column, DateTime, event
from sqlalchemy.orm import declared_attr
from sqlalchemy.sql import func
from app.core.timestamps import stamp_updated_at


class TimestampMixin:
    @declared_attr
    def created_at(cls):
        return Column(DateTime(timezone=True), server_default=func.now())

    @declared_attr
    def updated_at(cls):
        return Column(DateTime(timezone=True), server_default=func.now())


class SoftDeleteMixin:
    """Rows are hidden, never removed: a null ``deleted_at`` means live."""

    @declared_attr
    def deleted_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=True,
            comment=f"Soft delete timestamp to mark {cls.__tablename__} as deleted without removing them",
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


event.listen(TimestampMixin, "before_update", stamp_updated_at, propagate=True)
