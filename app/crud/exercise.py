from typing import List
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseUpdate


class CRUDExercise(CRUDBase[Exercise, ExerciseCreate, ExerciseUpdate]):
    def get_by_lesson(self, db: Session, *, lesson_id: int) -> List[Exercise]:
        return db.query(Exercise).filter(Exercise.lesson_id == lesson_id).order_by(Exercise.id).all()


exercise = CRUDExercise(Exercise)
