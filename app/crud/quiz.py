from typing import List
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.quiz import Quiz
from app.schemas.quiz import QuizCreate, QuizUpdate


class CRUDQuiz(CRUDBase[Quiz, QuizCreate, QuizUpdate]):
    def get_by_lesson(self, db: Session, *, lesson_id: int) -> List[Quiz]:
        return db.query(Quiz).filter(Quiz.lesson_id == lesson_id).order_by(Quiz.id).all()


quiz = CRUDQuiz(Quiz)
