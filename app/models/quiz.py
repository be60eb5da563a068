from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import TimestampMixin

JSONDocument = JSON().with_variant(JSONB(), "postgresql")

class Quiz(TimestampMixin, Base):
    __tablename__ = "quizzes"
    __table_args__ = {"comment": "Stores quizzes associated with lessons"}

    id = Column(Integer, primary_key=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False, index=True,
                       comment="Foreign key reference to the lessons table")
    name = Column(String(255), nullable=False, comment="The name of the quiz")
    # Tree of questions, each with its answers
    content = Column(JSONDocument, nullable=False, comment="JSONB structure containing quiz questions and answers")

    lesson = relationship("Lesson", back_populates="quizzes")

    @property
    def questions(self):
        if isinstance(self.content, dict):
            return self.content.get("questions", [])
        return []
