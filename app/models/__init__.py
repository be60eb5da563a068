from app.core.database import Base
from app.core.timestamps import install_updated_at_triggers
from app.models.enums import install_standalone_enum_types
from app.models.course import Course
from app.models.module import Module
from app.models.program import Program
from app.models.course_module import CourseModule, course_modules
from app.models.program_module import ProgramModule, program_modules
from app.models.lesson import Lesson
from app.models.teaching_group import TeachingGroup
from app.models.user import User
from app.models.enrollment import Enrollment
from app.models.payment import Payment
from app.models.program_completion import ProgramCompletion
from app.models.certificate import Certificate
from app.models.quiz import Quiz
from app.models.exercise import Exercise
from app.models.discussion import Discussion
from app.models.blog import Blog

install_standalone_enum_types(Base.metadata)
install_updated_at_triggers(Base.metadata)

__all__ = [
    "Base",
    "Course",
    "Module",
    "Program",
    "CourseModule",
    "ProgramModule",
    "course_modules",
    "program_modules",
    "Lesson",
    "TeachingGroup",
    "User",
    "Enrollment",
    "Payment",
    "ProgramCompletion",
    "Certificate",
    "Quiz",
    "Exercise",
    "Discussion",
    "Blog",
]
