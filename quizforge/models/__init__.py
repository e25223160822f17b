from quizforge.models.base import Base, TimestampMixin
from quizforge.models.exam import Exam, ExamAttempt, ExamTopic
from quizforge.models.question import (
    Question,
    QuestionBlank,
    QuestionMatch,
    QuestionOption,
    QuestionOrderItem,
)
from quizforge.models.quiz import Quiz, QuizAttempt
from quizforge.models.subject import Subject
from quizforge.models.topic import Topic

__all__ = [
    "Base",
    "TimestampMixin",
    "Subject",
    "Topic",
    "Question",
    "QuestionOption",
    "QuestionBlank",
    "QuestionOrderItem",
    "QuestionMatch",
    "Quiz",
    "QuizAttempt",
    "Exam",
    "ExamTopic",
    "ExamAttempt",
]
