from quizforge.commands import exams, questions, quizzes, subjects, topics
from quizforge.commands.base import CommandResult

__all__ = ["CommandResult", "subjects", "topics", "questions", "quizzes", "exams"]
