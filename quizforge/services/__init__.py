from quizforge.services.attempt_service import (
    list_exam_attempts,
    list_quiz_attempts,
    save_exam_attempt,
    save_quiz_attempt,
)
from quizforge.services.performance_service import (
    get_subject_performance,
    get_topic_performance,
)
from quizforge.services.question_assembler import compose, decompose

__all__ = [
    "compose",
    "decompose",
    "save_quiz_attempt",
    "save_exam_attempt",
    "list_quiz_attempts",
    "list_exam_attempts",
    "get_subject_performance",
    "get_topic_performance",
]
