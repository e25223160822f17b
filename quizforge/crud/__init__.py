from quizforge.crud.attempt import (
    create_exam_attempt,
    create_quiz_attempt,
    get_all_exam_attempts,
    get_all_quiz_attempts,
)
from quizforge.crud.exam import (
    delete_exam,
    delete_exam_topics,
    get_exam_by_id,
    get_exam_topics,
    get_exams_by_subject_id,
    insert_exam,
    insert_exam_topics,
    update_exam_base,
)
from quizforge.crud.performance import (
    get_subject_performance,
    get_topic_performance,
)
from quizforge.crud.question import (
    delete_question,
    delete_variant_rows,
    get_question_by_id,
    get_question_type,
    get_questions_by_topic_id,
    get_variant_rows,
    insert_question,
    insert_variant_rows,
    update_question_base,
)
from quizforge.crud.quiz import (
    create_quiz,
    delete_quiz,
    get_quiz_by_id,
    get_quizzes_by_topic_id,
    update_quiz,
)
from quizforge.crud.subject import (
    create_subject,
    delete_subject,
    get_all_subjects,
    get_subject_by_id,
    update_subject,
)
from quizforge.crud.topic import (
    create_topic,
    delete_topic,
    get_topic_by_id,
    get_topics_by_subject_id,
    update_topic,
)

__all__ = [
    "get_subject_by_id",
    "get_all_subjects",
    "create_subject",
    "update_subject",
    "delete_subject",
    "get_topic_by_id",
    "get_topics_by_subject_id",
    "create_topic",
    "update_topic",
    "delete_topic",
    "get_question_by_id",
    "get_question_type",
    "get_questions_by_topic_id",
    "get_variant_rows",
    "insert_question",
    "update_question_base",
    "insert_variant_rows",
    "delete_variant_rows",
    "delete_question",
    "get_quiz_by_id",
    "get_quizzes_by_topic_id",
    "create_quiz",
    "update_quiz",
    "delete_quiz",
    "get_exam_by_id",
    "get_exams_by_subject_id",
    "get_exam_topics",
    "insert_exam",
    "update_exam_base",
    "insert_exam_topics",
    "delete_exam_topics",
    "delete_exam",
    "create_quiz_attempt",
    "create_exam_attempt",
    "get_all_quiz_attempts",
    "get_all_exam_attempts",
    "get_subject_performance",
    "get_topic_performance",
]
