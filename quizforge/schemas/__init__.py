from quizforge.schemas.attempt import (
    ExamAttemptCreateRequest,
    ExamAttemptWithDetails,
    QuizAttemptCreateRequest,
    QuizAttemptWithDetails,
)
from quizforge.schemas.exam import (
    ExamCreateRequest,
    ExamTopicCreate,
    ExamTopicResponse,
    ExamUpdateRequest,
    ExamWithTopics,
)
from quizforge.schemas.performance import (
    SubjectPerformance,
    TopicPerformance,
)
from quizforge.schemas.question import (
    BlankInputType,
    Difficulty,
    MatchPairCreate,
    NumericDataCreate,
    OrderItemCreate,
    QuestionBlankCreate,
    QuestionBlankResponse,
    QuestionCreateRequest,
    QuestionMatchResponse,
    QuestionOptionCreate,
    QuestionOptionResponse,
    QuestionOrderItemResponse,
    QuestionType,
    QuestionUpdateRequest,
    QuestionWithDetails,
)
from quizforge.schemas.quiz import (
    QuizCreateRequest,
    QuizResponse,
    QuizUpdateRequest,
    ShowAnswersAfter,
)
from quizforge.schemas.subject import (
    SubjectCreateRequest,
    SubjectResponse,
    SubjectUpdateRequest,
)
from quizforge.schemas.topic import (
    TopicCreateRequest,
    TopicResponse,
    TopicUpdateRequest,
)

__all__ = [
    "SubjectCreateRequest",
    "SubjectUpdateRequest",
    "SubjectResponse",
    "TopicCreateRequest",
    "TopicUpdateRequest",
    "TopicResponse",
    "QuestionType",
    "Difficulty",
    "BlankInputType",
    "QuestionOptionCreate",
    "QuestionBlankCreate",
    "NumericDataCreate",
    "OrderItemCreate",
    "MatchPairCreate",
    "QuestionCreateRequest",
    "QuestionUpdateRequest",
    "QuestionOptionResponse",
    "QuestionBlankResponse",
    "QuestionOrderItemResponse",
    "QuestionMatchResponse",
    "QuestionWithDetails",
    "ShowAnswersAfter",
    "QuizCreateRequest",
    "QuizUpdateRequest",
    "QuizResponse",
    "ExamTopicCreate",
    "ExamCreateRequest",
    "ExamUpdateRequest",
    "ExamTopicResponse",
    "ExamWithTopics",
    "QuizAttemptCreateRequest",
    "ExamAttemptCreateRequest",
    "QuizAttemptWithDetails",
    "ExamAttemptWithDetails",
    "SubjectPerformance",
    "TopicPerformance",
]
