from datetime import datetime

from pydantic import Field

from quizforge.schemas.base import CamelModel
from quizforge.schemas.quiz import ShowAnswersAfter


class ExamTopicCreate(CamelModel):
    """주제별 출제 문항 수 (주제의 실제 문항 수는 검증하지 않음)"""
    topic_id: int
    question_count: int = Field(..., ge=0)


class ExamUpdateRequest(CamelModel):
    """시험 수정 요청 스키마 (소속 과목은 변경 불가)"""
    name: str = Field(..., min_length=1)
    description: str | None = None
    total_question_count: int = Field(..., ge=0)
    time_limit_minutes: int | None = Field(None, ge=0)
    shuffle_questions: bool = True
    shuffle_options: bool = True
    show_answers_after: ShowAnswersAfter = ShowAnswersAfter.END_OF_QUIZ
    passing_score_percent: int = Field(60, ge=0, le=100)
    topics: list[ExamTopicCreate] = Field(default_factory=list)


class ExamCreateRequest(ExamUpdateRequest):
    """시험 생성 요청 스키마"""
    subject_id: int


class ExamTopicResponse(CamelModel):
    id: int
    exam_id: int
    topic_id: int
    topic_name: str
    question_count: int


class ExamWithTopics(CamelModel):
    """시험 + 주제별 출제 구성"""
    id: int
    subject_id: int
    name: str
    description: str | None
    total_question_count: int
    time_limit_minutes: int | None
    shuffle_questions: bool
    shuffle_options: bool
    show_answers_after: ShowAnswersAfter
    passing_score_percent: int
    created_at: datetime
    updated_at: datetime
    topics: list[ExamTopicResponse] = Field(default_factory=list)
