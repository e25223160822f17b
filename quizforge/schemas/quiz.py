from datetime import datetime
from enum import Enum

from pydantic import Field

from quizforge.schemas.base import CamelModel


class ShowAnswersAfter(str, Enum):
    EACH_QUESTION = "EACH_QUESTION"
    END_OF_QUIZ = "END_OF_QUIZ"
    NEVER = "NEVER"


class QuizUpdateRequest(CamelModel):
    """퀴즈 수정 요청 스키마 (소속 주제는 변경 불가)"""
    name: str = Field(..., min_length=1)
    description: str | None = None
    question_count: int = Field(..., ge=0, description="출제 문항 수")
    time_limit_minutes: int | None = Field(None, ge=0)
    shuffle_questions: bool = True
    shuffle_options: bool = True
    show_answers_after: ShowAnswersAfter = ShowAnswersAfter.END_OF_QUIZ
    passing_score_percent: int = Field(60, ge=0, le=100, description="합격 기준 (%)")


class QuizCreateRequest(QuizUpdateRequest):
    """퀴즈 생성 요청 스키마"""
    topic_id: int


class QuizResponse(CamelModel):
    """퀴즈 응답 스키마"""
    id: int
    topic_id: int
    name: str
    description: str | None
    question_count: int
    time_limit_minutes: int | None
    shuffle_questions: bool
    shuffle_options: bool
    show_answers_after: ShowAnswersAfter
    passing_score_percent: int
    created_at: datetime
    updated_at: datetime
