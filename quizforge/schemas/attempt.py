from datetime import datetime

from pydantic import Field

from quizforge.schemas.base import CamelModel


class AttemptCreateBase(CamelModel):
    """응시 결과 저장 요청 (점수/백분율은 호출자가 계산한 값을 그대로 저장)"""
    score: int
    max_score: int
    percentage: float = Field(..., allow_inf_nan=False)
    time_taken_seconds: int = Field(..., ge=0)


class QuizAttemptCreateRequest(AttemptCreateBase):
    quiz_id: int


class ExamAttemptCreateRequest(AttemptCreateBase):
    exam_id: int


class AttemptWithDetailsBase(CamelModel):
    id: int
    started_at: datetime
    completed_at: datetime | None
    score: int | None
    max_score: int | None
    percentage: float | None
    time_taken_seconds: int | None
    passed: bool = Field(..., description="조회 시점 합격 기준으로 계산")


class QuizAttemptWithDetails(AttemptWithDetailsBase):
    quiz_id: int
    quiz_name: str
    topic_name: str
    subject_name: str


class ExamAttemptWithDetails(AttemptWithDetailsBase):
    exam_id: int
    exam_name: str
    subject_name: str
