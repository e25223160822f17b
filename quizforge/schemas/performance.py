from pydantic import Field

from quizforge.schemas.base import CamelModel


class SubjectPerformance(CamelModel):
    """과목별 시험 성적 요약"""
    subject_name: str
    attempts: int
    average_score: float
    pass_rate: float = Field(..., ge=0, le=100)


class TopicPerformance(CamelModel):
    """주제별 퀴즈 성적 요약"""
    topic_name: str
    subject_name: str
    attempts: int
    average_score: float
    pass_rate: float = Field(..., ge=0, le=100)
