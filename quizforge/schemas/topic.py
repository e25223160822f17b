from datetime import datetime

from pydantic import Field

from quizforge.schemas.base import CamelModel


class TopicCreateRequest(CamelModel):
    """주제 생성 요청 스키마"""
    subject_id: int = Field(..., description="소속 과목 ID")
    name: str = Field(..., min_length=1)
    description: str | None = None
    week_number: int | None = Field(None, description="수업 주차 (선택사항)")


class TopicUpdateRequest(CamelModel):
    """주제 수정 요청 스키마 (소속 과목은 변경 불가)"""
    name: str = Field(..., min_length=1)
    description: str | None = None
    week_number: int | None = None


class TopicResponse(CamelModel):
    """주제 응답 스키마"""
    id: int
    subject_id: int
    name: str
    description: str | None
    week_number: int | None
    created_at: datetime
    updated_at: datetime
