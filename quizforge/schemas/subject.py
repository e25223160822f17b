from datetime import datetime

from pydantic import Field

from quizforge.schemas.base import CamelModel


class SubjectCreateRequest(CamelModel):
    """과목 생성 요청 스키마"""
    name: str = Field(..., min_length=1, description="과목명")
    description: str | None = None
    color: str = Field(..., description="표시 색상 (예: #3B82F6)")
    icon: str | None = None


class SubjectUpdateRequest(SubjectCreateRequest):
    """과목 수정 요청 스키마"""


class SubjectResponse(CamelModel):
    """과목 응답 스키마"""
    id: int
    name: str
    description: str | None
    color: str
    icon: str | None
    created_at: datetime
    updated_at: datetime
