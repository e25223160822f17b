from datetime import datetime
from enum import Enum

from pydantic import Field

from quizforge.schemas.base import CamelModel


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    FILL_BLANK = "FILL_BLANK"
    NUMERIC = "NUMERIC"
    ORDERING = "ORDERING"
    MATCHING = "MATCHING"


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class BlankInputType(str, Enum):
    INPUT = "INPUT"
    DROPDOWN = "DROPDOWN"


class QuestionOptionCreate(CamelModel):
    """선택지 입력"""
    option_text: str
    option_image_path: str | None = None
    is_correct: bool = False
    display_order: int = 0


class QuestionBlankCreate(CamelModel):
    """빈칸 입력"""
    blank_index: int
    correct_answer: str
    acceptable_answers: str | None = Field(None, description="직렬화된 대체 정답 목록")
    is_numeric: bool = False
    numeric_tolerance: float | None = None
    unit: str | None = None
    input_type: BlankInputType = BlankInputType.INPUT
    dropdown_options: str | None = None


class NumericDataCreate(CamelModel):
    """숫자 정답 입력 (빈칸 0번으로 저장됨)"""
    correct_answer: str
    tolerance: str = Field(..., description="허용 오차 (문자열, 파싱 실패 시 기본값 사용)")
    unit: str | None = None


class OrderItemCreate(CamelModel):
    """순서 항목 입력"""
    text: str
    correct_position: int


class MatchPairCreate(CamelModel):
    """짝 맞추기 항목 입력 (표시 순서는 목록 순서)"""
    left_item: str
    right_item: str
    left_image_path: str | None = None
    right_image_path: str | None = None


class QuestionUpdateRequest(CamelModel):
    """문제 수정 요청 스키마 (과목/주제/유형은 변경 불가)"""
    question_text: str = Field(..., min_length=1)
    question_image_path: str | None = None
    explanation: str | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    points: int = Field(1, ge=0)
    source: str | None = None
    options: list[QuestionOptionCreate] = Field(default_factory=list)
    blanks: list[QuestionBlankCreate] = Field(default_factory=list)
    numeric_data: NumericDataCreate | None = None
    order_items: list[OrderItemCreate] | None = None
    match_pairs: list[MatchPairCreate] | None = None


class QuestionCreateRequest(QuestionUpdateRequest):
    """문제 생성 요청 스키마"""
    subject_id: int
    topic_id: int
    question_type: QuestionType


class QuestionOptionResponse(CamelModel):
    id: int
    question_id: int
    option_text: str
    option_image_path: str | None
    is_correct: bool
    display_order: int


class QuestionBlankResponse(CamelModel):
    id: int
    question_id: int
    blank_index: int
    correct_answer: str
    acceptable_answers: str | None
    is_numeric: bool
    numeric_tolerance: float | None
    unit: str | None
    input_type: BlankInputType
    dropdown_options: str | None


class QuestionOrderItemResponse(CamelModel):
    id: int
    question_id: int
    item_text: str
    correct_position: int


class QuestionMatchResponse(CamelModel):
    id: int
    question_id: int
    left_item: str
    right_item: str
    left_image_path: str | None
    right_image_path: str | None
    display_order: int


class QuestionWithDetails(CamelModel):
    """문제 + 4종 답안 목록 (해당 없는 목록은 빈 배열)"""
    id: int
    subject_id: int
    topic_id: int
    question_type: QuestionType
    question_text: str
    question_image_path: str | None
    explanation: str | None
    difficulty: Difficulty
    points: int
    source: str | None
    created_at: datetime
    updated_at: datetime
    options: list[QuestionOptionResponse] = Field(default_factory=list)
    blanks: list[QuestionBlankResponse] = Field(default_factory=list)
    order_items: list[QuestionOrderItemResponse] = Field(default_factory=list)
    matches: list[QuestionMatchResponse] = Field(default_factory=list)
