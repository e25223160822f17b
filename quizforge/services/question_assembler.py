"""
문제 분해/조립.

문제는 기본 행 1개와 유형별 답안 행 묶음(선택지, 빈칸, 순서 항목, 짝 맞추기) 중
정확히 하나로 저장된다. decompose는 요청을 (기본 행, 답안 묶음)으로 나누고,
compose는 저장된 행들을 하나의 QuestionWithDetails로 합친다.
부작용 없음: 실제 쓰기는 crud.question이 수행한다.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from quizforge.exceptions import InvalidQuestionVariantError
from quizforge.models.question import (
    Question,
    QuestionBlank,
    QuestionMatch,
    QuestionOption,
    QuestionOrderItem,
)
from quizforge.schemas import question as question_schema
from quizforge.schemas.question import BlankInputType, QuestionType

logger = logging.getLogger(__name__)

DEFAULT_NUMERIC_TOLERANCE = 0.1

# 유형별로 채워도 되는 요청 필드
ALLOWED_ARMS: dict[QuestionType, frozenset[str]] = {
    QuestionType.MULTIPLE_CHOICE: frozenset({"options"}),
    QuestionType.FILL_BLANK: frozenset({"blanks", "numeric_data"}),
    QuestionType.NUMERIC: frozenset({"blanks", "numeric_data"}),
    QuestionType.ORDERING: frozenset({"order_items"}),
    QuestionType.MATCHING: frozenset({"match_pairs"}),
}


@dataclass(frozen=True)
class OptionsVariant:
    rows: list[dict[str, Any]] = field(default_factory=list)
    model = QuestionOption


@dataclass(frozen=True)
class BlanksVariant:
    rows: list[dict[str, Any]] = field(default_factory=list)
    model = QuestionBlank


@dataclass(frozen=True)
class OrderItemsVariant:
    rows: list[dict[str, Any]] = field(default_factory=list)
    model = QuestionOrderItem


@dataclass(frozen=True)
class MatchPairsVariant:
    rows: list[dict[str, Any]] = field(default_factory=list)
    model = QuestionMatch


QuestionVariant = Union[OptionsVariant, BlanksVariant, OrderItemsVariant, MatchPairsVariant]


@dataclass(frozen=True)
class DecomposedQuestion:
    """기본 행 컬럼 값 + 유형에 맞는 답안 묶음 하나"""
    base: dict[str, Any]
    variant: QuestionVariant


def parse_tolerance(raw: str | None, default: float = DEFAULT_NUMERIC_TOLERANCE) -> float:
    """허용 오차 문자열 파싱. 실패하면 오류 대신 기본값을 사용한다."""
    # 앞뒤 공백이나 밑줄(1_0)이 섞인 값은 숫자로 보지 않음
    text = raw if isinstance(raw, str) and raw == raw.strip() and "_" not in raw else None
    try:
        value = float(text)
    except (TypeError, ValueError):
        logger.warning(f"허용 오차 파싱 실패, 기본값 사용: raw={raw!r}, default={default}")
        return default

    if not math.isfinite(value):
        logger.warning(f"허용 오차가 유한한 값이 아님, 기본값 사용: raw={raw!r}, default={default}")
        return default
    return value


def populated_arms(payload: question_schema.QuestionUpdateRequest) -> set[str]:
    """요청에서 실제로 값이 들어 있는 답안 필드"""
    arms = set()
    if payload.options:
        arms.add("options")
    if payload.blanks:
        arms.add("blanks")
    if payload.numeric_data is not None:
        arms.add("numeric_data")
    if payload.order_items:
        arms.add("order_items")
    if payload.match_pairs:
        arms.add("match_pairs")
    return arms


def check_variant_arms(question_type: QuestionType, payload: question_schema.QuestionUpdateRequest):
    """유형과 맞지 않는 답안 필드가 채워져 있으면 거부"""
    unexpected = sorted(populated_arms(payload) - ALLOWED_ARMS[question_type])
    if unexpected:
        raise InvalidQuestionVariantError(question_type.value, unexpected)


def _numeric_blank_row(numeric_data: question_schema.NumericDataCreate, default_tolerance: float) -> dict[str, Any]:
    # 숫자 정답은 blank_index 0번 빈칸 하나로 저장한다
    return {
        "blank_index": 0,
        "correct_answer": numeric_data.correct_answer,
        "acceptable_answers": None,
        "is_numeric": True,
        "numeric_tolerance": parse_tolerance(numeric_data.tolerance, default_tolerance),
        "unit": numeric_data.unit,
        "input_type": BlankInputType.INPUT.value,
        "dropdown_options": None,
    }


def _build_variant(
    question_type: QuestionType,
    payload: question_schema.QuestionUpdateRequest,
    default_tolerance: float,
) -> QuestionVariant:
    if question_type == QuestionType.MULTIPLE_CHOICE:
        return OptionsVariant([
            {
                "option_text": option.option_text,
                "option_image_path": option.option_image_path,
                "is_correct": option.is_correct,
                "display_order": option.display_order,
            }
            for option in payload.options
        ])

    if question_type in (QuestionType.FILL_BLANK, QuestionType.NUMERIC):
        rows = [
            {
                "blank_index": blank.blank_index,
                "correct_answer": blank.correct_answer,
                "acceptable_answers": blank.acceptable_answers,
                "is_numeric": blank.is_numeric,
                "numeric_tolerance": blank.numeric_tolerance,
                "unit": blank.unit,
                "input_type": blank.input_type.value,
                "dropdown_options": blank.dropdown_options,
            }
            for blank in payload.blanks
        ]
        if payload.numeric_data is not None:
            rows.append(_numeric_blank_row(payload.numeric_data, default_tolerance))
        return BlanksVariant(rows)

    if question_type == QuestionType.ORDERING:
        return OrderItemsVariant([
            {"item_text": item.text, "correct_position": item.correct_position}
            for item in payload.order_items or []
        ])

    return MatchPairsVariant([
        {
            "left_item": pair.left_item,
            "right_item": pair.right_item,
            "left_image_path": pair.left_image_path,
            "right_image_path": pair.right_image_path,
            "display_order": index,
        }
        for index, pair in enumerate(payload.match_pairs or [])
    ])


def decompose(
    payload: question_schema.QuestionUpdateRequest,
    question_type: QuestionType | None = None,
    default_tolerance: float = DEFAULT_NUMERIC_TOLERANCE,
) -> DecomposedQuestion:
    """요청 → (기본 행, 답안 묶음)

    Args:
        payload: 생성 또는 수정 요청
        question_type: 수정 요청일 때 저장된 문제 유형 (생성 요청은 payload의 유형 사용)
        default_tolerance: 허용 오차 파싱 실패 시 기본값

    Raises:
        InvalidQuestionVariantError: 유형과 맞지 않는 답안 필드가 채워진 경우
    """
    if isinstance(payload, question_schema.QuestionCreateRequest):
        question_type = payload.question_type
    if question_type is None:
        raise ValueError("question_type is required for update payloads")
    question_type = QuestionType(question_type)

    check_variant_arms(question_type, payload)

    base = {
        "question_text": payload.question_text,
        "question_image_path": payload.question_image_path,
        "explanation": payload.explanation,
        "difficulty": payload.difficulty.value,
        "points": payload.points,
        "source": payload.source,
    }
    if isinstance(payload, question_schema.QuestionCreateRequest):
        base.update(
            subject_id=payload.subject_id,
            topic_id=payload.topic_id,
            question_type=question_type.value,
        )

    return DecomposedQuestion(base=base, variant=_build_variant(question_type, payload, default_tolerance))


def _sorted(rows: Iterable, key: str) -> list:
    return sorted(rows, key=lambda row: (getattr(row, key), row.id))


def compose(
    question: Question,
    options: Iterable[QuestionOption] = (),
    blanks: Iterable[QuestionBlank] = (),
    order_items: Iterable[QuestionOrderItem] = (),
    matches: Iterable[QuestionMatch] = (),
) -> question_schema.QuestionWithDetails:
    """저장된 행 → QuestionWithDetails (4개 목록 모두 포함, 각 정렬 키 오름차순)"""
    return question_schema.QuestionWithDetails(
        id=question.id,
        subject_id=question.subject_id,
        topic_id=question.topic_id,
        question_type=question.question_type,
        question_text=question.question_text,
        question_image_path=question.question_image_path,
        explanation=question.explanation,
        difficulty=question.difficulty,
        points=question.points,
        source=question.source,
        created_at=question.created_at,
        updated_at=question.updated_at,
        options=[
            question_schema.QuestionOptionResponse.model_validate(option)
            for option in _sorted(options, "display_order")
        ],
        blanks=[
            question_schema.QuestionBlankResponse(
                id=blank.id,
                question_id=blank.question_id,
                blank_index=blank.blank_index,
                correct_answer=blank.correct_answer,
                acceptable_answers=blank.acceptable_answers,
                is_numeric=blank.is_numeric,
                numeric_tolerance=blank.numeric_tolerance,
                unit=blank.unit,
                input_type=blank.input_type or BlankInputType.INPUT,
                dropdown_options=blank.dropdown_options,
            )
            for blank in _sorted(blanks, "blank_index")
        ],
        order_items=[
            question_schema.QuestionOrderItemResponse.model_validate(item)
            for item in _sorted(order_items, "correct_position")
        ],
        matches=[
            question_schema.QuestionMatchResponse.model_validate(match)
            for match in _sorted(matches, "display_order")
        ],
    )
