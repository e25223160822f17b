"""문제 분해/조립 단위 테스트 (DB 없음)"""
from datetime import datetime
from types import SimpleNamespace

import pytest

from quizforge.exceptions import ErrorKind, InvalidQuestionVariantError
from quizforge.schemas import question as question_schema
from quizforge.schemas.question import QuestionType
from quizforge.services import question_assembler


def test_parse_tolerance():
    assert question_assembler.parse_tolerance("0.25") == pytest.approx(0.25)
    assert question_assembler.parse_tolerance("1e-3") == pytest.approx(0.001)
    assert question_assembler.parse_tolerance("-0.5") == pytest.approx(-0.5)


@pytest.mark.parametrize("raw", ["abc", "", None, "nan", "inf", "1_0", " 0.2", "0.2\n"])
def test_parse_tolerance_falls_back_to_default(raw):
    """해석 불가/유한하지 않은 값은 기본값"""
    assert question_assembler.parse_tolerance(raw) == pytest.approx(0.1)
    assert question_assembler.parse_tolerance(raw, default=0.5) == pytest.approx(0.5)


def test_decompose_create_request():
    """생성 요청은 과목/주제/유형까지 기본 행에 포함"""
    request = question_schema.QuestionCreateRequest(
        subject_id=1,
        topic_id=2,
        question_type=QuestionType.MULTIPLE_CHOICE,
        question_text="?",
        difficulty=question_schema.Difficulty.EASY,
        options=[question_schema.QuestionOptionCreate(option_text="a", is_correct=True)],
    )

    decomposed = question_assembler.decompose(request)

    assert decomposed.base["subject_id"] == 1
    assert decomposed.base["topic_id"] == 2
    assert decomposed.base["question_type"] == "MULTIPLE_CHOICE"
    assert decomposed.base["difficulty"] == "EASY"
    assert isinstance(decomposed.variant, question_assembler.OptionsVariant)
    assert decomposed.variant.rows == [
        {"option_text": "a", "option_image_path": None, "is_correct": True, "display_order": 0}
    ]


def test_decompose_update_request_needs_stored_type():
    """수정 요청은 저장된 유형을 함께 넘겨야 함"""
    request = question_schema.QuestionUpdateRequest(question_text="?")

    with pytest.raises(ValueError):
        question_assembler.decompose(request)

    decomposed = question_assembler.decompose(request, QuestionType.ORDERING)
    assert "question_type" not in decomposed.base
    assert "subject_id" not in decomposed.base
    assert decomposed.variant == question_assembler.OrderItemsVariant([])


def test_numeric_blank_appended_after_explicit_blanks():
    """숫자 정답 빈칸은 명시적 빈칸 뒤에 추가"""
    request = question_schema.QuestionUpdateRequest(
        question_text="?",
        blanks=[question_schema.QuestionBlankCreate(blank_index=1, correct_answer="kg")],
        numeric_data=question_schema.NumericDataCreate(correct_answer="9.8", tolerance="0.2", unit="m/s²"),
    )

    variant = question_assembler.decompose(request, QuestionType.FILL_BLANK).variant

    assert isinstance(variant, question_assembler.BlanksVariant)
    assert [row["blank_index"] for row in variant.rows] == [1, 0]
    numeric = variant.rows[-1]
    assert numeric["is_numeric"] is True
    assert numeric["numeric_tolerance"] == pytest.approx(0.2)
    assert numeric["unit"] == "m/s²"
    assert numeric["input_type"] == "INPUT"


def test_default_tolerance_is_configurable():
    request = question_schema.QuestionUpdateRequest(
        question_text="?",
        numeric_data=question_schema.NumericDataCreate(correct_answer="1", tolerance="?"),
    )

    variant = question_assembler.decompose(request, QuestionType.NUMERIC, default_tolerance=0.05).variant

    assert variant.rows[0]["numeric_tolerance"] == pytest.approx(0.05)


@pytest.mark.parametrize(
    "question_type, field, value",
    [
        (QuestionType.MULTIPLE_CHOICE, "match_pairs", [question_schema.MatchPairCreate(left_item="a", right_item="b")]),
        (QuestionType.ORDERING, "options", [question_schema.QuestionOptionCreate(option_text="a")]),
        (QuestionType.MATCHING, "numeric_data", question_schema.NumericDataCreate(correct_answer="1", tolerance="0")),
        (QuestionType.NUMERIC, "order_items", [question_schema.OrderItemCreate(text="a", correct_position=0)]),
    ],
)
def test_wrong_variant_is_malformed_payload(question_type, field, value):
    """유형에 맞지 않는 답안 필드는 MALFORMED_PAYLOAD"""
    request = question_schema.QuestionUpdateRequest(question_text="?", **{field: value})

    with pytest.raises(InvalidQuestionVariantError) as exc_info:
        question_assembler.decompose(request, question_type)

    assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD
    assert exc_info.value.unexpected == [field]


def test_empty_lists_are_not_populated_arms():
    """빈 목록은 채워진 것으로 보지 않음"""
    request = question_schema.QuestionUpdateRequest(question_text="?", options=[], order_items=[])
    assert question_assembler.populated_arms(request) == set()


def test_compose_sorts_rows_and_defaults_input_type():
    """조립 시 정렬 키 오름차순, 입력 방식이 비어 있으면 INPUT"""
    now = datetime(2026, 1, 1)
    question = SimpleNamespace(
        id=1, subject_id=1, topic_id=1, question_type="FILL_BLANK", question_text="?",
        question_image_path=None, explanation=None, difficulty="MEDIUM", points=1, source=None,
        created_at=now, updated_at=now,
    )
    blanks = [
        SimpleNamespace(
            id=11, question_id=1, blank_index=index, correct_answer=str(index), acceptable_answers=None,
            is_numeric=False, numeric_tolerance=None, unit=None, input_type=None, dropdown_options=None,
        )
        for index in (2, 0, 1)
    ]

    composed = question_assembler.compose(question, blanks=blanks)

    assert [b.blank_index for b in composed.blanks] == [0, 1, 2]
    assert all(b.input_type == question_schema.BlankInputType.INPUT for b in composed.blanks)
    assert composed.options == []
    assert composed.order_items == []
    assert composed.matches == []
