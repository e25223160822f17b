"""문제 저장/조회 통합 테스트 (in-memory SQLite)"""
import logging

import pytest
from sqlalchemy import event, func, select

from quizforge.exceptions import (
    ConstraintViolationError,
    InvalidQuestionVariantError,
    QuestionNotFoundError,
)
from quizforge.models.question import QuestionBlank, QuestionMatch, QuestionOption, QuestionOrderItem
from quizforge.schemas import question as question_schema
from quizforge.schemas.question import QuestionType
from quizforge.services import question_service, subject_service


def make_request(topic, question_type: QuestionType, **kwargs) -> question_schema.QuestionCreateRequest:
    return question_schema.QuestionCreateRequest(
        subject_id=topic.subject_id,
        topic_id=topic.id,
        question_type=question_type,
        question_text=kwargs.pop("question_text", "다음 중 옳은 것은?"),
        **kwargs,
    )


def options(*display_orders: int) -> list[question_schema.QuestionOptionCreate]:
    return [
        question_schema.QuestionOptionCreate(
            option_text=f"선택지 {order}",
            is_correct=order == 0,
            display_order=order,
        )
        for order in display_orders
    ]


async def count_rows(storage, model) -> int:
    async with storage.session() as session:
        return await session.scalar(select(func.count(model.id)))


@pytest.mark.asyncio
async def test_create_multiple_choice_round_trip(storage, sample_topic):
    """객관식 문제 생성 후 조회 시 선택지가 표시 순서대로 반환"""
    created = await question_service.create_question(
        storage,
        make_request(sample_topic, QuestionType.MULTIPLE_CHOICE, options=options(2, 0, 1), explanation="해설"),
    )

    assert created.question_type == QuestionType.MULTIPLE_CHOICE
    assert created.explanation == "해설"
    assert created.difficulty == question_schema.Difficulty.MEDIUM
    assert created.points == 1
    assert [o.display_order for o in created.options] == [0, 1, 2]
    assert [o.option_text for o in created.options] == ["선택지 0", "선택지 1", "선택지 2"]
    assert created.options[0].is_correct is True
    assert created.blanks == []
    assert created.order_items == []
    assert created.matches == []

    fetched = await question_service.get_question(storage, created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_create_ordering_question(storage, sample_topic):
    """순서 맞추기 문제는 정답 위치 순으로 반환"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.ORDERING,
            order_items=[
                question_schema.OrderItemCreate(text="모델 학습", correct_position=2),
                question_schema.OrderItemCreate(text="데이터 수집", correct_position=0),
                question_schema.OrderItemCreate(text="전처리", correct_position=1),
            ],
        ),
    )

    assert [item.item_text for item in created.order_items] == ["데이터 수집", "전처리", "모델 학습"]
    assert created.options == []


@pytest.mark.asyncio
async def test_create_matching_question_uses_list_order(storage, sample_topic):
    """짝 맞추기 표시 순서는 요청 목록 순서"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.MATCHING,
            match_pairs=[
                question_schema.MatchPairCreate(left_item="평균", right_item="mean"),
                question_schema.MatchPairCreate(left_item="분산", right_item="variance", right_image_path="img/var.png"),
            ],
        ),
    )

    assert [(m.left_item, m.display_order) for m in created.matches] == [("평균", 0), ("분산", 1)]
    assert created.matches[1].right_image_path == "img/var.png"


@pytest.mark.asyncio
async def test_create_fill_blank_question(storage, sample_topic):
    """빈칸 문제: 입력 방식 기본값은 INPUT"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.FILL_BLANK,
            question_text="{0}은 {1}의 제곱근이다",
            blanks=[
                question_schema.QuestionBlankCreate(blank_index=1, correct_answer="분산"),
                question_schema.QuestionBlankCreate(
                    blank_index=0,
                    correct_answer="표준편차",
                    input_type=question_schema.BlankInputType.DROPDOWN,
                    dropdown_options='["표준편차", "평균"]',
                ),
            ],
        ),
    )

    assert [b.blank_index for b in created.blanks] == [0, 1]
    assert created.blanks[0].input_type == question_schema.BlankInputType.DROPDOWN
    assert created.blanks[1].input_type == question_schema.BlankInputType.INPUT
    assert created.blanks[1].is_numeric is False


@pytest.mark.asyncio
async def test_numeric_data_becomes_blank_zero(storage, sample_topic):
    """숫자 정답은 0번 숫자 빈칸으로 저장"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.NUMERIC,
            question_text="중력 가속도는?",
            numeric_data=question_schema.NumericDataCreate(correct_answer="9.8", tolerance="0.2", unit="m/s²"),
        ),
    )

    assert len(created.blanks) == 1
    blank = created.blanks[0]
    assert blank.blank_index == 0
    assert blank.correct_answer == "9.8"
    assert blank.is_numeric is True
    assert blank.numeric_tolerance == pytest.approx(0.2)
    assert blank.unit == "m/s²"
    assert blank.input_type == question_schema.BlankInputType.INPUT


@pytest.mark.asyncio
async def test_unparsable_tolerance_uses_default(storage, sample_topic, caplog):
    """허용 오차를 해석할 수 없으면 기본값 0.1 사용 (경고 로그)"""
    with caplog.at_level(logging.WARNING, logger="quizforge.services.question_assembler"):
        created = await question_service.create_question(
            storage,
            make_request(
                sample_topic,
                QuestionType.NUMERIC,
                numeric_data=question_schema.NumericDataCreate(correct_answer="3.14", tolerance="abc"),
            ),
        )

    assert created.blanks[0].numeric_tolerance == pytest.approx(0.1)
    assert "허용 오차 파싱 실패" in caplog.text


@pytest.mark.asyncio
async def test_wrong_variant_rejected(storage, sample_topic):
    """객관식 문제에 순서 항목을 넣으면 거부, 아무것도 저장되지 않음"""
    with pytest.raises(InvalidQuestionVariantError) as exc_info:
        await question_service.create_question(
            storage,
            make_request(
                sample_topic,
                QuestionType.MULTIPLE_CHOICE,
                options=options(0, 1),
                order_items=[question_schema.OrderItemCreate(text="x", correct_position=0)],
            ),
        )

    assert exc_info.value.unexpected == ["order_items"]
    assert await question_service.list_questions(storage, sample_topic.id) == []


@pytest.mark.asyncio
async def test_create_is_atomic_when_variant_insert_fails(storage, sample_topic):
    """답안 행 추가 중 실패하면 기본 행까지 모두 롤백"""
    inserted = []

    def fail_on_third_option(conn, cursor, statement, parameters, context, executemany):
        if statement.startswith("INSERT INTO question_options"):
            inserted.append(parameters)
            if len(inserted) == 3:
                raise RuntimeError("강제 실패")

    sync_engine = storage.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", fail_on_third_option)
    try:
        with pytest.raises(RuntimeError):
            await question_service.create_question(
                storage,
                make_request(sample_topic, QuestionType.MULTIPLE_CHOICE, options=options(0, 1, 2, 3)),
            )
    finally:
        event.remove(sync_engine, "before_cursor_execute", fail_on_third_option)

    assert len(inserted) == 3
    assert await question_service.list_questions(storage, sample_topic.id) == []
    assert await count_rows(storage, QuestionOption) == 0


@pytest.mark.asyncio
async def test_create_with_missing_topic_is_constraint_violation(storage, sample_subject):
    """존재하지 않는 주제를 참조하면 제약 조건 위반"""
    request = question_schema.QuestionCreateRequest(
        subject_id=sample_subject.id,
        topic_id=999,
        question_type=QuestionType.MULTIPLE_CHOICE,
        question_text="?",
        options=options(0),
    )
    with pytest.raises(ConstraintViolationError):
        await question_service.create_question(storage, request)

    assert await count_rows(storage, QuestionOption) == 0


@pytest.mark.asyncio
async def test_update_replaces_all_variant_rows(storage, sample_topic):
    """수정 시 답안 행은 전부 교체 (4개 → 2개)"""
    created = await question_service.create_question(
        storage,
        make_request(sample_topic, QuestionType.MULTIPLE_CHOICE, options=options(0, 1, 2, 3)),
    )

    updated = await question_service.update_question(
        storage,
        created.id,
        question_schema.QuestionUpdateRequest(
            question_text="수정된 문제",
            difficulty=question_schema.Difficulty.HARD,
            points=3,
            options=[
                question_schema.QuestionOptionCreate(option_text="예", is_correct=True, display_order=0),
                question_schema.QuestionOptionCreate(option_text="아니오", display_order=1),
            ],
        ),
    )

    assert updated.id == created.id
    assert updated.question_type == QuestionType.MULTIPLE_CHOICE
    assert updated.question_text == "수정된 문제"
    assert updated.difficulty == question_schema.Difficulty.HARD
    assert updated.points == 3
    assert [o.option_text for o in updated.options] == ["예", "아니오"]
    assert await count_rows(storage, QuestionOption) == 2


@pytest.mark.asyncio
async def test_update_checks_variant_against_stored_type(storage, sample_topic):
    """수정 요청은 저장된 문제 유형 기준으로 검증"""
    created = await question_service.create_question(
        storage,
        make_request(sample_topic, QuestionType.MULTIPLE_CHOICE, options=options(0, 1)),
    )

    with pytest.raises(InvalidQuestionVariantError):
        await question_service.update_question(
            storage,
            created.id,
            question_schema.QuestionUpdateRequest(
                question_text="빈칸으로 바꾸기",
                blanks=[question_schema.QuestionBlankCreate(blank_index=0, correct_answer="x")],
            ),
        )

    fetched = await question_service.get_question(storage, created.id)
    assert len(fetched.options) == 2
    assert await count_rows(storage, QuestionBlank) == 0


@pytest.mark.asyncio
async def test_update_question_not_found(storage):
    with pytest.raises(QuestionNotFoundError):
        await question_service.update_question(
            storage, 999, question_schema.QuestionUpdateRequest(question_text="없음")
        )


@pytest.mark.asyncio
async def test_list_questions_with_variants(storage, sample_topic):
    """주제별 문제 목록은 최신순, 각 문제의 답안 행 포함"""
    first = await question_service.create_question(
        storage, make_request(sample_topic, QuestionType.MULTIPLE_CHOICE, options=options(1, 0))
    )
    second = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.ORDERING,
            order_items=[question_schema.OrderItemCreate(text="a", correct_position=0)],
        ),
    )

    questions = await question_service.list_questions(storage, sample_topic.id)

    assert [q.id for q in questions] == [second.id, first.id]
    assert [o.display_order for o in questions[1].options] == [0, 1]
    assert len(questions[0].order_items) == 1
    assert questions[0].options == []


@pytest.mark.asyncio
async def test_delete_question_cascades_variant_rows(storage, sample_topic):
    """문제 삭제 시 답안 행도 함께 삭제, 재삭제는 오류 아님"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.MATCHING,
            match_pairs=[question_schema.MatchPairCreate(left_item="a", right_item="b")],
        ),
    )

    await question_service.delete_question(storage, created.id)
    await question_service.delete_question(storage, created.id)

    with pytest.raises(QuestionNotFoundError):
        await question_service.get_question(storage, created.id)
    assert await count_rows(storage, QuestionMatch) == 0


@pytest.mark.asyncio
async def test_delete_subject_cascades_to_questions(storage, sample_subject, sample_topic):
    """과목 삭제 시 문제와 답안 행까지 모두 삭제"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.ORDERING,
            order_items=[
                question_schema.OrderItemCreate(text="a", correct_position=0),
                question_schema.OrderItemCreate(text="b", correct_position=1),
            ],
        ),
    )

    await subject_service.delete_subject(storage, sample_subject.id)

    with pytest.raises(QuestionNotFoundError):
        await question_service.get_question(storage, created.id)
    assert await count_rows(storage, QuestionOrderItem) == 0


@pytest.mark.asyncio
async def test_update_is_atomic_when_variant_insert_fails(storage, sample_topic):
    """수정 중 답안 행 추가가 실패하면 기존 문제와 선택지가 그대로 남음"""
    created = await question_service.create_question(
        storage,
        make_request(
            sample_topic,
            QuestionType.MULTIPLE_CHOICE,
            question_text="수정 전 문제",
            options=options(0, 1, 2, 3),
        ),
    )
    inserted = []

    def fail_on_second_option(conn, cursor, statement, parameters, context, executemany):
        if statement.startswith("INSERT INTO question_options"):
            inserted.append(parameters)
            if len(inserted) == 2:
                raise RuntimeError("강제 실패")

    sync_engine = storage.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", fail_on_second_option)
    try:
        with pytest.raises(RuntimeError):
            await question_service.update_question(
                storage,
                created.id,
                question_schema.QuestionUpdateRequest(question_text="수정 후 문제", options=options(0, 1, 2)),
            )
    finally:
        event.remove(sync_engine, "before_cursor_execute", fail_on_second_option)

    fetched = await question_service.get_question(storage, created.id)
    assert fetched.question_text == "수정 전 문제"
    assert [o.option_text for o in fetched.options] == ["선택지 0", "선택지 1", "선택지 2", "선택지 3"]
    assert fetched == created
    assert await count_rows(storage, QuestionOption) == 4
