import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.core.storage import enable_cascade
from quizforge.models.question import (
    Question,
    QuestionBlank,
    QuestionMatch,
    QuestionOption,
    QuestionOrderItem,
)

logger = logging.getLogger(__name__)

# 답안 테이블과 각 정렬 키 (쓰기/삭제 순서이기도 함)
VARIANT_TABLES = (
    (QuestionOption, QuestionOption.display_order),
    (QuestionBlank, QuestionBlank.blank_index),
    (QuestionOrderItem, QuestionOrderItem.correct_position),
    (QuestionMatch, QuestionMatch.display_order),
)


@dataclass
class VariantRows:
    """문제 하나의 답안 행 묶음"""
    options: list[QuestionOption] = field(default_factory=list)
    blanks: list[QuestionBlank] = field(default_factory=list)
    order_items: list[QuestionOrderItem] = field(default_factory=list)
    matches: list[QuestionMatch] = field(default_factory=list)


_ROW_BUCKETS = {
    QuestionOption: "options",
    QuestionBlank: "blanks",
    QuestionOrderItem: "order_items",
    QuestionMatch: "matches",
}


async def get_question_by_id(session: AsyncSession, question_id: int) -> Question | None:
    """ID로 문제 기본 행 조회"""
    result = await session.execute(select(Question).where(Question.id == question_id))
    return result.scalar_one_or_none()


async def get_question_type(session: AsyncSession, question_id: int) -> str | None:
    """저장된 문제 유형 조회 (없으면 None)"""
    return await session.scalar(select(Question.question_type).where(Question.id == question_id))


async def get_questions_by_topic_id(session: AsyncSession, topic_id: int) -> Sequence[Question]:
    """주제 ID로 문제 목록 조회 (최신순)"""
    result = await session.execute(
        select(Question)
        .where(Question.topic_id == topic_id)
        .order_by(Question.created_at.desc(), Question.id.desc())
    )
    return result.scalars().all()


async def get_variant_rows(session: AsyncSession, question_ids: Sequence[int]) -> dict[int, VariantRows]:
    """문제 ID 목록의 답안 행을 테이블별 정렬 키 순으로 조회"""
    rows_by_question = {question_id: VariantRows() for question_id in question_ids}
    if not rows_by_question:
        return rows_by_question

    for model, order_column in VARIANT_TABLES:
        result = await session.execute(
            select(model)
            .where(model.question_id.in_(list(rows_by_question)))
            .order_by(model.question_id, order_column.asc(), model.id.asc())
        )
        bucket = _ROW_BUCKETS[model]
        for row in result.scalars().all():
            getattr(rows_by_question[row.question_id], bucket).append(row)

    return rows_by_question


async def insert_question(session: AsyncSession, base: dict[str, Any]) -> int:
    """문제 기본 행 추가, 새 ID 반환"""
    question = Question(**base)
    session.add(question)
    await session.flush()
    return question.id


async def update_question_base(session: AsyncSession, question_id: int, base: dict[str, Any]) -> int:
    """문제 기본 행 수정, 변경된 행 수 반환"""
    result = await session.execute(
        update(Question).where(Question.id == question_id).values(**base)
    )
    return result.rowcount


async def insert_variant_rows(session: AsyncSession, question_id: int, variant) -> int:
    """답안 행을 한 행씩 추가 (question_assembler의 답안 묶음)"""
    for row in variant.rows:
        await session.execute(insert(variant.model).values(question_id=question_id, **row))
    logger.debug(
        f"답안 행 추가: question_id={question_id}, "
        f"table={variant.model.__tablename__}, count={len(variant.rows)}"
    )
    return len(variant.rows)


async def delete_variant_rows(session: AsyncSession, question_id: int) -> None:
    """문제의 모든 답안 행 삭제 (4개 테이블 전부)"""
    for model, _ in VARIANT_TABLES:
        await session.execute(delete(model).where(model.question_id == question_id))


async def delete_question(session: AsyncSession, question_id: int) -> None:
    """문제 삭제 (답안 행은 CASCADE로 함께 삭제)"""
    await enable_cascade(session)
    await session.execute(delete(Question).where(Question.id == question_id))
