from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.core.storage import enable_cascade
from quizforge.models.quiz import Quiz
from quizforge.schemas import quiz as quiz_schema


def _quiz_values(data: quiz_schema.QuizUpdateRequest) -> dict:
    values = data.model_dump()
    values["show_answers_after"] = data.show_answers_after.value
    return values


async def get_quiz_by_id(session: AsyncSession, quiz_id: int) -> Quiz | None:
    """ID로 퀴즈 조회"""
    result = await session.execute(select(Quiz).where(Quiz.id == quiz_id))
    return result.scalar_one_or_none()


async def get_quizzes_by_topic_id(session: AsyncSession, topic_id: int) -> Sequence[Quiz]:
    """주제 ID로 퀴즈 목록 조회 (최신순)"""
    result = await session.execute(
        select(Quiz)
        .where(Quiz.topic_id == topic_id)
        .order_by(Quiz.created_at.desc(), Quiz.id.desc())
    )
    return result.scalars().all()


async def create_quiz(session: AsyncSession, data: quiz_schema.QuizCreateRequest) -> int:
    """퀴즈 생성"""
    quiz = Quiz(**_quiz_values(data))
    session.add(quiz)
    await session.flush()
    return quiz.id


async def update_quiz(
    session: AsyncSession,
    quiz_id: int,
    data: quiz_schema.QuizUpdateRequest,
) -> int:
    """퀴즈 수정, 변경된 행 수 반환"""
    result = await session.execute(
        update(Quiz).where(Quiz.id == quiz_id).values(**_quiz_values(data))
    )
    return result.rowcount


async def delete_quiz(session: AsyncSession, quiz_id: int) -> None:
    """퀴즈 삭제 (응시 기록은 CASCADE로 함께 삭제)"""
    await enable_cascade(session)
    await session.execute(delete(Quiz).where(Quiz.id == quiz_id))
