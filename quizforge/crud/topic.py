from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.core.storage import enable_cascade
from quizforge.models.topic import Topic
from quizforge.schemas import topic as topic_schema


async def get_topic_by_id(session: AsyncSession, topic_id: int) -> Topic | None:
    """ID로 주제 조회"""
    result = await session.execute(select(Topic).where(Topic.id == topic_id))
    return result.scalar_one_or_none()


async def get_topics_by_subject_id(session: AsyncSession, subject_id: int) -> Sequence[Topic]:
    """과목 ID로 주제 목록 조회 (주차순, 주차 없는 주제가 먼저)"""
    result = await session.execute(
        select(Topic)
        .where(Topic.subject_id == subject_id)
        .order_by(
            Topic.week_number.asc(),
            Topic.created_at.desc(),
            Topic.id.desc(),
        )
    )
    return result.scalars().all()


async def create_topic(session: AsyncSession, data: topic_schema.TopicCreateRequest) -> int:
    """주제 생성"""
    topic = Topic(**data.model_dump())
    session.add(topic)
    await session.flush()
    return topic.id


async def update_topic(
    session: AsyncSession,
    topic_id: int,
    data: topic_schema.TopicUpdateRequest,
) -> int:
    """주제 수정, 변경된 행 수 반환"""
    result = await session.execute(
        update(Topic).where(Topic.id == topic_id).values(**data.model_dump())
    )
    return result.rowcount


async def delete_topic(session: AsyncSession, topic_id: int) -> None:
    """주제 삭제 (문제/퀴즈/시험 출제 구성은 CASCADE로 함께 삭제)"""
    await enable_cascade(session)
    await session.execute(delete(Topic).where(Topic.id == topic_id))
