from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.core.storage import enable_cascade
from quizforge.models.subject import Subject
from quizforge.schemas import subject as subject_schema


async def get_subject_by_id(session: AsyncSession, subject_id: int) -> Subject | None:
    """ID로 과목 조회"""
    result = await session.execute(select(Subject).where(Subject.id == subject_id))
    return result.scalar_one_or_none()


async def get_all_subjects(session: AsyncSession) -> Sequence[Subject]:
    """모든 과목 조회 (최신순)"""
    result = await session.execute(
        select(Subject).order_by(Subject.created_at.desc(), Subject.id.desc())
    )
    return result.scalars().all()


async def create_subject(session: AsyncSession, data: subject_schema.SubjectCreateRequest) -> int:
    """과목 생성 (커밋은 호출자 트랜잭션에서)"""
    subject = Subject(**data.model_dump())
    session.add(subject)
    await session.flush()
    return subject.id


async def update_subject(
    session: AsyncSession,
    subject_id: int,
    data: subject_schema.SubjectUpdateRequest,
) -> int:
    """과목 수정, 변경된 행 수 반환"""
    result = await session.execute(
        update(Subject).where(Subject.id == subject_id).values(**data.model_dump())
    )
    return result.rowcount


async def delete_subject(session: AsyncSession, subject_id: int) -> None:
    """과목 삭제 (주제/문제/퀴즈/시험은 CASCADE로 함께 삭제)"""
    await enable_cascade(session)
    await session.execute(delete(Subject).where(Subject.id == subject_id))
