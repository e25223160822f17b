from typing import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.core.storage import enable_cascade
from quizforge.models.exam import Exam, ExamTopic
from quizforge.models.topic import Topic
from quizforge.schemas import exam as exam_schema


def _exam_values(data: exam_schema.ExamUpdateRequest) -> dict:
    values = data.model_dump(exclude={"topics"})
    values["show_answers_after"] = data.show_answers_after.value
    return values


async def get_exam_by_id(session: AsyncSession, exam_id: int) -> Exam | None:
    """ID로 시험 조회"""
    result = await session.execute(select(Exam).where(Exam.id == exam_id))
    return result.scalar_one_or_none()


async def get_exams_by_subject_id(session: AsyncSession, subject_id: int) -> Sequence[Exam]:
    """과목 ID로 시험 목록 조회 (최신순)"""
    result = await session.execute(
        select(Exam)
        .where(Exam.subject_id == subject_id)
        .order_by(Exam.created_at.desc(), Exam.id.desc())
    )
    return result.scalars().all()


async def get_exam_topics(session: AsyncSession, exam_ids: Sequence[int]) -> dict[int, list[dict]]:
    """시험별 출제 구성 조회 (주제명 포함, 주제명순)"""
    topics_by_exam: dict[int, list[dict]] = {exam_id: [] for exam_id in exam_ids}
    if not topics_by_exam:
        return topics_by_exam

    stmt = (
        select(
            ExamTopic.id,
            ExamTopic.exam_id,
            ExamTopic.topic_id,
            Topic.name.label("topic_name"),
            ExamTopic.question_count,
        )
        .join(Topic, ExamTopic.topic_id == Topic.id)
        .where(ExamTopic.exam_id.in_(list(topics_by_exam)))
        .order_by(ExamTopic.exam_id, Topic.name, ExamTopic.id)
    )
    result = await session.execute(stmt)
    for row in result.all():
        topics_by_exam[row.exam_id].append({
            "id": row.id,
            "exam_id": row.exam_id,
            "topic_id": row.topic_id,
            "topic_name": row.topic_name,
            "question_count": row.question_count,
        })
    return topics_by_exam


async def insert_exam(session: AsyncSession, data: exam_schema.ExamCreateRequest) -> int:
    """시험 기본 행 추가"""
    exam = Exam(**_exam_values(data))
    session.add(exam)
    await session.flush()
    return exam.id


async def update_exam_base(
    session: AsyncSession,
    exam_id: int,
    data: exam_schema.ExamUpdateRequest,
) -> int:
    """시험 기본 행 수정, 변경된 행 수 반환"""
    result = await session.execute(
        update(Exam).where(Exam.id == exam_id).values(**_exam_values(data))
    )
    return result.rowcount


async def insert_exam_topics(
    session: AsyncSession,
    exam_id: int,
    topics: Sequence[exam_schema.ExamTopicCreate],
) -> None:
    """주제별 출제 문항 수 추가 (문항 수 충족 여부는 검증하지 않음)"""
    for topic in topics:
        await session.execute(
            insert(ExamTopic).values(
                exam_id=exam_id,
                topic_id=topic.topic_id,
                question_count=topic.question_count,
            )
        )


async def delete_exam_topics(session: AsyncSession, exam_id: int) -> None:
    """시험의 출제 구성 전체 삭제"""
    await session.execute(delete(ExamTopic).where(ExamTopic.exam_id == exam_id))


async def delete_exam(session: AsyncSession, exam_id: int) -> None:
    """시험 삭제 (출제 구성/응시 기록은 CASCADE로 함께 삭제)"""
    await enable_cascade(session)
    await session.execute(delete(Exam).where(Exam.id == exam_id))
