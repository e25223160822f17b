import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import exam as exam_crud
from quizforge.exceptions import ExamNotFoundError
from quizforge.models.exam import Exam
from quizforge.schemas import exam as exam_schema

logger = logging.getLogger(__name__)


def _to_exam_with_topics(exam: Exam, topics: list[dict]) -> exam_schema.ExamWithTopics:
    return exam_schema.ExamWithTopics(
        id=exam.id,
        subject_id=exam.subject_id,
        name=exam.name,
        description=exam.description,
        total_question_count=exam.total_question_count,
        time_limit_minutes=exam.time_limit_minutes,
        shuffle_questions=exam.shuffle_questions,
        shuffle_options=exam.shuffle_options,
        show_answers_after=exam.show_answers_after,
        passing_score_percent=exam.passing_score_percent,
        created_at=exam.created_at,
        updated_at=exam.updated_at,
        topics=[exam_schema.ExamTopicResponse(**topic) for topic in topics],
    )


async def list_exams(storage: StorageHandle, subject_id: int) -> list[exam_schema.ExamWithTopics]:
    """과목별 시험 목록 (주제별 출제 구성 포함)"""
    async with storage.session() as session:
        exams = await exam_crud.get_exams_by_subject_id(session, subject_id)
        topics = await exam_crud.get_exam_topics(session, [e.id for e in exams])

    return [_to_exam_with_topics(exam, topics[exam.id]) for exam in exams]


async def get_exam(storage: StorageHandle, exam_id: int) -> exam_schema.ExamWithTopics:
    async with storage.session() as session:
        exam = await exam_crud.get_exam_by_id(session, exam_id)
        if not exam:
            raise ExamNotFoundError(exam_id)
        topics = await exam_crud.get_exam_topics(session, [exam_id])

    return _to_exam_with_topics(exam, topics[exam_id])


async def create_exam(
    storage: StorageHandle,
    request: exam_schema.ExamCreateRequest,
) -> exam_schema.ExamWithTopics:
    """시험 생성 (기본 행 + 주제별 출제 구성을 원자적으로 저장)"""
    async with storage.transaction() as session:
        exam_id = await exam_crud.insert_exam(session, request)
        await exam_crud.insert_exam_topics(session, exam_id, request.topics)

    # 트랜잭션이 끝나 핸들이 풀린 뒤에 다시 조회
    logger.info(f"시험 생성: exam_id={exam_id}, topics={len(request.topics)}")
    return await get_exam(storage, exam_id)


async def update_exam(
    storage: StorageHandle,
    exam_id: int,
    request: exam_schema.ExamUpdateRequest,
) -> exam_schema.ExamWithTopics:
    """시험 수정 (출제 구성은 전부 삭제 후 다시 추가)"""
    async with storage.transaction() as session:
        await exam_crud.delete_exam_topics(session, exam_id)
        if not await exam_crud.update_exam_base(session, exam_id, request):
            raise ExamNotFoundError(exam_id)
        await exam_crud.insert_exam_topics(session, exam_id, request.topics)

    logger.info(f"시험 수정: exam_id={exam_id}, topics={len(request.topics)}")
    return await get_exam(storage, exam_id)


async def delete_exam(storage: StorageHandle, exam_id: int) -> None:
    async with storage.transaction() as session:
        await exam_crud.delete_exam(session, exam_id)
    logger.info(f"시험 삭제: exam_id={exam_id}")
