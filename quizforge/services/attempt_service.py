import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import attempt as attempt_crud
from quizforge.schemas import attempt as attempt_schema

logger = logging.getLogger(__name__)


def is_passed(percentage: float | None, passing_score_percent: int) -> bool:
    """합격 여부 (저장하지 않고 조회 시점의 합격 기준으로 계산)"""
    return percentage is not None and percentage >= passing_score_percent


async def save_quiz_attempt(storage: StorageHandle, request: attempt_schema.QuizAttemptCreateRequest) -> int:
    """퀴즈 응시 결과 저장, 새 기록 ID 반환"""
    async with storage.transaction() as session:
        attempt_id = await attempt_crud.create_quiz_attempt(session, request)
    logger.info(f"퀴즈 응시 저장: attempt_id={attempt_id}, quiz_id={request.quiz_id}, percentage={request.percentage}")
    return attempt_id


async def save_exam_attempt(storage: StorageHandle, request: attempt_schema.ExamAttemptCreateRequest) -> int:
    """시험 응시 결과 저장, 새 기록 ID 반환"""
    async with storage.transaction() as session:
        attempt_id = await attempt_crud.create_exam_attempt(session, request)
    logger.info(f"시험 응시 저장: attempt_id={attempt_id}, exam_id={request.exam_id}, percentage={request.percentage}")
    return attempt_id


async def list_quiz_attempts(storage: StorageHandle) -> list[attempt_schema.QuizAttemptWithDetails]:
    async with storage.session() as session:
        rows = await attempt_crud.get_all_quiz_attempts(session)

    return [
        attempt_schema.QuizAttemptWithDetails(
            **{k: v for k, v in row.items() if k != "passing_score_percent"},
            passed=is_passed(row["percentage"], row["passing_score_percent"]),
        )
        for row in rows
    ]


async def list_exam_attempts(storage: StorageHandle) -> list[attempt_schema.ExamAttemptWithDetails]:
    async with storage.session() as session:
        rows = await attempt_crud.get_all_exam_attempts(session)

    return [
        attempt_schema.ExamAttemptWithDetails(
            **{k: v for k, v in row.items() if k != "passing_score_percent"},
            passed=is_passed(row["percentage"], row["passing_score_percent"]),
        )
        for row in rows
    ]
