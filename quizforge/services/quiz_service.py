import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import quiz as quiz_crud
from quizforge.exceptions import QuizNotFoundError
from quizforge.schemas import quiz as quiz_schema

logger = logging.getLogger(__name__)


async def list_quizzes(storage: StorageHandle, topic_id: int) -> list[quiz_schema.QuizResponse]:
    """주제별 퀴즈 목록"""
    async with storage.session() as session:
        quizzes = await quiz_crud.get_quizzes_by_topic_id(session, topic_id)
        return [quiz_schema.QuizResponse.model_validate(q) for q in quizzes]


async def get_quiz(storage: StorageHandle, quiz_id: int) -> quiz_schema.QuizResponse:
    async with storage.session() as session:
        quiz = await quiz_crud.get_quiz_by_id(session, quiz_id)
        if not quiz:
            raise QuizNotFoundError(quiz_id)
        return quiz_schema.QuizResponse.model_validate(quiz)


async def create_quiz(
    storage: StorageHandle,
    request: quiz_schema.QuizCreateRequest,
) -> quiz_schema.QuizResponse:
    async with storage.transaction() as session:
        quiz_id = await quiz_crud.create_quiz(session, request)

    logger.info(f"퀴즈 생성: quiz_id={quiz_id}, topic_id={request.topic_id}")
    return await get_quiz(storage, quiz_id)


async def update_quiz(
    storage: StorageHandle,
    quiz_id: int,
    request: quiz_schema.QuizUpdateRequest,
) -> quiz_schema.QuizResponse:
    async with storage.transaction() as session:
        if not await quiz_crud.update_quiz(session, quiz_id, request):
            raise QuizNotFoundError(quiz_id)

    return await get_quiz(storage, quiz_id)


async def delete_quiz(storage: StorageHandle, quiz_id: int) -> None:
    async with storage.transaction() as session:
        await quiz_crud.delete_quiz(session, quiz_id)
    logger.info(f"퀴즈 삭제: quiz_id={quiz_id}")
