import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import topic as topic_crud
from quizforge.exceptions import TopicNotFoundError
from quizforge.schemas import topic as topic_schema

logger = logging.getLogger(__name__)


async def list_topics(storage: StorageHandle, subject_id: int) -> list[topic_schema.TopicResponse]:
    """과목별 주제 목록 (주제가 없으면 빈 목록)"""
    async with storage.session() as session:
        topics = await topic_crud.get_topics_by_subject_id(session, subject_id)
        return [topic_schema.TopicResponse.model_validate(t) for t in topics]


async def get_topic(storage: StorageHandle, topic_id: int) -> topic_schema.TopicResponse:
    async with storage.session() as session:
        topic = await topic_crud.get_topic_by_id(session, topic_id)
        if not topic:
            raise TopicNotFoundError(topic_id)
        return topic_schema.TopicResponse.model_validate(topic)


async def create_topic(
    storage: StorageHandle,
    request: topic_schema.TopicCreateRequest,
) -> topic_schema.TopicResponse:
    async with storage.transaction() as session:
        topic_id = await topic_crud.create_topic(session, request)

    logger.info(f"주제 생성: topic_id={topic_id}, subject_id={request.subject_id}")
    return await get_topic(storage, topic_id)


async def update_topic(
    storage: StorageHandle,
    topic_id: int,
    request: topic_schema.TopicUpdateRequest,
) -> topic_schema.TopicResponse:
    async with storage.transaction() as session:
        if not await topic_crud.update_topic(session, topic_id, request):
            raise TopicNotFoundError(topic_id)

    return await get_topic(storage, topic_id)


async def delete_topic(storage: StorageHandle, topic_id: int) -> None:
    async with storage.transaction() as session:
        await topic_crud.delete_topic(session, topic_id)
    logger.info(f"주제 삭제: topic_id={topic_id}")
