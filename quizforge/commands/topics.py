from typing import Any

from quizforge.commands.base import command, parse_payload
from quizforge.core.storage import StorageHandle
from quizforge.schemas import topic as topic_schema
from quizforge.services import topic_service


@command
async def get_topics(storage: StorageHandle, subject_id: int):
    return await topic_service.list_topics(storage, subject_id)


@command
async def get_topic(storage: StorageHandle, topic_id: int):
    return await topic_service.get_topic(storage, topic_id)


@command
async def create_topic(storage: StorageHandle, payload: Any):
    request = parse_payload(topic_schema.TopicCreateRequest, payload)
    return await topic_service.create_topic(storage, request)


@command
async def update_topic(storage: StorageHandle, topic_id: int, payload: Any):
    request = parse_payload(topic_schema.TopicUpdateRequest, payload)
    return await topic_service.update_topic(storage, topic_id, request)


@command
async def delete_topic(storage: StorageHandle, topic_id: int):
    await topic_service.delete_topic(storage, topic_id)
