from typing import Any

from quizforge.commands.base import command, parse_payload
from quizforge.core.storage import StorageHandle
from quizforge.schemas import question as question_schema
from quizforge.services import question_service


@command
async def get_questions(storage: StorageHandle, topic_id: int):
    return await question_service.list_questions(storage, topic_id)


@command
async def get_question(storage: StorageHandle, question_id: int):
    return await question_service.get_question(storage, question_id)


@command
async def create_question(storage: StorageHandle, payload: Any):
    request = parse_payload(question_schema.QuestionCreateRequest, payload)
    return await question_service.create_question(storage, request)


@command
async def update_question(storage: StorageHandle, question_id: int, payload: Any):
    request = parse_payload(question_schema.QuestionUpdateRequest, payload)
    return await question_service.update_question(storage, question_id, request)


@command
async def delete_question(storage: StorageHandle, question_id: int):
    await question_service.delete_question(storage, question_id)
