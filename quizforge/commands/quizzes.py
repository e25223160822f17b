from typing import Any

from quizforge.commands.base import command, parse_payload
from quizforge.core.storage import StorageHandle
from quizforge.schemas import attempt as attempt_schema
from quizforge.schemas import quiz as quiz_schema
from quizforge.services import attempt_service, performance_service, quiz_service


@command
async def get_quizzes(storage: StorageHandle, topic_id: int):
    return await quiz_service.list_quizzes(storage, topic_id)


@command
async def get_quiz(storage: StorageHandle, quiz_id: int):
    return await quiz_service.get_quiz(storage, quiz_id)


@command
async def create_quiz(storage: StorageHandle, payload: Any):
    request = parse_payload(quiz_schema.QuizCreateRequest, payload)
    return await quiz_service.create_quiz(storage, request)


@command
async def update_quiz(storage: StorageHandle, quiz_id: int, payload: Any):
    request = parse_payload(quiz_schema.QuizUpdateRequest, payload)
    return await quiz_service.update_quiz(storage, quiz_id, request)


@command
async def delete_quiz(storage: StorageHandle, quiz_id: int):
    await quiz_service.delete_quiz(storage, quiz_id)


@command
async def save_quiz_attempt(storage: StorageHandle, payload: Any):
    """응시 결과 저장, 새 기록 ID 반환"""
    request = parse_payload(attempt_schema.QuizAttemptCreateRequest, payload)
    return await attempt_service.save_quiz_attempt(storage, request)


@command
async def get_all_quiz_attempts(storage: StorageHandle):
    return await attempt_service.list_quiz_attempts(storage)


@command
async def get_topic_performance(storage: StorageHandle):
    return await performance_service.get_topic_performance(storage)
