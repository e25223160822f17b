from typing import Any

from quizforge.commands.base import command, parse_payload
from quizforge.core.storage import StorageHandle
from quizforge.schemas import attempt as attempt_schema
from quizforge.schemas import exam as exam_schema
from quizforge.services import attempt_service, exam_service, performance_service


@command
async def get_exams(storage: StorageHandle, subject_id: int):
    return await exam_service.list_exams(storage, subject_id)


@command
async def get_exam(storage: StorageHandle, exam_id: int):
    return await exam_service.get_exam(storage, exam_id)


@command
async def create_exam(storage: StorageHandle, payload: Any):
    request = parse_payload(exam_schema.ExamCreateRequest, payload)
    return await exam_service.create_exam(storage, request)


@command
async def update_exam(storage: StorageHandle, exam_id: int, payload: Any):
    request = parse_payload(exam_schema.ExamUpdateRequest, payload)
    return await exam_service.update_exam(storage, exam_id, request)


@command
async def delete_exam(storage: StorageHandle, exam_id: int):
    await exam_service.delete_exam(storage, exam_id)


@command
async def save_exam_attempt(storage: StorageHandle, payload: Any):
    """응시 결과 저장, 새 기록 ID 반환"""
    request = parse_payload(attempt_schema.ExamAttemptCreateRequest, payload)
    return await attempt_service.save_exam_attempt(storage, request)


@command
async def get_all_exam_attempts(storage: StorageHandle):
    return await attempt_service.list_exam_attempts(storage)


@command
async def get_subject_performance(storage: StorageHandle):
    return await performance_service.get_subject_performance(storage)
