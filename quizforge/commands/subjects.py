from typing import Any

from quizforge.commands.base import command, parse_payload
from quizforge.core.storage import StorageHandle
from quizforge.schemas import subject as subject_schema
from quizforge.services import subject_service


@command
async def get_subjects(storage: StorageHandle):
    return await subject_service.list_subjects(storage)


@command
async def get_subject(storage: StorageHandle, subject_id: int):
    return await subject_service.get_subject(storage, subject_id)


@command
async def create_subject(storage: StorageHandle, payload: Any):
    request = parse_payload(subject_schema.SubjectCreateRequest, payload)
    return await subject_service.create_subject(storage, request)


@command
async def update_subject(storage: StorageHandle, subject_id: int, payload: Any):
    request = parse_payload(subject_schema.SubjectUpdateRequest, payload)
    return await subject_service.update_subject(storage, subject_id, request)


@command
async def delete_subject(storage: StorageHandle, subject_id: int):
    await subject_service.delete_subject(storage, subject_id)
