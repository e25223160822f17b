import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import subject as subject_crud
from quizforge.exceptions import SubjectNotFoundError
from quizforge.schemas import subject as subject_schema

logger = logging.getLogger(__name__)


async def list_subjects(storage: StorageHandle) -> list[subject_schema.SubjectResponse]:
    """과목 목록 조회"""
    async with storage.session() as session:
        subjects = await subject_crud.get_all_subjects(session)
        return [subject_schema.SubjectResponse.model_validate(s) for s in subjects]


async def get_subject(storage: StorageHandle, subject_id: int) -> subject_schema.SubjectResponse:
    """과목 단건 조회"""
    async with storage.session() as session:
        subject = await subject_crud.get_subject_by_id(session, subject_id)
        if not subject:
            raise SubjectNotFoundError(subject_id)
        return subject_schema.SubjectResponse.model_validate(subject)


async def create_subject(
    storage: StorageHandle,
    request: subject_schema.SubjectCreateRequest,
) -> subject_schema.SubjectResponse:
    """과목 생성 후 다시 조회하여 반환"""
    async with storage.transaction() as session:
        subject_id = await subject_crud.create_subject(session, request)

    logger.info(f"과목 생성: subject_id={subject_id}, name={request.name}")
    return await get_subject(storage, subject_id)


async def update_subject(
    storage: StorageHandle,
    subject_id: int,
    request: subject_schema.SubjectUpdateRequest,
) -> subject_schema.SubjectResponse:
    """과목 수정"""
    async with storage.transaction() as session:
        if not await subject_crud.update_subject(session, subject_id, request):
            raise SubjectNotFoundError(subject_id)

    return await get_subject(storage, subject_id)


async def delete_subject(storage: StorageHandle, subject_id: int) -> None:
    """과목 삭제 (존재하지 않아도 오류 아님)"""
    async with storage.transaction() as session:
        await subject_crud.delete_subject(session, subject_id)
    logger.info(f"과목 삭제: subject_id={subject_id}")
