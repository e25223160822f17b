"""
문제 저장/조회.

생성/수정은 하나의 트랜잭션에서 기본 행과 답안 행을 모두 쓰고,
핸들을 놓은 뒤 별도의 읽기 단위로 다시 조회하여 반환한다.
"""
import logging

from quizforge.core.storage import StorageHandle
from quizforge.crud import question as question_crud
from quizforge.exceptions import QuestionNotFoundError
from quizforge.schemas import question as question_schema
from quizforge.services import question_assembler

logger = logging.getLogger(__name__)


def _compose(question, rows: question_crud.VariantRows) -> question_schema.QuestionWithDetails:
    return question_assembler.compose(question, rows.options, rows.blanks, rows.order_items, rows.matches)


async def list_questions(storage: StorageHandle, topic_id: int) -> list[question_schema.QuestionWithDetails]:
    """주제별 문제 목록 (답안 행 포함)"""
    async with storage.session() as session:
        questions = await question_crud.get_questions_by_topic_id(session, topic_id)
        variants = await question_crud.get_variant_rows(session, [q.id for q in questions])

    return [_compose(question, variants[question.id]) for question in questions]


async def get_question(storage: StorageHandle, question_id: int) -> question_schema.QuestionWithDetails:
    """문제 단건 조회 (답안 행 포함)"""
    async with storage.session() as session:
        question = await question_crud.get_question_by_id(session, question_id)
        if not question:
            raise QuestionNotFoundError(question_id)
        rows = (await question_crud.get_variant_rows(session, [question_id]))[question_id]

    return _compose(question, rows)


async def create_question(
    storage: StorageHandle,
    request: question_schema.QuestionCreateRequest,
) -> question_schema.QuestionWithDetails:
    """문제 생성 (기본 행 + 답안 행을 원자적으로 저장)"""
    decomposed = question_assembler.decompose(
        request,
        default_tolerance=storage.settings.default_numeric_tolerance,
    )

    async with storage.transaction() as session:
        question_id = await question_crud.insert_question(session, decomposed.base)
        await question_crud.insert_variant_rows(session, question_id, decomposed.variant)

    logger.info(
        f"문제 생성: question_id={question_id}, type={request.question_type.value}, "
        f"topic_id={request.topic_id}"
    )
    return await get_question(storage, question_id)


async def update_question(
    storage: StorageHandle,
    question_id: int,
    request: question_schema.QuestionUpdateRequest,
) -> question_schema.QuestionWithDetails:
    """문제 수정. 답안 행은 부분 수정 없이 전부 삭제 후 다시 추가한다."""
    async with storage.transaction() as session:
        question_type = await question_crud.get_question_type(session, question_id)
        if question_type is None:
            raise QuestionNotFoundError(question_id)

        decomposed = question_assembler.decompose(
            request,
            question_schema.QuestionType(question_type),
            default_tolerance=storage.settings.default_numeric_tolerance,
        )

        await question_crud.delete_variant_rows(session, question_id)
        if not await question_crud.update_question_base(session, question_id, decomposed.base):
            raise QuestionNotFoundError(question_id)
        await question_crud.insert_variant_rows(session, question_id, decomposed.variant)

    logger.info(f"문제 수정: question_id={question_id}")
    return await get_question(storage, question_id)


async def delete_question(storage: StorageHandle, question_id: int) -> None:
    """문제 삭제 (존재하지 않아도 오류 아님)"""
    async with storage.transaction() as session:
        await question_crud.delete_question(session, question_id)
    logger.info(f"문제 삭제: question_id={question_id}")
