from quizforge.core.storage import StorageHandle
from quizforge.crud import performance as performance_crud
from quizforge.schemas import performance as performance_schema


async def get_subject_performance(storage: StorageHandle) -> list[performance_schema.SubjectPerformance]:
    """과목별 시험 성적 요약"""
    async with storage.session() as session:
        rows = await performance_crud.get_subject_performance(session)
    return [performance_schema.SubjectPerformance(**row) for row in rows]


async def get_topic_performance(storage: StorageHandle) -> list[performance_schema.TopicPerformance]:
    """주제별 퀴즈 성적 요약"""
    async with storage.session() as session:
        rows = await performance_crud.get_topic_performance(session)
    return [performance_schema.TopicPerformance(**row) for row in rows]
