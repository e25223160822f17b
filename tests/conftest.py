"""공용 테스트 픽스처"""
import pytest
import pytest_asyncio

from quizforge.core.config import Settings
from quizforge.core.storage import StorageHandle
from quizforge.schemas import quiz as quiz_schema
from quizforge.schemas import subject as subject_schema
from quizforge.schemas import topic as topic_schema
from quizforge.services import quiz_service, subject_service, topic_service

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    """테스트용 설정 (in-memory DB)"""
    return Settings(environment="test", database_url=TEST_DATABASE_URL)


@pytest_asyncio.fixture
async def storage(test_settings):
    """스키마가 생성된 in-memory 저장소 핸들"""
    handle = StorageHandle(app_settings=test_settings)
    await handle.initialize()
    yield handle
    await handle.close()


@pytest_asyncio.fixture
async def sample_subject(storage):
    """샘플 과목"""
    return await subject_service.create_subject(
        storage,
        subject_schema.SubjectCreateRequest(
            name="데이터 분석",
            description="ADsP 대비",
            color="#3B82F6",
            icon="chart",
        ),
    )


@pytest_asyncio.fixture
async def sample_topic(storage, sample_subject):
    """샘플 주제"""
    return await topic_service.create_topic(
        storage,
        topic_schema.TopicCreateRequest(
            subject_id=sample_subject.id,
            name="회귀 분석",
            week_number=3,
        ),
    )


@pytest_asyncio.fixture
async def sample_quiz(storage, sample_topic):
    """샘플 퀴즈 (합격 기준 60%)"""
    return await quiz_service.create_quiz(
        storage,
        quiz_schema.QuizCreateRequest(
            topic_id=sample_topic.id,
            name="회귀 분석 확인 퀴즈",
            question_count=10,
            passing_score_percent=60,
        ),
    )
