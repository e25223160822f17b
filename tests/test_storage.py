"""저장소 핸들/설정 테스트"""
import asyncio

import pytest
from sqlalchemy import text

from quizforge.core import paths
from quizforge.core.config import Settings
from quizforge.core.storage import StorageHandle
from quizforge.exceptions import StorageUnavailableError
from quizforge.main import create_storage, health_check_db
from quizforge.schemas import subject as subject_schema
from quizforge.services import subject_service


@pytest.mark.asyncio
async def test_foreign_keys_enabled(storage):
    async with storage.session() as session:
        result = await session.execute(text("PRAGMA foreign_keys"))
        assert result.scalar() == 1


@pytest.mark.asyncio
async def test_nested_session_in_same_task_raises(storage):
    """같은 작업에서 핸들을 다시 요청하면 대기하지 않고 예외"""
    async with storage.session():
        with pytest.raises(RuntimeError):
            async with storage.session():
                pass

    # 잠금이 정상적으로 풀렸는지 확인
    assert await subject_service.list_subjects(storage) == []


@pytest.mark.asyncio
async def test_concurrent_operations_are_serialized(storage):
    """동시 요청도 하나씩 처리되어 모두 저장"""
    await asyncio.gather(*[
        subject_service.create_subject(
            storage, subject_schema.SubjectCreateRequest(name=f"과목 {i}", color="#000000")
        )
        for i in range(5)
    ])

    subjects = await subject_service.list_subjects(storage)
    assert sorted(s.name for s in subjects) == [f"과목 {i}" for i in range(5)]


@pytest.mark.asyncio
async def test_session_before_open_raises(test_settings):
    handle = StorageHandle(app_settings=test_settings)

    assert handle.is_open is False
    with pytest.raises(StorageUnavailableError):
        async with handle.session():
            pass
    with pytest.raises(StorageUnavailableError):
        handle.engine


@pytest.mark.asyncio
async def test_file_database_persists(tmp_path):
    """파일 DB: 데이터 디렉터리 자동 생성, 재초기화해도 데이터 유지"""
    app_settings = Settings(environment="test", data_dir=tmp_path / "nested" / "QuizForge")

    storage = await create_storage(app_settings)
    assert storage.is_open
    try:
        await subject_service.create_subject(
            storage, subject_schema.SubjectCreateRequest(name="보존", color="#000000")
        )
        assert await health_check_db(storage) == {"status": "healthy", "database": "connected"}
    finally:
        await storage.close()

    assert storage.is_open is False
    assert app_settings.database_path.exists()

    reopened = await create_storage(app_settings)
    try:
        await reopened.initialize()
        subjects = await subject_service.list_subjects(reopened)
        assert [s.name for s in subjects] == ["보존"]
    finally:
        await reopened.close()


@pytest.mark.asyncio
async def test_health_check_on_closed_storage(test_settings):
    handle = StorageHandle(app_settings=test_settings)
    assert await health_check_db(handle) == {"status": "unhealthy", "database": "disconnected"}


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("QUIZFORGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("QUIZFORGE_DEFAULT_NUMERIC_TOLERANCE", "0.05")
    monkeypatch.delenv("QUIZFORGE_DATABASE_URL", raising=False)

    app_settings = Settings()

    assert app_settings.database_path == tmp_path / "quizforge.db"
    assert app_settings.resolved_database_url == f"sqlite+aiosqlite:///{tmp_path / 'quizforge.db'}"
    assert app_settings.resolved_log_dir == tmp_path / "logs"
    assert app_settings.default_numeric_tolerance == pytest.approx(0.05)


def test_database_url_override():
    app_settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert app_settings.resolved_database_url == "sqlite+aiosqlite:///:memory:"


def test_app_data_dir_linux(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert paths.get_app_data_dir() == tmp_path / "QuizForge"


def test_app_data_dir_windows(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Windows")
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))

    assert paths.get_app_data_dir() == tmp_path / "QuizForge"
