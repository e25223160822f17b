import asyncio
import logging

from sqlalchemy import text

from quizforge.core.config import Settings, settings
from quizforge.core.logging import setup_logging
from quizforge.core.storage import StorageHandle

# 로깅 설정
setup_logging()
logger = logging.getLogger(__name__)


async def create_storage(app_settings: Settings | None = None) -> StorageHandle:
    """저장소 핸들 생성 + 스키마 초기화 (앱 시작 시 1회)"""
    storage = StorageHandle(app_settings=app_settings or settings)
    await storage.initialize()
    return storage


async def health_check_db(storage: StorageHandle) -> dict:
    """데이터베이스 연결 상태 확인"""
    try:
        async with storage.session() as session:
            await session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return {"status": "unhealthy", "database": "disconnected"}


async def _init_database():
    storage = await create_storage()
    try:
        status = await health_check_db(storage)
        logger.info(f"데이터베이스 상태: {status}, path={storage.database_url}")
    finally:
        await storage.close()


def main():
    """데이터 디렉터리와 스키마를 준비한다"""
    asyncio.run(_init_database())


if __name__ == "__main__":
    main()
