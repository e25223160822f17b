"""
단일 저장소 핸들.

설치당 하나의 SQLite 파일과 하나의 연결(StaticPool)을 소유하며,
asyncio.Lock으로 한 번에 하나의 작업만 연결을 사용하도록 직렬화한다.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quizforge.core.config import Settings, settings as default_settings
from quizforge.exceptions import ConstraintViolationError, StorageUnavailableError

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record):
    """연결마다 외래키 제약(CASCADE 삭제에 필요) 활성화"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class StorageHandle:
    """직렬화된 단일 DB 연결"""

    def __init__(self, database_url: str | None = None, app_settings: Settings | None = None):
        self.settings = app_settings or default_settings
        self.database_url = database_url or self.settings.resolved_database_url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()
        self._owner: asyncio.Task | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StorageUnavailableError("데이터베이스가 초기화되지 않았습니다.")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _ensure_database_dir(self):
        url = make_url(self.database_url)
        if not url.drivername.startswith("sqlite") or url.database in (None, "", ":memory:"):
            return
        try:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f"데이터 디렉터리를 만들 수 없습니다: {e}") from e

    async def open(self):
        """엔진 생성 (이미 열려 있으면 무시)"""
        if self._engine is not None:
            return

        self._ensure_database_dir()
        engine = create_async_engine(
            self.database_url,
            echo=self.settings.sql_echo,
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

        self._engine = engine
        self._session_factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
        logger.debug(f"저장소 핸들 열림: {self.database_url}")

    async def initialize(self):
        """연결을 열고 스키마를 생성 (최초 실행 시 1회, 반복 호출해도 안전)"""
        from quizforge.models import Base

        await self.open()
        async with self._guard():
            try:
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except SQLAlchemyError as e:
                logger.error(f"스키마 생성 실패: {e.__class__.__name__}: {e}", exc_info=True)
                raise StorageUnavailableError(f"스키마를 생성할 수 없습니다: {e}") from e
        logger.info(f"데이터베이스 초기화 완료: {self.database_url}")

    async def close(self):
        """연결 종료"""
        if self._engine is None:
            return
        async with self._guard():
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
        logger.debug("저장소 핸들 닫힘")

    @asynccontextmanager
    async def _guard(self) -> AsyncIterator[None]:
        current = asyncio.current_task()
        if self._lock.locked() and self._owner is current:
            # 같은 작업에서 다시 잠그면 영원히 대기하게 된다
            raise RuntimeError("저장소 핸들을 이미 점유한 상태에서 다시 요청했습니다.")
        async with self._lock:
            self._owner = current
            try:
                yield
            finally:
                self._owner = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """읽기 단위: 핸들을 독점한 세션 (커밋하지 않음)"""
        if self._session_factory is None:
            raise StorageUnavailableError("데이터베이스가 초기화되지 않았습니다.")

        async with self._guard():
            async with self._session_factory() as session:
                try:
                    yield session
                except IntegrityError as e:
                    logger.debug(f"제약 조건 위반: {e.orig}")
                    raise ConstraintViolationError(f"데이터 제약 조건을 위반했습니다: {e.orig}") from e
                except SQLAlchemyError as e:
                    logger.error(f"데이터베이스 오류: {e.__class__.__name__}", exc_info=True)
                    raise StorageUnavailableError(f"데이터베이스 오류가 발생했습니다: {e}") from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """쓰기 단위: 성공 시 커밋, 어떤 예외든 전체 롤백"""
        async with self.session() as session:
            async with session.begin():
                yield session


async def enable_cascade(session: AsyncSession):
    """삭제 직전 CASCADE 활성화 (SQLite는 연결마다 기본값이 OFF)"""
    await session.execute(text("PRAGMA foreign_keys = ON"))
