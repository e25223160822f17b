from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from quizforge.core.paths import get_app_data_dir


class Settings(BaseSettings):
    """애플리케이션 설정 (환경 변수 QUIZFORGE_* 또는 .env)"""

    model_config = SettingsConfigDict(
        env_prefix="QUIZFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="development", description="development | production | test")
    data_dir: Path | None = Field(default=None, description="앱 전용 데이터 디렉터리 (기본값: 플랫폼 표준 위치)")
    database_filename: str = "quizforge.db"
    database_url: str | None = Field(default=None, description="DB URL 직접 지정 (테스트용 in-memory 등)")
    sql_echo: bool = False
    default_numeric_tolerance: float = Field(default=0.1, description="허용 오차 파싱 실패 시 사용할 기본값")
    log_dir: Path | None = None

    @property
    def resolved_data_dir(self) -> Path:
        return self.data_dir or get_app_data_dir()

    @property
    def database_path(self) -> Path:
        return self.resolved_data_dir / self.database_filename

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def resolved_log_dir(self) -> Path:
        return self.log_dir or self.resolved_data_dir / "logs"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
