# -*- coding: utf-8 -*-
import logging
import sys

from quizforge.core.config import Settings, settings as default_settings


def setup_logging(app_settings: Settings | None = None):
    """로깅 설정"""
    app_settings = app_settings or default_settings
    log_level = logging.DEBUG if app_settings.environment == "development" else logging.INFO

    # 로그 포맷
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # 파일 핸들러 (프로덕션)
    if app_settings.environment == "production":
        log_dir = app_settings.resolved_log_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "quizforge.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)

    # 루트 로거 설정 (중복 호출 시 핸들러 재등록 방지)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_quizforge", False):
            root_logger.removeHandler(handler)

    console_handler._quizforge = True
    root_logger.addHandler(console_handler)

    if app_settings.environment == "production":
        file_handler._quizforge = True
        root_logger.addHandler(file_handler)

    # SQL 로그는 sql_echo 설정으로만 제어
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if app_settings.sql_echo else logging.WARNING
    )
