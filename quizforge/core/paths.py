"""
앱 전용 데이터 디렉터리 경로.

Windows: %LOCALAPPDATA%/QuizForge
macOS:   ~/Library/Application Support/QuizForge
Linux:   $XDG_DATA_HOME/QuizForge (기본 ~/.local/share/QuizForge)
"""
import os
import platform
from pathlib import Path

APP_DIR_NAME = "QuizForge"


def get_app_data_dir() -> Path:
    """플랫폼 표준 사용자 데이터 디렉터리 (존재 여부는 확인하지 않음)"""
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
        return Path(base) / APP_DIR_NAME if base else Path.home() / ".quizforge"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME
