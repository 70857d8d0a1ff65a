"""Shared fixtures for config_manager tests."""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

import pytest

from config_manager.env_loader import reset_dotenv_state
from config_manager.logger import Logger


class RecordingLogger(Logger):
    """Logger that keeps every record in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def get_session_id(self) -> str:
        return "recording"

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("ERROR", message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self.records.append(("CRITICAL", message, kwargs))

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run each test in an empty directory with .env ingestion not yet done."""
    monkeypatch.chdir(tmp_path)
    reset_dotenv_state()
    yield tmp_path
    reset_dotenv_state()
