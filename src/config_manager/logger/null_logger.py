"""
No-op logger.

Pass to the validator or set ``LoaderOptions(test_mode=True)`` to keep
validation diagnostics out of test output.
"""

from typing import Any

from .interface import Logger


class NullLogger(Logger):
    """Logger that discards every message."""

    def get_session_id(self) -> str:
        return ""

    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass

    def critical(self, message: str, **kwargs: Any) -> None:
        pass
