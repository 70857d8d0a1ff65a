"""Environment snapshot with one-time .env ingestion.

The process environment is the only shared state the loader touches:
1) ``load_dotenv_once`` copies ``.env`` pairs into ``os.environ`` the first
   time it is called and never again for the life of the process. Variables
   already set in the environment are left alone.
2) ``capture_environment`` takes an immutable snapshot that is passed
   explicitly into the merge step.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv

_dotenv_loaded = False


def load_dotenv_once(env_file: Optional[Path | str] = None) -> bool:
    """Load ``KEY=VALUE`` pairs from a .env file into the process environment.

    Only the first call per process does anything; later calls return False
    even if they name a different file.

    Args:
        env_file: Path to the .env file (default: ``.env`` in the working directory)

    Returns:
        True if a file was found and ingested by this call.
    """
    global _dotenv_loaded
    if _dotenv_loaded:
        return False
    _dotenv_loaded = True

    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if not env_path.is_file():
        return False

    load_dotenv(env_path, override=False)
    return True


def dotenv_loaded() -> bool:
    """Return True once .env ingestion has run in this process."""
    return _dotenv_loaded


def reset_dotenv_state() -> None:
    """Forget that .env ingestion ran. Intended for tests."""
    global _dotenv_loaded
    _dotenv_loaded = False


def capture_environment(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return a read-only copy of the environment.

    Later changes to ``os.environ`` are not visible through the snapshot.
    """
    source = os.environ if environ is None else environ
    return MappingProxyType(dict(source))


__all__ = [
    "load_dotenv_once",
    "dotenv_loaded",
    "reset_dotenv_state",
    "capture_environment",
]
