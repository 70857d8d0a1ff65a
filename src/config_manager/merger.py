"""Merge raw configuration layers into one flat mapping.

Precedence (low -> high): defaults, JSON file, environment, overrides

A missing or unparsable JSON file contributes nothing. Parse failures are
reported as a warning only; the caller gets no separate status for them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from config_manager.env_loader import capture_environment, load_dotenv_once
from config_manager.logger import Logger, get_logger

RawConfig = Dict[str, Any]


def load_json_file(
    config_file_path: Optional[Path | str],
    logger: Optional[Logger] = None,
) -> RawConfig:
    """Read the JSON file layer.

    Returns an empty dict when no path is given, the file does not exist,
    or its contents are not a JSON object.
    """
    if not config_file_path:
        return {}

    resolved_path = Path(config_file_path).resolve()
    if not resolved_path.is_file():
        return {}

    try:
        data = json.loads(resolved_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        (logger or get_logger()).warning(
            "Could not parse config file",
            path=str(resolved_path),
            error=str(exc),
        )
        return {}

    if not isinstance(data, dict):
        (logger or get_logger()).warning(
            "Config file does not contain a JSON object",
            path=str(resolved_path),
            found=type(data).__name__,
        )
        return {}

    return data


def merge_sources(
    config_file_path: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
    defaults: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> RawConfig:
    """Build the raw configuration for one load call.

    Args:
        config_file_path: Optional JSON file merged beneath the environment
        env: Environment snapshot (default: snapshot of ``os.environ`` taken
            after the one-time .env ingestion)
        defaults: Lowest-precedence values
        overrides: Highest-precedence values
        logger: Receives the warning when the JSON file cannot be parsed

    Returns:
        A new dict; none of the inputs are modified.
    """
    merged: RawConfig = dict(defaults or {})

    merged.update(load_json_file(config_file_path, logger))

    if env is None:
        load_dotenv_once()
        env = capture_environment()
    merged.update(env)

    if overrides:
        merged.update(overrides)

    return merged


__all__ = ["RawConfig", "load_json_file", "merge_sources"]
