"""Load, merge and validate configuration in one call.

Example:
    from pydantic import BaseModel
    from config_manager import LoaderOptions, load_config

    class AppSettings(BaseModel):
        PORT: int = 3000
        DB_HOST: str
        API_KEY: str = ""

    settings = load_config(
        AppSettings,
        LoaderOptions(config_file_path="config.json", secret_keys=["API_KEY"]),
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Type, TypeVar

from config_manager.env_loader import capture_environment, load_dotenv_once
from config_manager.logger import Logger, NullLogger, get_logger
from config_manager.masking import is_maskable, mask_secrets
from config_manager.merger import merge_sources
from config_manager.validator import FailurePolicy, validate_or_raise

T = TypeVar("T")


@dataclass
class LoaderOptions:
    """Options for load_config.

    Attributes:
        config_file_path: JSON file merged beneath environment variables
        secret_keys: Keys redacted when the loaded configuration is logged
        env: Explicit environment snapshot; captured from os.environ when None
        env_file: .env location (default: .env in the working directory)
        load_dotenv: Whether to run the one-time .env ingestion
        defaults: Lowest-precedence values
        overrides: Highest-precedence values
        failure_policy: "structured" raises ConfigValidationError,
            "generic" raises InvalidConfigurationError without detail
        logger: Diagnostics sink (default: get_logger())
        test_mode: Send all diagnostics to a NullLogger
    """

    config_file_path: Optional[Path | str] = None
    secret_keys: Sequence[str] = field(default_factory=tuple)
    env: Optional[Mapping[str, str]] = None
    env_file: Optional[Path | str] = None
    load_dotenv: bool = True
    defaults: Optional[Mapping[str, Any]] = None
    overrides: Optional[Mapping[str, Any]] = None
    failure_policy: FailurePolicy = "structured"
    logger: Optional[Logger] = None
    test_mode: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.secret_keys, (str, bytes)):
            raise TypeError(
                f"secret_keys must be a sequence of key names, got string {self.secret_keys!r}"
            )

    def resolve_logger(self) -> Logger:
        if self.test_mode:
            return NullLogger()
        return self.logger or get_logger()


def load_config(schema: Type[T], options: Optional[LoaderOptions] = None) -> T:
    """Load and validate configuration.

    Args:
        schema: Pydantic model (or any type pydantic can validate)
        options: Loader options

    Returns:
        The validated, typed configuration.

    Raises:
        ConfigValidationError: validation failed under the "structured" policy
        InvalidConfigurationError: validation failed under the "generic" policy
    """
    opts = options or LoaderOptions()
    logger = opts.resolve_logger()

    if opts.load_dotenv:
        load_dotenv_once(opts.env_file)

    env = opts.env if opts.env is not None else capture_environment()

    raw_config = merge_sources(
        config_file_path=opts.config_file_path,
        env=env,
        defaults=opts.defaults,
        overrides=opts.overrides,
        logger=logger,
    )

    config = validate_or_raise(schema, raw_config, logger=logger, policy=opts.failure_policy)

    if opts.secret_keys and is_maskable(config):
        logger.debug("Configuration loaded", config=mask_secrets(config, opts.secret_keys))
    else:
        logger.debug("Configuration loaded", schema=getattr(schema, "__name__", str(schema)))

    return config


__all__ = ["LoaderOptions", "load_config"]
