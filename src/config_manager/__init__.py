"""config_manager - Typed configuration from environment, .env and JSON.

Merges configuration layers and validates the result against a caller-supplied
schema:
- loader: load_config entry point and LoaderOptions
- merger: layer precedence (defaults < JSON file < environment < overrides)
- validator: pydantic-backed validation with structured failures
- masking: redaction of secret values for logging
- logger: diagnostics interface with structured and no-op implementations
- exceptions: error classes with structured error info
"""

__version__ = "1.0.0"

from config_manager.env_loader import (
    capture_environment,
    load_dotenv_once,
    reset_dotenv_state,
)
from config_manager.exceptions import (
    ConfigManagerError,
    ConfigValidationError,
    InvalidConfigurationError,
)
from config_manager.loader import LoaderOptions, load_config
from config_manager.logger import (
    Logger,
    NullLogger,
    StructuredLogger,
    create_logger,
    get_logger,
)
from config_manager.masking import REDACTED, mask_secrets
from config_manager.merger import RawConfig, load_json_file, merge_sources
from config_manager.validator import (
    ValidationFailure,
    ValidationResult,
    validate,
    validate_or_raise,
)

__all__ = [
    "__version__",
    # Loader
    "LoaderOptions",
    "load_config",
    # Merger
    "RawConfig",
    "load_json_file",
    "merge_sources",
    # Environment
    "capture_environment",
    "load_dotenv_once",
    "reset_dotenv_state",
    # Validator
    "ValidationFailure",
    "ValidationResult",
    "validate",
    "validate_or_raise",
    # Secrets
    "REDACTED",
    "mask_secrets",
    # Logger
    "Logger",
    "NullLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "ConfigManagerError",
    "InvalidConfigurationError",
    "ConfigValidationError",
]
