"""Exceptions for config_manager.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from config_manager.exceptions import (
        ConfigManagerError,
        InvalidConfigurationError,
        ConfigValidationError,
    )
"""

from config_manager.exceptions.base import (
    ConfigManagerError,
    ConfigValidationError,
    InvalidConfigurationError,
)

__all__ = [
    "ConfigManagerError",
    "InvalidConfigurationError",
    "ConfigValidationError",
]
