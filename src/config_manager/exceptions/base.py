"""Exception classes for config_manager.

All errors carry structured information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for callers that branch on failures
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from config_manager.validator import ValidationFailure


class ConfigManagerError(Exception):
    """Base exception for all config_manager errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_CONFIGURATION")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidConfigurationError(ConfigManagerError):
    """Generic validation failure with no structured payload.

    Raised under the "generic" failure policy. Callers that only need to know
    that loading failed should catch this type; it also catches
    ConfigValidationError.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        code: str = "INVALID_CONFIGURATION",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


class ConfigValidationError(InvalidConfigurationError):
    """Validation failure carrying per-field and form-level errors.

    Example:
        try:
            settings = load_config(AppSettings)
        except ConfigValidationError as exc:
            if "DB_HOST" in exc.field_errors:
                ...
    """

    def __init__(self, failure: "ValidationFailure", message: str = "Invalid configuration"):
        self.failure = failure
        super().__init__(message=message, details=failure.to_dict())

    @property
    def field_errors(self) -> Dict[str, List[str]]:
        return self.failure.field_errors

    @property
    def form_errors(self) -> List[str]:
        return self.failure.form_errors

    def to_dict(self) -> Dict[str, Any]:
        """Return the failure signal: message, field_errors and form_errors."""
        return {
            "code": self.code,
            "message": self.message,
            "field_errors": {k: list(v) for k, v in self.field_errors.items()},
            "form_errors": list(self.form_errors),
        }
