"""Schema validation for merged raw configuration.

Structural checks and coercion (``"8080"`` -> ``8080``, ``"true"`` -> ``True``)
are delegated to pydantic. Any type pydantic can build a ``TypeAdapter`` for is
accepted as a schema: ``BaseModel`` subclasses, dataclasses, ``TypedDict``.

The core path returns a ``ValidationResult`` instead of raising;
``validate_or_raise`` turns a failed result into one of two exception shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Literal, Mapping, Optional, Type, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from config_manager.exceptions import ConfigValidationError, InvalidConfigurationError
from config_manager.logger import Logger, get_logger

T = TypeVar("T")

FailurePolicy = Literal["structured", "generic"]
FAILURE_POLICIES = ("structured", "generic")


@dataclass(frozen=True)
class ValidationFailure:
    """Per-field and form-level error messages from one validation attempt.

    Attributes:
        field_errors: Dotted field path (e.g. "NESTED.FEATURE_FLAG") -> messages
        form_errors: Messages not tied to a single field
    """

    field_errors: Dict[str, List[str]] = field(default_factory=dict)
    form_errors: List[str] = field(default_factory=list)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationFailure":
        field_errors: Dict[str, List[str]] = {}
        form_errors: List[str] = []

        for error in exc.errors(include_url=False):
            loc = error.get("loc", ())
            if loc:
                path = ".".join(str(part) for part in loc)
                field_errors.setdefault(path, []).append(error["msg"])
            else:
                form_errors.append(error["msg"])

        return cls(field_errors=field_errors, form_errors=form_errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field_errors": {k: list(v) for k, v in self.field_errors.items()},
            "form_errors": list(self.form_errors),
        }


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a validated value or a ValidationFailure, never both."""

    value: Optional[T] = None
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: ValidationFailure) -> "ValidationResult[T]":
        return cls(failure=failure)


def validate(
    schema: Type[T],
    raw_config: Mapping[str, Any],
    logger: Optional[Logger] = None,
) -> ValidationResult[T]:
    """Validate raw configuration against a schema.

    On failure the structured errors are logged at error level. Pass
    ``NullLogger()`` to keep them quiet.

    Errors raised while building the schema adapter are not caught.
    """
    adapter = TypeAdapter(schema)
    try:
        value = adapter.validate_python(dict(raw_config))
    except PydanticValidationError as exc:
        failure = ValidationFailure.from_pydantic(exc)
        (logger or get_logger()).error(
            "Configuration validation error",
            field_errors=failure.field_errors,
            form_errors=failure.form_errors,
        )
        return ValidationResult.fail(failure)

    return ValidationResult.success(value)


def raise_for_failure(failure: ValidationFailure, policy: FailurePolicy = "structured") -> None:
    """Raise the exception matching ``policy`` for a failed validation.

    Raises:
        ConfigValidationError: policy "structured"
        InvalidConfigurationError: policy "generic" (no error detail attached)
        ValueError: unknown policy
    """
    if policy == "structured":
        raise ConfigValidationError(failure)
    if policy == "generic":
        raise InvalidConfigurationError()
    raise ValueError(f"Unknown failure policy {policy!r}. Expected one of {FAILURE_POLICIES}.")


def validate_or_raise(
    schema: Type[T],
    raw_config: Mapping[str, Any],
    logger: Optional[Logger] = None,
    policy: FailurePolicy = "structured",
) -> T:
    """Validate and return the typed value, raising on failure."""
    if policy not in FAILURE_POLICIES:
        raise ValueError(f"Unknown failure policy {policy!r}. Expected one of {FAILURE_POLICIES}.")

    result = validate(schema, raw_config, logger=logger)
    if result.failure is not None:
        raise_for_failure(result.failure, policy)
    return result.value  # type: ignore[return-value]


__all__ = [
    "FailurePolicy",
    "ValidationFailure",
    "ValidationResult",
    "validate",
    "validate_or_raise",
    "raise_for_failure",
]
