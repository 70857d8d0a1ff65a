"""Redact secret values before configuration is logged."""

import dataclasses
from typing import Any, Dict, Iterable, Mapping, Union

from pydantic import BaseModel

REDACTED = "****"


def is_maskable(config: Any) -> bool:
    """Return True if ``config`` can be turned into a key/value dict for masking."""
    if isinstance(config, (BaseModel, Mapping)):
        return True
    return dataclasses.is_dataclass(config) and not isinstance(config, type)


def _as_dict(config: Any) -> Dict[str, Any]:
    if isinstance(config, BaseModel):
        return config.model_dump()
    if dataclasses.is_dataclass(config) and not isinstance(config, type):
        return dataclasses.asdict(config)
    return dict(config)


def mask_secrets(
    config: Union[Mapping[str, Any], BaseModel, Any],
    secret_keys: Iterable[str],
) -> Dict[str, Any]:
    """Return a shallow copy of ``config`` with secret values replaced.

    Keys listed in ``secret_keys`` whose value is truthy become ``REDACTED``.
    Keys that are missing or empty are left as they are. The input is never
    modified.

    Raises:
        TypeError: ``secret_keys`` is a single string rather than a collection

    Example:
        >>> mask_secrets({"DB_HOST": "localhost", "API_KEY": "123456"}, ["API_KEY"])
        {'DB_HOST': 'localhost', 'API_KEY': '****'}
    """
    if isinstance(secret_keys, (str, bytes)):
        raise TypeError(
            f"secret_keys must be a collection of key names, got string {secret_keys!r}"
        )

    masked = _as_dict(config)
    for key in secret_keys:
        if masked.get(key):
            masked[key] = REDACTED
    return masked


__all__ = ["REDACTED", "is_maskable", "mask_secrets"]
