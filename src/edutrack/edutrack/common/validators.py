from __future__ import annotations

import math
from numbers import Real

from ..core.exceptions import ConfigError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_grace_minutes(value) -> float:
    """Validate the grace period (minutes). Only real numbers are accepted."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigError(f"Thời gian ân hạn không hợp lệ: {value!r}")

    if not math.isfinite(value) or value < 0:
        raise ConfigError(f"Thời gian ân hạn phải >= 0: {value!r}")
    if float(value).is_integer():
        return int(value)
    return float(value)


def parse_grace_setting(value) -> float:
    """Grace period from settings; env-backed values arrive as strings."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError as e:
            raise ConfigError(f"GRACE_MINUTES không hợp lệ: {value!r}") from e
    return require_grace_minutes(value)
