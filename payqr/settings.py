"""Felles innstillinger som leses fra miljøvariabler."""

from __future__ import annotations

import os
from typing import Optional

__all__ = [
    "IMAGE_SIZE",
    "QUIET_ZONE",
    "LOG_PAYLOADS",
]

_DEFAULT_IMAGE_SIZE = 512
_DEFAULT_QUIET_ZONE = 4


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    normalized = value.strip().lower()
    return normalized in {"1", "true", "ja", "on", "yes"}


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _positive_or_default(value: Optional[int], default: int) -> int:
    if value is None or value <= 0:
        return default
    return value


IMAGE_SIZE = _positive_or_default(_env_int("PAYQR_IMAGE_SIZE"), _DEFAULT_IMAGE_SIZE)
QUIET_ZONE = _env_int("PAYQR_QUIET_ZONE")
if QUIET_ZONE is None or QUIET_ZONE < 0:
    QUIET_ZONE = _DEFAULT_QUIET_ZONE
LOG_PAYLOADS = _env_flag("PAYQR_LOG_PAYLOADS")
