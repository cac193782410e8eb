"""Helpers for nullable text columns."""
from __future__ import annotations

from typing import Optional

# Values can arrive already wrapped as "{...}" from an upstream array cast.
_BRACES = "{}"


def normalize_optional_text(value: Optional[str]) -> str:
    """Render a nullable text value for transport.

    ``None`` (absent) becomes ``""``; otherwise every leading and trailing
    brace character is trimmed, so ``"{urgent}"`` becomes ``"urgent"``.
    """
    if value is None:
        return ""
    return value.strip(_BRACES)
