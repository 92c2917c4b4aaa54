"""Size helpers for payload budgets."""

from __future__ import annotations

# Maximum length of a single value passed on the wire
MAX_VALUE_LENGTH = 250

# Maximum size (UTF-8 bytes) of a single event payload
EVENT_MAX_PAYLOAD = 16 * 1024


def byte_length(text: str) -> int:
    """UTF-8 encoded length of ``text``."""
    return len(text.encode("utf-8"))


def truncate(text: str, max_length: int = MAX_VALUE_LENGTH) -> str:
    """First ``max_length`` code points of ``text``; astral characters count as one."""
    return text[:max_length]


def is_payload_too_big(text: str, limit: int = EVENT_MAX_PAYLOAD) -> bool:
    """True if ``text`` takes more than ``limit`` bytes once UTF-8 encoded."""
    return byte_length(text) > limit
