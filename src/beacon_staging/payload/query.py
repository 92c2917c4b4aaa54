"""Query string encoding for beacon payloads and request URLs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar
from urllib.parse import quote

from .keys import PayloadKey, QueryKey
from .size import truncate


K = TypeVar("K", bound=str)

Value = str | int | float | bool

# Characters left unescaped besides letters, digits and "-_.~",
# matching JavaScript's encodeURIComponent
_SAFE_CHARS = "!*'()"


def encode_component(text: str) -> str:
    """Percent-encode one key or value (UTF-8, space as %20)."""
    return quote(text, safe=_SAFE_CHARS)


def _key_text(key: str | Enum) -> str:
    return key.value if isinstance(key, Enum) else str(key)


def _value_text(value: Value | Enum) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class QueryBuilder(Generic[K]):
    """
    Fluent builder for ``key=value&key=value`` strings.

    Each key appears once. Adding a key again replaces its value but keeps
    the position of its first insertion, so the output order is the order
    in which keys were first added.

    Example:
        PayloadQueryBuilder().add(PayloadKey.DEVICE_OS, "My Os").build()
        -> "os=My%20Os"
    """
    # Applied to every value unless add() is given its own limit
    max_value_length: int | None = field(default=None, kw_only=True)

    _params: dict[str, str] = field(default_factory=dict, init=False)

    def add(self, key: K, value: Value, max_length: int | None = None) -> QueryBuilder[K]:
        """Set ``key`` to the string form of ``value``, optionally truncated."""
        text = _value_text(value)
        if max_length is None:
            max_length = self.max_value_length
        if max_length is not None:
            text = truncate(text, max_length)
        self._params[_key_text(key)] = text
        return self

    def add_if_defined(self, key: K, value: Value | None) -> QueryBuilder[K]:
        """Like ``add``, but leaves the key untouched when ``value`` is None."""
        if value is not None:
            self.add(key, value)
        return self

    def add_if_not_negative(self, key: K, value: int | float) -> QueryBuilder[K]:
        if value >= 0:
            self.add(key, value)
        return self

    def build(self) -> str:
        return "&".join(
            f"{encode_component(key)}={encode_component(value)}"
            for key, value in self._params.items()
        )

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, Enum)):
            return _key_text(key) in self._params
        return False


@dataclass
class PayloadQueryBuilder(QueryBuilder[PayloadKey]):
    """Query builder for beacon payload fields."""


@dataclass
class UrlBuilder(QueryBuilder[QueryKey]):
    """
    Query builder that prefixes its output with a base URL.

    With no parameters the base URL is returned unchanged (no trailing "?").
    """
    base_url: str = ""

    def build(self) -> str:
        query = super().build()
        if not query:
            return self.base_url
        return f"{self.base_url}?{query}"
