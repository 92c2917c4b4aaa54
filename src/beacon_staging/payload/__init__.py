"""Payload encoding and buffering."""

from .keys import EventType, PayloadKey, QueryKey
from .query import PayloadQueryBuilder, QueryBuilder, UrlBuilder, encode_component
from .queue import PayloadQueue
from .size import EVENT_MAX_PAYLOAD, MAX_VALUE_LENGTH, byte_length, is_payload_too_big, truncate
from .status import StatusRequest, build_status_url

__all__ = [
    "EventType",
    "PayloadKey",
    "QueryKey",
    "QueryBuilder",
    "PayloadQueryBuilder",
    "UrlBuilder",
    "encode_component",
    "PayloadQueue",
    "EVENT_MAX_PAYLOAD",
    "MAX_VALUE_LENGTH",
    "byte_length",
    "is_payload_too_big",
    "truncate",
    "StatusRequest",
    "build_status_url",
]
