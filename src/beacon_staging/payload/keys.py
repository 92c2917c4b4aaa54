"""Wire field codes for beacon payloads and status requests."""

from __future__ import annotations

from enum import Enum


class PayloadKey(str, Enum):
    """Field codes used inside a beacon payload."""
    PROTOCOL_VERSION = "vv"
    AGENT_VERSION = "va"
    APPLICATION_ID = "ap"
    APPLICATION_NAME = "an"
    APPLICATION_VERSION = "vn"
    PLATFORM_TYPE = "pt"
    AGENT_TECHNOLOGY_TYPE = "tt"
    VISITOR_ID = "vi"
    SESSION_NUMBER = "sn"
    CLIENT_IP_ADDRESS = "ip"
    MULTIPLICITY = "mp"
    DATA_COLLECTION_LEVEL = "dl"
    CRASH_REPORTING_LEVEL = "cl"

    # Device metadata
    DEVICE_OS = "os"
    DEVICE_MANUFACTURER = "mf"
    DEVICE_MODEL = "md"
    SCREEN_WIDTH = "sw"
    SCREEN_HEIGHT = "sh"
    USER_LANGUAGE = "ul"
    ORIENTATION = "so"

    # Timestamps
    SESSION_START_TIME = "tv"
    TRANSMISSION_TIME = "tx"

    # Actions and events
    EVENT_TYPE = "et"
    KEY_NAME = "na"
    THREAD_ID = "it"
    ACTION_ID = "ca"
    PARENT_ACTION_ID = "pa"
    START_SEQUENCE_NUMBER = "s0"
    TIME_0 = "t0"
    END_SEQUENCE_NUMBER = "s1"
    TIME_1 = "t1"

    # Errors and crashes
    REASON = "rs"
    ERROR_VALUE = "ev"
    STACKTRACE = "st"
    ERROR_TECHNOLOGY_TYPE = "tt"  # alias of AGENT_TECHNOLOGY_TYPE on error and crash events

    # Reported values
    VALUE = "vl"

    # Web requests
    RESPONSE_CODE = "rc"
    BYTES_SENT = "bs"
    BYTES_RECEIVED = "br"

    # Custom JSON events
    EVENT_PAYLOAD = "pl"


class QueryKey(str, Enum):
    """Field codes used in the status request URL."""
    TYPE = "type"
    SERVER_ID = "srvid"
    APPLICATION = "app"
    VERSION = "va"
    PLATFORM_TYPE = "pt"
    AGENT_TECHNOLOGY_TYPE = "tt"
    NEW_SESSION = "ns"


class EventType(int, Enum):
    """Beacon event type codes (value of ``PayloadKey.EVENT_TYPE``)."""
    MANUAL_ACTION = 1
    NAMED_EVENT = 10
    VALUE_STRING = 11
    VALUE_DOUBLE = 13
    SESSION_START = 18
    SESSION_END = 19
    WEB_REQUEST = 30
    ERROR = 40
    CRASH = 50
    IDENTIFY_USER = 60
    EVENT = 98
