"""Payload factories for beacon events."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants
from .keys import EventType, PayloadKey
from .query import PayloadQueryBuilder
from .size import MAX_VALUE_LENGTH

# Maximum length of a stacktrace passed on the wire
MAX_STACKTRACE_LENGTH = 128_000

# Thread id reported on every event
THREAD_ID = 1


def _basic_event_data(event_type: EventType, name: str | None = None) -> PayloadQueryBuilder:
    builder = PayloadQueryBuilder().add(PayloadKey.EVENT_TYPE, event_type)
    if name is not None:
        builder.add(PayloadKey.KEY_NAME, name, MAX_VALUE_LENGTH)
    return builder.add(PayloadKey.THREAD_ID, THREAD_ID)


def combine_payloads(*payloads: str) -> str:
    """Join payload fragments with "&", skipping empty ones."""
    return "&".join(p for p in payloads if p)


def start_session(sequence_number: int) -> str:
    return (
        _basic_event_data(EventType.SESSION_START)
        .add(PayloadKey.PARENT_ACTION_ID, 0)
        .add(PayloadKey.START_SEQUENCE_NUMBER, sequence_number)
        .add(PayloadKey.TIME_0, 0)
        .build()
    )


def end_session(sequence_number: int, duration: int) -> str:
    return (
        _basic_event_data(EventType.SESSION_END)
        .add(PayloadKey.PARENT_ACTION_ID, 0)
        .add(PayloadKey.START_SEQUENCE_NUMBER, sequence_number)
        .add(PayloadKey.TIME_0, duration)
        .build()
    )


def action(
    name: str,
    action_id: int,
    start_sequence_number: int,
    end_sequence_number: int,
    time_since_session_start: int,
    duration: int,
) -> str:
    """Payload for a completed user action."""
    return (
        _basic_event_data(EventType.MANUAL_ACTION, name)
        .add(PayloadKey.ACTION_ID, action_id)
        .add(PayloadKey.PARENT_ACTION_ID, 0)
        .add(PayloadKey.START_SEQUENCE_NUMBER, start_sequence_number)
        .add(PayloadKey.END_SEQUENCE_NUMBER, end_sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .add(PayloadKey.TIME_1, duration)
        .build()
    )


def named_event(
    name: str,
    parent_action_id: int,
    start_sequence_number: int,
    time_since_session_start: int,
) -> str:
    return (
        _basic_event_data(EventType.NAMED_EVENT, name)
        .add(PayloadKey.PARENT_ACTION_ID, parent_action_id)
        .add(PayloadKey.START_SEQUENCE_NUMBER, start_sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .build()
    )


def report_value(
    action_id: int,
    name: str,
    value: int | float | str | None,
    sequence_number: int,
    time_since_session_start: int,
) -> str:
    """
    Payload for a reported value.

    Numbers are sent as double values, anything else as string values.
    A None value is reported without the value field.
    """
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    event_type = EventType.VALUE_DOUBLE if is_number else EventType.VALUE_STRING

    return (
        _basic_event_data(event_type, name)
        .add(PayloadKey.PARENT_ACTION_ID, action_id)
        .add(PayloadKey.START_SEQUENCE_NUMBER, sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .add_if_defined(PayloadKey.VALUE, value)
        .build()
    )


def report_error(
    name: str,
    parent_action_id: int,
    start_sequence_number: int,
    time_since_session_start: int,
    reason: str,
    error_value: int,
) -> str:
    return (
        _basic_event_data(EventType.ERROR, name)
        .add(PayloadKey.PARENT_ACTION_ID, parent_action_id)
        .add(PayloadKey.START_SEQUENCE_NUMBER, start_sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .add(PayloadKey.REASON, reason, MAX_VALUE_LENGTH)
        .add(PayloadKey.ERROR_VALUE, error_value)
        .add(PayloadKey.ERROR_TECHNOLOGY_TYPE, constants.ERROR_TECHNOLOGY_TYPE)
        .build()
    )


def report_crash(
    error_name: str,
    reason: str,
    stacktrace: str,
    sequence_number: int,
    time_since_session_start: int,
) -> str:
    return (
        _basic_event_data(EventType.CRASH, error_name)
        .add(PayloadKey.PARENT_ACTION_ID, 0)
        .add(PayloadKey.START_SEQUENCE_NUMBER, sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .add(PayloadKey.REASON, reason, MAX_VALUE_LENGTH)
        .add(PayloadKey.STACKTRACE, stacktrace, MAX_STACKTRACE_LENGTH)
        .add(PayloadKey.ERROR_TECHNOLOGY_TYPE, constants.ERROR_TECHNOLOGY_TYPE)
        .build()
    )


def identify_user(user_tag: str, sequence_number: int, time_since_session_start: int) -> str:
    return (
        _basic_event_data(EventType.IDENTIFY_USER, user_tag)
        .add(PayloadKey.PARENT_ACTION_ID, 0)
        .add(PayloadKey.START_SEQUENCE_NUMBER, sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .build()
    )


def mutable_prefix(multiplicity: int, transmission_time: int) -> str:
    """Fields that change per transmission rather than per event."""
    return (
        PayloadQueryBuilder()
        .add(PayloadKey.MULTIPLICITY, multiplicity)
        .add(PayloadKey.TRANSMISSION_TIME, transmission_time)
        .build()
    )


def web_request(
    url: str,
    parent_action_id: int,
    start_sequence_number: int,
    time_since_session_start: int,
    end_sequence_number: int,
    duration: int,
    bytes_sent: int = -1,
    bytes_received: int = -1,
    response_code: int = -1,
) -> str:
    """
    Payload for a traced web request.

    Byte counts and response code are omitted when negative (unknown).
    """
    return (
        _basic_event_data(EventType.WEB_REQUEST, url)
        .add(PayloadKey.PARENT_ACTION_ID, parent_action_id)
        .add(PayloadKey.START_SEQUENCE_NUMBER, start_sequence_number)
        .add(PayloadKey.TIME_0, time_since_session_start)
        .add(PayloadKey.END_SEQUENCE_NUMBER, end_sequence_number)
        .add(PayloadKey.TIME_1, duration)
        .add_if_not_negative(PayloadKey.BYTES_SENT, bytes_sent)
        .add_if_not_negative(PayloadKey.BYTES_RECEIVED, bytes_received)
        .add_if_not_negative(PayloadKey.RESPONSE_CODE, response_code)
        .build()
    )


def send_event(json_payload: str) -> str:
    """Payload for a custom JSON event; the JSON is never truncated."""
    return (
        PayloadQueryBuilder()
        .add(PayloadKey.EVENT_TYPE, EventType.EVENT)
        .add(PayloadKey.EVENT_PAYLOAD, json_payload)
        .build()
    )


@dataclass(frozen=True, slots=True)
class ApplicationInfo:
    """Application and device data sent once per beacon."""
    application_id: str
    device_id: str
    data_collection_level: int = 2
    crash_reporting_level: int = 2

    # Optional metadata, omitted from the payload when None
    application_name: str | None = None
    application_version: str | None = None
    operating_system: str | None = None
    manufacturer: str | None = None
    model_id: str | None = None
    screen_width: int | None = None
    screen_height: int | None = None
    user_language: str | None = None
    orientation: str | None = None


def application_wide_prefix(info: ApplicationInfo) -> str:
    """Payload prefix shared by every session of the application."""
    return (
        PayloadQueryBuilder()
        .add(PayloadKey.PROTOCOL_VERSION, constants.PROTOCOL_VERSION)
        .add(PayloadKey.AGENT_VERSION, constants.AGENT_VERSION)
        .add(PayloadKey.APPLICATION_ID, info.application_id)
        .add(PayloadKey.APPLICATION_NAME, info.application_name or "")
        .add_if_defined(PayloadKey.APPLICATION_VERSION, info.application_version)
        .add_if_defined(PayloadKey.DEVICE_OS, info.operating_system)
        .add(PayloadKey.PLATFORM_TYPE, constants.PLATFORM_TYPE)
        .add(PayloadKey.AGENT_TECHNOLOGY_TYPE, constants.AGENT_TECHNOLOGY_TYPE)
        .add(PayloadKey.VISITOR_ID, info.device_id)
        .add(PayloadKey.DATA_COLLECTION_LEVEL, info.data_collection_level)
        .add(PayloadKey.CRASH_REPORTING_LEVEL, info.crash_reporting_level)
        .add_if_defined(PayloadKey.DEVICE_MANUFACTURER, info.manufacturer)
        .add_if_defined(PayloadKey.DEVICE_MODEL, info.model_id)
        .add_if_defined(PayloadKey.SCREEN_WIDTH, info.screen_width)
        .add_if_defined(PayloadKey.SCREEN_HEIGHT, info.screen_height)
        .add_if_defined(PayloadKey.USER_LANGUAGE, info.user_language)
        .add_if_defined(PayloadKey.ORIENTATION, info.orientation)
        .build()
    )


def session_prefix(
    prefix: str,
    session_number: int,
    client_ip_address: str,
    session_start_time: int,
) -> str:
    """Append the per-session fields to an application-wide prefix."""
    session_fields = (
        PayloadQueryBuilder()
        .add(PayloadKey.SESSION_NUMBER, session_number)
        .add(PayloadKey.CLIENT_IP_ADDRESS, client_ip_address)
        .add(PayloadKey.SESSION_START_TIME, session_start_time)
        .build()
    )
    return combine_payloads(prefix, session_fields)
