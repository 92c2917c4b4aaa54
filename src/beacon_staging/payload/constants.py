"""Agent constants reported in beacon payloads."""

from __future__ import annotations

# Beacon protocol version
PROTOCOL_VERSION = 3

# Agent version as <major>.<sprint>.<major*10000 + minor*100 + build>
AGENT_VERSION = "8.323.40200"

PLATFORM_TYPE = 1

AGENT_TECHNOLOGY_TYPE = "okjs"

# Error technology type "custom"
ERROR_TECHNOLOGY_TYPE = "c"

# Server id used until the backend assigns one
DEFAULT_SERVER_ID = 1
