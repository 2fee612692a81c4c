"""Interaction, integration and context types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

from .utils import Snowflake


class _OpenIntEnum(enum.IntEnum):
    """An integer enum that maps unlisted byte values to UNKNOWN."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255:
            return cls["UNKNOWN"]
        return None


class InteractionType(_OpenIntEnum):
    """Discord interaction types."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5
    UNKNOWN = 6


class IntegrationType(_OpenIntEnum):
    """Where an application can be installed."""

    GUILD_INSTALL = 0
    USER_INSTALL = 1
    UNKNOWN = 2


class InteractionContextType(_OpenIntEnum):
    """Where an interaction can be used."""

    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2
    UNKNOWN = 3


def _snowflake(value: Any) -> Snowflake | None:
    return None if value is None else str(value)


@dataclass
class IntegrationOwners:
    """The guild and user that authorised an interaction's integration."""

    guild_id: Snowflake | None = None
    user_id: Snowflake | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IntegrationOwners":
        """Read the object keyed by integration type ("0" guild, "1" user)."""
        return cls(
            guild_id=_snowflake(data.get("0")),
            user_id=_snowflake(data.get("1")),
        )