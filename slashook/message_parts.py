"""Smaller objects carried inside messages: mentions, reactions, activity and calls."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .contexts import IntegrationOwners, InteractionType, _OpenIntEnum
from .users import User
from .utils import Snowflake, parse_timestamp


def _optional_snowflake(value: Any) -> Snowflake | None:
    return None if value is None else str(value)


@dataclass
class ChannelMention:
    """A channel mentioned in a message."""

    id: Snowflake
    guild_id: Snowflake
    channel_type: int
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChannelMention":
        """Read the API object."""
        return cls(
            id=str(data["id"]),
            guild_id=str(data["guild_id"]),
            channel_type=int(data["type"]),
            name=data["name"],
        )


@dataclass
class ReactionCountDetails:
    """Counts of super and normal reactions."""

    burst: int
    normal: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReactionCountDetails":
        """Read the API object."""
        return cls(burst=data["burst"], normal=data["normal"])


@dataclass
class Reaction:
    """A reaction on a message."""

    count: int
    count_details: ReactionCountDetails
    me: bool
    me_burst: bool
    emoji: dict[str, Any]
    burst_colors: list[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Reaction":
        """Read the API object."""
        return cls(
            count=data["count"],
            count_details=ReactionCountDetails.from_dict(data["count_details"]),
            me=data["me"],
            me_burst=data["me_burst"],
            emoji=dict(data["emoji"]),
            burst_colors=list(data["burst_colors"]),
        )


class MessageActivityType(_OpenIntEnum):
    """Kinds of Rich Presence message activity."""

    JOIN = 1
    SPECTATE = 2
    LISTEN = 3
    JOIN_REQUEST = 5
    UNKNOWN = 6


@dataclass
class MessageActivity:
    """Rich Presence activity attached to a message."""

    activity_type: MessageActivityType
    party_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageActivity":
        """Read the API object."""
        return cls(
            activity_type=MessageActivityType(data["type"]),
            party_id=data.get("party_id"),
        )


@dataclass
class RoleSubscriptionData:
    """Details of a role subscription purchase or renewal."""

    role_subscription_listing_id: Snowflake
    tier_name: str
    total_months_subscribed: int
    is_renewal: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RoleSubscriptionData":
        """Read the API object."""
        return cls(
            role_subscription_listing_id=str(data["role_subscription_listing_id"]),
            tier_name=data["tier_name"],
            total_months_subscribed=data["total_months_subscribed"],
            is_renewal=data["is_renewal"],
        )


@dataclass
class MessageCall:
    """The call associated with a message."""

    participants: list[Snowflake]
    ended_timestamp: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageCall":
        """Read the API object."""
        return cls(
            participants=[str(p) for p in data["participants"]],
            ended_timestamp=parse_timestamp(data.get("ended_timestamp")),
        )


@dataclass
class MessageInteractionMetadata:
    """Metadata about the interaction a message was sent for."""

    id: Snowflake
    user: User
    authorizing_integration_owners: IntegrationOwners
    interaction_type: InteractionType | None = None
    original_response_message_id: Snowflake | None = None
    target_user: User | None = None
    target_message_id: Snowflake | None = None
    interacted_message_id: Snowflake | None = None
    triggering_interaction_metadata: "MessageInteractionMetadata | None" = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageInteractionMetadata":
        """Read the API object."""
        interaction_type = data.get("type")
        target_user = data.get("target_user")
        triggering = data.get("triggering_interaction_metadata")
        return cls(
            id=str(data["id"]),
            interaction_type=None if interaction_type is None else InteractionType(interaction_type),
            user=User.from_dict(data["user"]),
            authorizing_integration_owners=IntegrationOwners.from_dict(
                data["authorizing_integration_owners"]
            ),
            original_response_message_id=_optional_snowflake(
                data.get("original_response_message_id")
            ),
            target_user=None if target_user is None else User.from_dict(target_user),
            target_message_id=_optional_snowflake(data.get("target_message_id")),
            interacted_message_id=_optional_snowflake(data.get("interacted_message_id")),
            triggering_interaction_metadata=(
                None if triggering is None else cls.from_dict(triggering)
            ),
        )