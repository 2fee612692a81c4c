"""Message references, allowed mentions and message fetch options."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from .contexts import _OpenIntEnum
from .utils import Snowflake


def _optional_snowflake(value: Any) -> Snowflake | None:
    return None if value is None else str(value)


def _query(options: Any) -> dict[str, str]:
    """Turn the set fields of an options dataclass into query strings."""
    query: dict[str, str] = {}
    for option in dataclasses.fields(options):
        value = getattr(options, option.name)
        if value is None:
            continue
        if isinstance(value, bool):
            query[option.name] = "true" if value else "false"
        else:
            query[option.name] = str(value)
    return query


class MessageReferenceType(_OpenIntEnum):
    """Whether a reference is a reply or a forward."""

    DEFAULT = 0
    FORWARD = 1
    UNKNOWN = 2


@dataclass
class MessageReference:
    """A pointer to another message, for replies and forwards."""

    reference_type: MessageReferenceType = MessageReferenceType.DEFAULT
    message_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    fail_if_not_exists: bool | None = None

    @classmethod
    def new_reply(cls, message_id: Any) -> "MessageReference":
        """A reply to the given message."""
        return cls(MessageReferenceType.DEFAULT, message_id=str(message_id))

    @classmethod
    def new_forward(cls, message_id: Any, channel_id: Any) -> "MessageReference":
        """A forward of the given message from the given channel."""
        return cls(
            MessageReferenceType.FORWARD,
            message_id=str(message_id),
            channel_id=str(channel_id),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageReference":
        """Read the API object."""
        return cls(
            reference_type=MessageReferenceType(data["type"]),
            message_id=_optional_snowflake(data.get("message_id")),
            channel_id=_optional_snowflake(data.get("channel_id")),
            guild_id=_optional_snowflake(data.get("guild_id")),
            fail_if_not_exists=data.get("fail_if_not_exists"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the API object, with every field present."""
        return {
            "type": int(self.reference_type),
            "message_id": self.message_id,
            "channel_id": self.channel_id,
            "guild_id": self.guild_id,
            "fail_if_not_exists": self.fail_if_not_exists,
        }


class AllowedMentionType(str, enum.Enum):
    """Kinds of mention that may be parsed from content."""

    ROLES = "roles"
    USERS = "users"
    EVERYONE = "everyone"


@dataclass
class AllowedMentions:
    """Which mentions in a message may ping; by default none may."""

    parse: list[AllowedMentionType] | None = field(default_factory=list)
    roles: list[Snowflake] | None = None
    users: list[Snowflake] | None = None
    replied_user: bool | None = None

    def add_parse(self, mention_type: AllowedMentionType) -> "AllowedMentions":
        """Allow a kind of mention to be parsed from the content."""
        self.parse = [*(self.parse or []), AllowedMentionType(mention_type)]
        return self

    def add_user(self, user_id: Any) -> "AllowedMentions":
        """Allow a specific user to be mentioned."""
        self.users = [*(self.users or []), str(user_id)]
        return self

    def add_role(self, role_id: Any) -> "AllowedMentions":
        """Allow a specific role to be mentioned."""
        self.roles = [*(self.roles or []), str(role_id)]
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the API object, with every field present."""
        return {
            "parse": None if self.parse is None else [m.value for m in self.parse],
            "roles": None if self.roles is None else list(self.roles),
            "users": None if self.users is None else list(self.users),
            "replied_user": self.replied_user,
        }


@dataclass(frozen=True)
class MessageFetchOptions:
    """Query options for fetching messages; only one anchor applies at once."""

    around: Snowflake | None = None
    before: Snowflake | None = None
    after: Snowflake | None = None
    limit: int | None = None

    def with_around(self, message_id: Any) -> "MessageFetchOptions":
        """Fetch around a message, dropping 'before' and 'after'."""
        return dataclasses.replace(self, around=str(message_id), before=None, after=None)

    def with_before(self, message_id: Any) -> "MessageFetchOptions":
        """Fetch before a message, dropping 'around' and 'after'."""
        return dataclasses.replace(self, around=None, before=str(message_id), after=None)

    def with_after(self, message_id: Any) -> "MessageFetchOptions":
        """Fetch after a message, dropping 'around' and 'before'."""
        return dataclasses.replace(self, around=None, before=None, after=str(message_id))

    def to_query(self) -> dict[str, str]:
        """Return the query parameters that are set, as strings."""
        return _query(self)


@dataclass(frozen=True)
class ReactionFetchOptions:
    """Query options for fetching reactions or poll voters."""

    after: Snowflake | None = None
    limit: int | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query parameters that are set, as strings."""
        return _query(self)