"""Stickers and the sticker items attached to messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .contexts import _OpenIntEnum
from .users import User
from .utils import Snowflake


def _optional_snowflake(value: Any) -> Snowflake | None:
    return None if value is None else str(value)


class StickerType(_OpenIntEnum):
    """Whether a sticker is a standard one or belongs to a guild."""

    STANDARD = 1
    GUILD = 2
    UNKNOWN = 3


class StickerFormatType(_OpenIntEnum):
    """The image format of a sticker."""

    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4
    UNKNOWN = 5


@dataclass
class Sticker:
    """A sticker that can be sent in messages."""

    id: Snowflake
    name: str
    tags: str
    sticker_type: StickerType
    format_type: StickerFormatType
    pack_id: Snowflake | None = None
    description: str | None = None
    available: bool | None = None
    guild_id: Snowflake | None = None
    user: User | None = None
    sort_value: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sticker":
        """Read the API object."""
        user = data.get("user")
        return cls(
            id=str(data["id"]),
            pack_id=_optional_snowflake(data.get("pack_id")),
            name=data["name"],
            description=data.get("description"),
            tags=data["tags"],
            sticker_type=StickerType(data["type"]),
            format_type=StickerFormatType(data["format_type"]),
            available=data.get("available"),
            guild_id=_optional_snowflake(data.get("guild_id")),
            user=None if user is None else User.from_dict(user),
            sort_value=data.get("sort_value"),
        )


@dataclass
class StickerItem:
    """The minimal sticker data sent with a message."""

    id: Snowflake
    name: str
    format_type: StickerFormatType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StickerItem":
        """Read the API object."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            format_type=StickerFormatType(data["format_type"]),
        )