"""Discord users, their flags and the options for editing and listing them."""

from __future__ import annotations

import dataclasses
import enum
import re
from dataclasses import dataclass
from typing import Any, Mapping

from .contexts import _OpenIntEnum
from .utils import Snowflake

_CDN = "https://cdn.discordapp.com"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32 = 1 << 32


def _parse_unsigned(text: str, bits: int) -> int:
    """Parse an unsigned integer of the given width, falling back to 0."""
    if not _UNSIGNED.fullmatch(text):
        return 0
    value = int(text)
    return value if value < (1 << bits) else 0


def _flag_bits(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"flags must be an integer, got {value!r}")
    if not 0 <= value < _U32:
        raise ValueError(f"flag bits out of range: {value}")
    return value


class UserFlags(enum.IntFlag):
    """Bit flags on a user's account."""

    STAFF = 1 << 0
    PARTNER = 1 << 1
    HYPESQUAD = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HYPESQUAD_ONLINE_HOUSE_1 = 1 << 6
    HYPESQUAD_ONLINE_HOUSE_2 = 1 << 7
    HYPESQUAD_ONLINE_HOUSE_3 = 1 << 8
    PREMIUM_EARLY_SUPPORTER = 1 << 9
    TEAM_PSEUDO_USER = 1 << 10
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18
    BOT_HTTP_INTERACTIONS = 1 << 19
    ACTIVE_DEVELOPER = 1 << 22


def _user_flags(value: Any) -> UserFlags | None:
    return None if value is None else UserFlags(_flag_bits(value))


class PremiumType(_OpenIntEnum):
    """The kind of Nitro subscription on an account."""

    NONE = 0
    NITRO_CLASSIC = 1
    NITRO = 2
    NITRO_BASIC = 3
    UNKNOWN = 4


@dataclass
class AvatarDecorationData:
    """The asset and SKU of a user's avatar decoration."""

    asset: str
    sku_id: Snowflake

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AvatarDecorationData":
        """Read the API object."""
        return cls(asset=data["asset"], sku_id=str(data["sku_id"]))

    def to_dict(self) -> dict[str, Any]:
        """Return the API object."""
        return {"asset": self.asset, "sku_id": self.sku_id}


@dataclass
class User:
    """A Discord user."""

    id: Snowflake
    username: str
    discriminator: str
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
    system: bool | None = None
    mfa_enabled: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    verified: bool | None = None
    email: str | None = None
    flags: UserFlags | None = None
    premium_type: PremiumType | None = None
    public_flags: UserFlags | None = None
    avatar_decoration_data: AvatarDecorationData | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Read the API object."""
        premium = data.get("premium_type")
        decoration = data.get("avatar_decoration_data")
        return cls(
            id=str(data["id"]),
            username=data["username"],
            discriminator=data["discriminator"],
            global_name=data.get("global_name"),
            avatar=data.get("avatar"),
            bot=data.get("bot"),
            system=data.get("system"),
            mfa_enabled=data.get("mfa_enabled"),
            banner=data.get("banner"),
            accent_color=data.get("accent_color"),
            locale=data.get("locale"),
            verified=data.get("verified"),
            email=data.get("email"),
            flags=_user_flags(data.get("flags")),
            premium_type=None if premium is None else PremiumType(premium),
            public_flags=_user_flags(data.get("public_flags")),
            avatar_decoration_data=(
                None if decoration is None else AvatarDecorationData.from_dict(decoration)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the API object, with every field present."""
        return {
            "id": self.id,
            "username": self.username,
            "discriminator": self.discriminator,
            "global_name": self.global_name,
            "avatar": self.avatar,
            "bot": self.bot,
            "system": self.system,
            "mfa_enabled": self.mfa_enabled,
            "banner": self.banner,
            "accent_color": self.accent_color,
            "locale": self.locale,
            "verified": self.verified,
            "email": self.email,
            "flags": None if self.flags is None else int(self.flags),
            "premium_type": None if self.premium_type is None else int(self.premium_type),
            "public_flags": None if self.public_flags is None else int(self.public_flags),
            "avatar_decoration_data": (
                None
                if self.avatar_decoration_data is None
                else self.avatar_decoration_data.to_dict()
            ),
        }

    def default_avatar_url(self) -> str:
        """Return the URL of the default avatar for this user."""
        if self.discriminator == "0":
            index = (_parse_unsigned(self.id, 64) >> 22) % 6
        else:
            index = _parse_unsigned(self.discriminator, 16) % 5
        return f"{_CDN}/embed/avatars/{index}.png"

    def mention(self) -> str:
        """Return the text that mentions this user."""
        return f"<@{self.id}>"


class _Unset(enum.Enum):
    UNSET = enum.auto()


_UNSET = _Unset.UNSET


@dataclass(frozen=True)
class ModifyUserOptions:
    """Changes to make to the bot's own user."""

    username: str | None = None
    avatar: str | None | _Unset = _UNSET
    banner: str | None | _Unset = _UNSET

    def with_avatar(self, avatar_data: Any) -> "ModifyUserOptions":
        """Set the avatar; a File is sent as its data URL."""
        return dataclasses.replace(self, avatar=str(avatar_data))

    def without_avatar(self) -> "ModifyUserOptions":
        """Remove the avatar."""
        return dataclasses.replace(self, avatar=None)

    def with_banner(self, banner_data: Any) -> "ModifyUserOptions":
        """Set the banner; a File is sent as its data URL."""
        return dataclasses.replace(self, banner=str(banner_data))

    def without_banner(self) -> "ModifyUserOptions":
        """Remove the banner."""
        return dataclasses.replace(self, banner=None)

    def to_dict(self) -> dict[str, Any]:
        """Return the request body, leaving out what was not set."""
        body: dict[str, Any] = {}
        if self.username is not None:
            body["username"] = self.username
        if self.avatar is not _UNSET:
            body["avatar"] = self.avatar
        if self.banner is not _UNSET:
            body["banner"] = self.banner
        return body


@dataclass(frozen=True)
class GetUserGuildsOptions:
    """Query options for listing the bot's guilds."""

    before: Snowflake | None = None
    after: Snowflake | None = None
    limit: int | None = None
    with_counts: bool | None = None

    def with_before(self, guild_id: Any) -> "GetUserGuildsOptions":
        """Search before a guild ID, dropping any 'after'."""
        return dataclasses.replace(self, before=str(guild_id), after=None)

    def with_after(self, guild_id: Any) -> "GetUserGuildsOptions":
        """Search after a guild ID, dropping any 'before'."""
        return dataclasses.replace(self, after=str(guild_id), before=None)

    def to_query(self) -> dict[str, str]:
        """Return the query parameters that are set, as strings."""
        query: dict[str, str] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            query[field.name] = ("true" if value else "false") if isinstance(value, bool) else str(value)
        return query