"""SKUs, entitlements and subscriptions, and the options for listing them."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .contexts import _OpenIntEnum
from .users import _flag_bits
from .utils import Snowflake, parse_timestamp


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


class SKUType(_OpenIntEnum):
    """Kinds of SKU."""

    DURABLE = 2
    CONSUMABLE = 3
    SUBSCRIPTION = 5
    SUBSCRIPTION_GROUP = 6
    UNKNOWN = 7


class SKUFlags(enum.IntFlag):
    """Bit flags on an SKU."""

    AVAILABLE = 1 << 2
    GUILD_SUBSCRIPTION = 1 << 7
    USER_SUBSCRIPTION = 1 << 8


@dataclass
class SKU:
    """A premium offering of an application."""

    id: Snowflake
    sku_type: SKUType
    application_id: Snowflake
    name: str
    slug: str
    flags: SKUFlags

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SKU":
        """Read the API object."""
        return cls(
            id=str(data["id"]),
            sku_type=SKUType(data["type"]),
            application_id=str(data["application_id"]),
            name=data["name"],
            slug=data["slug"],
            flags=SKUFlags(_flag_bits(data["flags"])),
        )


class EntitlementType(_OpenIntEnum):
    """How an entitlement was obtained."""

    PURCHASE = 1
    PREMIUM_SUBSCRIPTION = 2
    DEVELOPER_GIFT = 3
    TEST_MODE_PURCHASE = 4
    FREE_PURCHASE = 5
    USER_GIFT = 6
    PREMIUM_PURCHASE = 7
    APPLICATION_SUBSCRIPTION = 8
    UNKNOWN = 9


@dataclass
class Entitlement:
    """Access to an SKU granted to a user or guild."""

    id: Snowflake
    sku_id: Snowflake
    application_id: Snowflake
    entitlement_type: EntitlementType
    deleted: bool
    user_id: Snowflake | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    guild_id: Snowflake | None = None
    consumed: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entitlement":
        """Read the API object."""
        return cls(
            id=str(data["id"]),
            sku_id=str(data["sku_id"]),
            application_id=str(data["application_id"]),
            user_id=_optional_snowflake(data.get("user_id")),
            entitlement_type=EntitlementType(data["type"]),
            deleted=data["deleted"],
            starts_at=parse_timestamp(data.get("starts_at")),
            ends_at=parse_timestamp(data.get("ends_at")),
            guild_id=_optional_snowflake(data.get("guild_id")),
            consumed=data.get("consumed"),
        )


@dataclass
class ListEntitlementsOptions:
    """Query options for listing entitlements."""

    user_id: Snowflake | None = None
    sku_ids: str | None = None
    before: Snowflake | None = None
    after: Snowflake | None = None
    limit: int | None = None
    guild_id: Snowflake | None = None
    exclude_ended: bool | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query parameters that are set, as strings."""
        return _query(self)


class EntitlementOwnerType(enum.IntEnum):
    """Who a test entitlement is granted to."""

    GUILD = 1
    USER = 2


@dataclass
class TestEntitlementOptions:
    """The body for creating a test entitlement."""

    __test__ = False

    sku_id: Snowflake
    owner_id: Snowflake
    owner_type: EntitlementOwnerType

    def to_dict(self) -> dict[str, Any]:
        """Return the request body."""
        return {
            "sku_id": str(self.sku_id),
            "owner_id": str(self.owner_id),
            "owner_type": int(self.owner_type),
        }


class SubscriptionStatus(_OpenIntEnum):
    """State of a subscription."""

    ACTIVE = 0
    ENDING = 1
    INACTIVE = 2
    UNKNOWN = 3


@dataclass
class Subscription:
    """A user's subscription to one or more SKUs."""

    id: Snowflake
    user_id: Snowflake
    sku_ids: list[Snowflake]
    entitlement_ids: list[Snowflake]
    current_period_start: datetime
    current_period_end: datetime
    status: SubscriptionStatus
    renewal_sku_ids: list[Snowflake] | None = None
    canceled_at: datetime | None = None
    country: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subscription":
        """Read the API object."""
        renewal = data.get("renewal_sku_ids")
        start = parse_timestamp(data["current_period_start"])
        end = parse_timestamp(data["current_period_end"])
        if start is None or end is None:
            raise ValueError("subscription period timestamps are required")
        return cls(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            sku_ids=[str(s) for s in data["sku_ids"]],
            entitlement_ids=[str(e) for e in data["entitlement_ids"]],
            renewal_sku_ids=None if renewal is None else [str(s) for s in renewal],
            current_period_start=start,
            current_period_end=end,
            status=SubscriptionStatus(data["status"]),
            canceled_at=parse_timestamp(data.get("canceled_at")),
            country=data.get("country"),
        )


@dataclass
class ListSubscriptionOptions:
    """Query options for listing subscriptions of an SKU."""

    before: Snowflake | None = None
    after: Snowflake | None = None
    limit: int | None = None
    user_id: Snowflake | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query parameters that are set, as strings."""
        return _query(self)