from datetime import datetime, timezone

import pytest

from slashook.monetization import (
    SKU,
    Entitlement,
    EntitlementOwnerType,
    EntitlementType,
    ListEntitlementsOptions,
    ListSubscriptionOptions,
    SKUFlags,
    SKUType,
    Subscription,
    SubscriptionStatus,
    TestEntitlementOptions,
)


def _sku(**overrides):
    data = {
        "id": "1088510058284990888",
        "type": int(SKUType.SUBSCRIPTION),
        "application_id": "788708323867885999",
        "name": "Test Premium",
        "slug": "test-premium",
        "flags": int(SKUFlags.AVAILABLE | SKUFlags.USER_SUBSCRIPTION),
    }
    data.update(overrides)
    return data


def test_sku_from_dict():
    sku = SKU.from_dict(_sku())
    assert sku.id == "1088510058284990888"
    assert sku.sku_type is SKUType.SUBSCRIPTION
    assert sku.name == "Test Premium"
    assert SKUFlags.AVAILABLE in sku.flags
    assert SKUFlags.USER_SUBSCRIPTION in sku.flags
    assert SKUFlags.GUILD_SUBSCRIPTION not in sku.flags


def test_sku_unknown_type():
    sku = SKU.from_dict(_sku(type=42))
    assert sku.sku_type is SKUType.UNKNOWN


def test_sku_flags_keep_unknown_bits():
    bits = (1 << 20) | int(SKUFlags.AVAILABLE)
    sku = SKU.from_dict(_sku(flags=bits))
    assert int(sku.flags) == bits


def test_sku_rejects_non_integer_flags():
    with pytest.raises(TypeError):
        SKU.from_dict(_sku(flags="4"))


def test_sku_missing_field():
    data = _sku()
    del data["slug"]
    with pytest.raises(KeyError):
        SKU.from_dict(data)


def test_entitlement_from_dict():
    entitlement = Entitlement.from_dict(
        {
            "id": "1019653849998299136",
            "sku_id": "1019475255913222144",
            "application_id": "1019370614521200640",
            "user_id": "771129655544643584",
            "type": int(EntitlementType.APPLICATION_SUBSCRIPTION),
            "deleted": False,
            "starts_at": "2022-09-14T17:00:18.704163+00:00",
            "ends_at": "2022-10-14T17:00:18.704163+00:00",
            "consumed": False,
        }
    )
    assert entitlement.user_id == "771129655544643584"
    assert entitlement.entitlement_type is EntitlementType.APPLICATION_SUBSCRIPTION
    assert entitlement.deleted is False
    assert entitlement.starts_at == datetime(2022, 9, 14, 17, 0, 18, 704163, tzinfo=timezone.utc)
    assert entitlement.ends_at > entitlement.starts_at
    assert entitlement.guild_id is None


def test_entitlement_test_mode_has_no_dates():
    entitlement = Entitlement.from_dict(
        {
            "id": "1",
            "sku_id": "2",
            "application_id": "3",
            "guild_id": 4,
            "type": int(EntitlementType.TEST_MODE_PURCHASE),
            "deleted": True,
        }
    )
    assert entitlement.starts_at is None
    assert entitlement.ends_at is None
    assert entitlement.guild_id == "4"
    assert entitlement.consumed is None


def test_list_entitlements_query_leaves_out_unset():
    query = ListEntitlementsOptions(user_id="1", limit=10, exclude_ended=True).to_query()
    assert query == {"user_id": "1", "limit": "10", "exclude_ended": "true"}


def test_list_entitlements_empty_query():
    assert ListEntitlementsOptions().to_query() == {}


def test_test_entitlement_options_body():
    body = TestEntitlementOptions("100", "200", EntitlementOwnerType.USER).to_dict()
    assert body == {
        "sku_id": "100",
        "owner_id": "200",
        "owner_type": int(EntitlementOwnerType.USER),
    }
    assert EntitlementOwnerType(body["owner_type"]) is EntitlementOwnerType.USER


def test_subscription_from_dict():
    subscription = Subscription.from_dict(
        {
            "id": "1278078770116427839",
            "user_id": "1088605110638227537",
            "sku_ids": ["1158857122189168803"],
            "entitlement_ids": [],
            "renewal_sku_ids": None,
            "current_period_start": "2024-08-27T19:48:44.406602+00:00",
            "current_period_end": "2024-09-27T19:48:44.406602+00:00",
            "status": int(SubscriptionStatus.ACTIVE),
            "canceled_at": None,
        }
    )
    assert subscription.sku_ids == ["1158857122189168803"]
    assert subscription.entitlement_ids == []
    assert subscription.renewal_sku_ids is None
    assert subscription.status is SubscriptionStatus.ACTIVE
    assert subscription.current_period_end > subscription.current_period_start
    assert subscription.canceled_at is None


def test_subscription_requires_period():
    with pytest.raises(ValueError):
        Subscription.from_dict(
            {
                "id": "1",
                "user_id": "2",
                "sku_ids": [],
                "entitlement_ids": [],
                "current_period_start": None,
                "current_period_end": "2024-09-27T19:48:44+00:00",
                "status": 0,
            }
        )


def test_subscription_unknown_status():
    subscription = Subscription.from_dict(
        {
            "id": "1",
            "user_id": "2",
            "sku_ids": [],
            "entitlement_ids": [],
            "current_period_start": "2024-08-27T19:48:44Z",
            "current_period_end": "2024-09-27T19:48:44Z",
            "status": 99,
        }
    )
    assert subscription.status is SubscriptionStatus.UNKNOWN


def test_list_subscription_query():
    query = ListSubscriptionOptions(after="55", user_id="66").to_query()
    assert query == {"after": "55", "user_id": "66"}