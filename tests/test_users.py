import pytest

from slashook.users import (
    AvatarDecorationData,
    GetUserGuildsOptions,
    ModifyUserOptions,
    PremiumType,
    User,
    UserFlags,
)
from slashook.utils import File

PREFIX = "https://cdn.discordapp.com/embed/avatars/"


def _user_data(**extra):
    data = {"id": "80351110224678912", "username": "nelly", "discriminator": "1337"}
    data.update(extra)
    return data


def test_from_dict_reads_fields():
    user = User.from_dict(_user_data(global_name="Nelly", bot=True, premium_type=2))
    assert user.id == "80351110224678912"
    assert user.global_name == "Nelly"
    assert user.bot is True
    assert user.premium_type is PremiumType.NITRO
    assert user.avatar is None


def test_from_dict_missing_required_field():
    with pytest.raises(KeyError):
        User.from_dict({"id": "1", "username": "x"})


def test_flags_keep_unknown_bits():
    user = User.from_dict(_user_data(public_flags=(1 << 17) | (1 << 30)))
    assert UserFlags.VERIFIED_DEVELOPER in user.public_flags
    assert int(user.public_flags) == (1 << 17) | (1 << 30)


def test_flags_out_of_range():
    with pytest.raises(ValueError):
        User.from_dict(_user_data(flags=-1))


def test_unknown_premium_type():
    assert User.from_dict(_user_data(premium_type=9)).premium_type is PremiumType.UNKNOWN


def test_round_trip():
    data = _user_data(
        avatar="abc",
        flags=int(UserFlags.STAFF | UserFlags.PARTNER),
        premium_type=1,
        avatar_decoration_data={"asset": "deco", "sku_id": "42"},
    )
    user = User.from_dict(data)
    assert User.from_dict(user.to_dict()) == user
    dumped = user.to_dict()
    assert dumped["flags"] == int(UserFlags.STAFF | UserFlags.PARTNER)
    assert dumped["avatar_decoration_data"] == {"asset": "deco", "sku_id": "42"}
    assert dumped["email"] is None


def test_avatar_decoration_round_trip():
    deco = AvatarDecorationData(asset="a", sku_id="1")
    assert AvatarDecorationData.from_dict(deco.to_dict()) == deco


def test_mention():
    assert User(id="123", username="a", discriminator="0").mention() == "<@123>"


def test_default_avatar_zero_id():
    user = User(id="0", username="a", discriminator="0")
    assert user.default_avatar_url() == PREFIX + "0.png"


@pytest.mark.parametrize("snowflake", ["80351110224678912", "175928847299117063", "1", "junk"])
def test_default_avatar_new_usernames_index_range(snowflake):
    url = User(id=snowflake, username="a", discriminator="0").default_avatar_url()
    assert url.startswith(PREFIX) and url.endswith(".png")
    assert int(url[len(PREFIX):-4]) in range(6)


@pytest.mark.parametrize("discriminator", ["1337", "0001", "9999", "bad"])
def test_default_avatar_legacy_index_range(discriminator):
    url = User(id="1", username="a", discriminator=discriminator).default_avatar_url()
    assert int(url[len(PREFIX):-4]) in range(5)


def test_default_avatar_bad_discriminator_falls_back():
    assert User(id="1", username="a", discriminator="bad").default_avatar_url() == PREFIX + "0.png"


def test_modify_options_empty():
    assert ModifyUserOptions().to_dict() == {}


def test_modify_options_set_and_unset():
    options = ModifyUserOptions(username="Catbot").with_avatar("data:x").without_banner()
    assert options.to_dict() == {"username": "Catbot", "avatar": "data:x", "banner": None}
    assert options.without_avatar().to_dict()["avatar"] is None


def test_modify_options_file_becomes_data_url():
    png = File("cat.png", b"\x89PNG\r\n\x1a\n")
    body = ModifyUserOptions().with_banner(png).to_dict()
    assert body["banner"] == png.to_data_url()
    assert body["banner"].startswith("data:image/png;base64,")


def test_guild_options_before_after_exclusive():
    options = GetUserGuildsOptions().with_after(5).with_before(7)
    assert options.before == "7"
    assert options.after is None
    options = options.with_after("9")
    assert (options.before, options.after) == (None, "9")


def test_guild_options_query():
    options = GetUserGuildsOptions(limit=10, with_counts=True).with_before("3")
    assert options.to_query() == {"before": "3", "limit": "10", "with_counts": "true"}
    assert GetUserGuildsOptions().to_query() == {}