# slashook

Typed Python models of the Discord objects that a slash command bot works
with. Each object is a dataclass that reads the API's JSON with `from_dict`,
and the request-side objects write their body with `to_dict` or their query
string parameters with `to_query`. Enumerations that Discord may extend map
values they do not list to an `UNKNOWN` member instead of failing.

The package has no dependencies outside the standard library.

## Installation

```
pip install slashook
```

## Modules

- `slashook.utils`: `Color` (from and to hex codes), `File` (bytes to upload,
  with `from_path` and `to_data_url`), `guess_mime_type` and `parse_timestamp`.
- `slashook.contexts`: `InteractionType`, `IntegrationType`,
  `InteractionContextType` and `IntegrationOwners`.
- `slashook.users`: `User`, `UserFlags`, `PremiumType`,
  `AvatarDecorationData`, `ModifyUserOptions` and `GetUserGuildsOptions`.
- `slashook.polls`: `Poll`, `PollCreateRequest`, `PollAnswer`, `PollMedia`,
  `PollResults`, `PollAnswerCount`, `PollVoters` and `PollLayoutType`.
- `slashook.monetization`: `SKU`, `SKUFlags`, `Entitlement`, `Subscription`,
  their type enums, and `ListEntitlementsOptions`, `TestEntitlementOptions`
  and `ListSubscriptionOptions`.
- `slashook.stickers`: `Sticker`, `StickerItem`, `StickerType` and
  `StickerFormatType`.
- `slashook.references`: `MessageReference`, `AllowedMentions`,
  `AllowedMentionType`, `MessageFetchOptions` and `ReactionFetchOptions`.
- `slashook.message_parts`: `ChannelMention`, `Reaction`,
  `ReactionCountDetails`, `MessageActivity`, `RoleSubscriptionData`,
  `MessageCall` and `MessageInteractionMetadata`.

## Examples

```python
from slashook.polls import PollCreateRequest

poll = PollCreateRequest("Is this a good poll?")
poll.add_answer("Yes")
poll.add_answer("No")
body = poll.to_dict()  # duration 24, allow_multiselect False, layout_type 1
```

```python
from slashook.references import AllowedMentions, AllowedMentionType, MessageReference

mentions = AllowedMentions().add_parse(AllowedMentionType.USERS)
mentions.to_dict()
# {'parse': ['users'], 'roles': None, 'users': None, 'replied_user': None}

reply = MessageReference.new_reply("916413462467465246")
```

```python
from slashook.references import MessageFetchOptions

options = MessageFetchOptions(limit=5).with_before("940762083820175440")
options.to_query()  # {'before': '940762083820175440', 'limit': '5'}
```

```python
from slashook.users import ModifyUserOptions
from slashook.utils import Color, File

Color.from_hex("#c0ffee").to_hex()  # '#c0ffee'

options = ModifyUserOptions(username="Catbot").with_avatar(File.from_path("cat.png"))
options.to_dict()  # {'username': 'Catbot', 'avatar': 'data:image/png;base64,...'}
```

## What this package does not do

It holds data models only. It does not run an HTTP endpoint, does not verify
request signatures, does not send requests to Discord and does not dispatch
commands to handlers; pair it with your own web server and HTTP client.