"""Polls: what the API sends and what a bot sends to create one."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from .contexts import _OpenIntEnum
from .users import User
from .utils import parse_timestamp


class PollLayoutType(_OpenIntEnum):
    """How a poll is laid out."""

    DEFAULT = 1
    UNKNOWN = 2


@dataclass
class PollMedia:
    """The text and emoji of a question or an answer."""

    text: str | None = None
    emoji: dict[str, Any] | None = None

    @classmethod
    def of(cls, value: Any) -> "PollMedia":
        """Return the value itself if it is PollMedia, else media with its text."""
        return value if isinstance(value, PollMedia) else cls(text=str(value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PollMedia":
        """Read the API object."""
        emoji = data.get("emoji")
        return cls(text=data.get("text"), emoji=None if emoji is None else dict(emoji))

    def to_dict(self) -> dict[str, Any]:
        """Return the API object."""
        return {"text": self.text, "emoji": self.emoji}


@dataclass
class PollAnswer:
    """One answer of a poll."""

    answer_id: int | None = None
    poll_media: PollMedia = field(default_factory=PollMedia)

    @classmethod
    def of(cls, value: Any) -> "PollAnswer":
        """Return the value itself if it is an answer, else an answer built from it."""
        if isinstance(value, PollAnswer):
            return value
        return cls(poll_media=PollMedia.of(value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PollAnswer":
        """Read the API object."""
        return cls(
            answer_id=data.get("answer_id"),
            poll_media=PollMedia.from_dict(data["poll_media"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the API object."""
        return {"answer_id": self.answer_id, "poll_media": self.poll_media.to_dict()}


@dataclass
class PollAnswerCount:
    """Vote count for one answer."""

    id: int
    count: int
    me_voted: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PollAnswerCount":
        """Read the API object."""
        return cls(id=data["id"], count=data["count"], me_voted=data["me_voted"])


@dataclass
class PollResults:
    """The results of a poll."""

    is_finalized: bool
    answer_counts: list[PollAnswerCount]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PollResults":
        """Read the API object."""
        return cls(
            is_finalized=data["is_finalized"],
            answer_counts=[PollAnswerCount.from_dict(c) for c in data["answer_counts"]],
        )


@dataclass
class Poll:
    """A poll attached to a message."""

    question: PollMedia
    answers: list[PollAnswer]
    allow_multiselect: bool
    layout_type: PollLayoutType
    expiry: datetime | None = None
    results: PollResults | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Poll":
        """Read the API object."""
        results = data.get("results")
        return cls(
            question=PollMedia.from_dict(data["question"]),
            answers=[PollAnswer.from_dict(a) for a in data["answers"]],
            expiry=parse_timestamp(data.get("expiry")),
            allow_multiselect=data["allow_multiselect"],
            layout_type=PollLayoutType(data["layout_type"]),
            results=None if results is None else PollResults.from_dict(results),
        )


@dataclass
class PollCreateRequest:
    """A poll to create; lasts 24 hours and allows one answer unless changed."""

    question: PollMedia
    answers: list[PollAnswer] = field(default_factory=list)
    duration: int = 24
    allow_multiselect: bool = False
    layout_type: PollLayoutType = PollLayoutType.DEFAULT

    def __post_init__(self) -> None:
        self.question = PollMedia.of(self.question)
        self.answers = [PollAnswer.of(a) for a in self.answers]

    def add_answer(self, answer: Any) -> "PollCreateRequest":
        """Append an answer (text, PollMedia or PollAnswer) and return the request."""
        self.answers.append(PollAnswer.of(answer))
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the request body."""
        return {
            "question": self.question.to_dict(),
            "answers": [a.to_dict() for a in self.answers],
            "duration": self.duration,
            "allow_multiselect": self.allow_multiselect,
            "layout_type": int(self.layout_type),
        }


@dataclass
class PollVoters:
    """Users who voted for an answer."""

    users: list[User]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PollVoters":
        """Read the API object."""
        return cls(users=[User.from_dict(u) for u in data["users"]])