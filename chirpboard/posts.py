"""Posts, shared memories, comments and activities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Protocol

from chirpboard.dates import Date, get_today


class CapacityError(Exception):
    """Raised when a fixed-size collection is already full."""


class DuplicateLikeError(Exception):
    """Raised when an account likes the same post twice."""


class _Author(Protocol):
    def display_name(self) -> str: ...

    def details(self) -> str: ...


class ActivityKind(IntEnum):
    """What a post's author is doing; values match the data-file codes."""

    FEELING = 1
    THINKING_ABOUT = 2
    MAKING = 3
    CELEBRATING = 4

    @property
    def label(self) -> str:
        return _ACTIVITY_LABELS[self]


_ACTIVITY_LABELS = {
    ActivityKind.FEELING: "feeling",
    ActivityKind.THINKING_ABOUT: "thinking about",
    ActivityKind.MAKING: "making",
    ActivityKind.CELEBRATING: "celebrating",
}


@dataclass
class Activity:
    """An activity attached to a post; ``kind`` is None for an unknown code."""

    kind: ActivityKind | None
    value: str | None = None

    def describe(self) -> str:
        if self.kind is None or not self.value:
            return ""
        return f" is {self.kind.label} {self.value}\n"


def _name_of(author: _Author | None) -> str:
    return author.display_name() if author is not None else ""


@dataclass(eq=False)
class Comment:
    """A comment written on a post."""

    comment_id: str | None
    text: str | None
    author: _Author | None = None

    def render(self) -> str:
        out = _name_of(self.author) + " wrote: "
        if self.text:
            out += f'"{self.text}"\n'
        return out


@dataclass(eq=False)
class Post:
    """A post on an account's timeline, with its likers and comments."""

    MAX_LIKERS: ClassVar[int] = 10
    MAX_COMMENTS: ClassVar[int] = 10

    post_id: str | None
    text: str | None
    share_date: Date
    author: _Author | None = None
    activity: Activity | None = None
    likers: list = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    def add_liker(self, account: _Author) -> None:
        """Record a like; each account may like a post once."""
        if account is None:
            raise ValueError("a liker is required")
        if any(existing is account for existing in self.likers):
            raise DuplicateLikeError(f"post {self.post_id} is already liked by this account")
        if len(self.likers) >= self.MAX_LIKERS:
            raise CapacityError(f"post {self.post_id} already has {self.MAX_LIKERS} likers")
        self.likers.append(account)

    def add_comment(self, comment: Comment) -> None:
        if comment is None:
            raise ValueError("a comment is required")
        if len(self.comments) >= self.MAX_COMMENTS:
            raise CapacityError(f"post {self.post_id} already has {self.MAX_COMMENTS} comments")
        self.comments.append(comment)

    def _quoted_text(self) -> str:
        return f'"{self.text or ""}"'

    def render(self, show_date: bool = False, show_comments: bool = True) -> str:
        out = "--- " + _name_of(self.author)
        if self.activity is not None:
            out += self.activity.describe() + "    "
        else:
            out += " shared "
        out += self._quoted_text()
        if show_date:
            out += "..." + str(self.share_date)
        out += "\n"
        if show_comments:
            out += self.render_comments()
        return out

    def render_comments(self) -> str:
        return "".join("\t\t\t" + comment.render() for comment in self.comments) + "\n"

    def render_liked_list(self) -> str:
        return "\nPost Liked By:\n" + "".join(liker.details() for liker in self.likers)


class Memory(Post):
    """A post that re-shares an older post of the same author."""

    def __init__(
        self,
        post_id: str | None,
        text: str | None,
        share_date: Date,
        author: _Author | None,
        original: Post,
    ) -> None:
        super().__init__(post_id, text, share_date, author)
        self.original = original

    def render(self, show_date: bool = False, show_comments: bool = True) -> str:
        out = "~~~ " + _name_of(self.author) + " shared a memory ~~~ ..."
        if show_date:
            out += str(self.share_date)
        out += "\n" + self._quoted_text()
        if show_date:
            years = get_today().year - self.original.share_date.year
            out += f"\n\t\t({years} Years Ago)\n"
        out += self.original.render(True, False)
        if show_comments:
            out += self.render_comments()
        return out