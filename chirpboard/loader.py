"""Readers for the whitespace-and-line based data files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from chirpboard.dates import Date
from chirpboard.entities import Page
from chirpboard.posts import Activity, ActivityKind, Post

_WORD = re.compile(r"\s*(\S+)")

MAX_FRIENDS = 10
MAX_LIKED_PAGES = 10
END_OF_LIST = "-1"


class TokenReader:
    """Reads a text one whitespace-separated token or one line at a time."""

    def __init__(self, text: str) -> None:
        self._text = text.replace("\r\n", "\n")
        self._pos = 0

    def next_token(self) -> str:
        match = _WORD.match(self._text, self._pos)
        if match is None:
            self._pos = len(self._text)
            raise EOFError("unexpected end of input")
        self._pos = match.end()
        return match.group(1)

    def next_int(self) -> int:
        word = self.next_token()
        try:
            return int(word)
        except ValueError as exc:
            raise ValueError(f"expected an integer, got {word!r}") from exc

    def next_line(self) -> str:
        """Return the rest of the current line and move past its newline."""
        if self._pos >= len(self._text):
            raise EOFError("unexpected end of input")
        end = self._text.find("\n", self._pos)
        if end == -1:
            line = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos:end]
            self._pos = end + 1
        return line

    def skip_line(self) -> None:
        """Move past the next newline, or to the end of the text."""
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end == -1 else end + 1

    def _skip_char(self) -> None:
        self._pos = min(self._pos + 1, len(self._text))


@dataclass
class UserRecord:
    user_id: str
    first_name: str | None
    last_name: str | None
    friend_ids: list[str] = field(default_factory=list)
    liked_page_ids: list[str] = field(default_factory=list)


@dataclass
class PostRecord:
    post_id: str
    text: str | None
    share_date: Date
    author_id: str
    activity: Activity | None = None
    liker_ids: list[str] = field(default_factory=list)

    def to_post(self) -> Post:
        """Build a post without an author; likers are resolved by the caller."""
        return Post(self.post_id, self.text, self.share_date, activity=self.activity)


@dataclass
class CommentRecord:
    comment_id: str
    post_id: str
    author_id: str
    text: str | None


def _read_ids(reader: TokenReader, limit: int) -> list[str]:
    ids: list[str] = []
    while len(ids) < limit:
        word = reader.next_token()
        if word == END_OF_LIST:
            break
        ids.append(word)
    return ids


def read_users(text: str) -> list[UserRecord]:
    """Parse the users file: a count, then id, names, friends and liked pages."""
    reader = TokenReader(text)
    records = []
    for _ in range(reader.next_int()):
        user_id = reader.next_token()
        reader._skip_char()
        first_name = reader.next_token()
        last_name = reader.next_token()
        friends = _read_ids(reader, MAX_FRIENDS)
        liked = _read_ids(reader, MAX_LIKED_PAGES)
        records.append(UserRecord(user_id, first_name, last_name, friends, liked))
    return records


def read_pages(text: str) -> list[Page]:
    """Parse the pages file: a count, then one ``id title`` line per page."""
    reader = TokenReader(text)
    pages = []
    for _ in range(reader.next_int()):
        page_id = reader.next_token()
        reader._skip_char()
        try:
            title = reader.next_line()
        except EOFError:
            title = ""
        pages.append(Page(page_id, title or None))
    return pages


def _read_activity(reader: TokenReader) -> Activity:
    code = reader.next_int()
    reader._skip_char()
    try:
        kind = ActivityKind(code)
    except ValueError:
        return Activity(None)
    value = reader.next_line()
    return Activity(kind, value or None)


def read_posts(text: str) -> list[PostRecord]:
    """Parse the posts file: a count and separator line, then post blocks."""
    reader = TokenReader(text)
    count = reader.next_int()
    reader._skip_char()
    reader.skip_line()
    records = []
    for _ in range(count):
        kind = reader.next_int()
        post_id = reader.next_token()
        share_date = Date(reader.next_int(), reader.next_int(), reader.next_int())
        reader._skip_char()
        body = reader.next_line()
        activity = _read_activity(reader) if kind == 2 else None
        author_id = reader.next_token()
        likers = _read_ids(reader, Post.MAX_LIKERS)
        records.append(
            PostRecord(post_id, body or None, share_date, author_id, activity, likers)
        )
        reader._skip_char()
        reader.skip_line()
    return records


def read_comments(text: str) -> list[CommentRecord]:
    """Parse the comments file: a count, then ``id post author text`` lines."""
    reader = TokenReader(text)
    records = []
    for _ in range(reader.next_int()):
        comment_id = reader.next_token()
        post_id = reader.next_token()
        author_id = reader.next_token()
        reader._skip_char()
        try:
            body = reader.next_line()
        except EOFError:
            body = ""
        records.append(CommentRecord(comment_id, post_id, author_id, body or None))
    return records