"""Accounts that own timelines: users and pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from chirpboard.dates import get_today
from chirpboard.posts import CapacityError, Post


class Account(ABC):
    """Anything that can publish posts: it has an id and a dated timeline."""

    MAX_POSTS: ClassVar[int] = 10

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        self.timeline: list[Post] = []

    @abstractmethod
    def display_name(self) -> str:
        """Return the name shown for this account."""

    def add_post(self, post: Post) -> None:
        """Insert a post keeping the timeline ordered from oldest to newest."""
        if len(self.timeline) >= self.MAX_POSTS:
            raise CapacityError(
                f"timeline of {self.account_id} already has {self.MAX_POSTS} posts"
            )
        index = next(
            (
                position
                for position, existing in enumerate(self.timeline)
                if existing.share_date >= post.share_date
            ),
            len(self.timeline),
        )
        self.timeline.insert(index, post)

    def latest_post(self) -> Post | None:
        """Return the most recent post that is not dated after today."""
        today = get_today()
        candidates = [post for post in self.timeline if post.share_date <= today]
        return max(candidates, key=lambda post: post.share_date, default=None)

    def details(self) -> str:
        return f"{self.account_id} : {self.display_name()}\n"

    def timeline_text(self) -> str:
        out = self.display_name() + " || Timeline\n\n"
        if not self.timeline:
            return out + "No posts to display.\n"
        return out + "".join(post.render(True, True) for post in self.timeline)

    def memories_text(self) -> str:
        """Render posts made on today's day and month in earlier years."""
        today = get_today()
        out = "On this Day\n"
        found = False
        for post in self.timeline:
            date = post.share_date
            if date.day == today.day and date.month == today.month and date.year < today.year:
                out += f"{today.year - date.year} Years Ago\n"
                out += post.render(True)
                found = True
        if not found:
            out += "No memories from this day in previous years.\n"
        return out


class Page(Account):
    """A page that users can like and that publishes posts."""

    MAX_LIKERS: ClassVar[int] = 10

    def __init__(self, page_id: str, title: str | None = None) -> None:
        super().__init__(page_id)
        self.title = title or None
        self.likers: list[Account] = []

    def display_name(self) -> str:
        return self.title or ""

    def add_liker(self, account: Account) -> None:
        if account is None:
            raise ValueError("a liker is required")
        if len(self.likers) >= self.MAX_LIKERS:
            raise CapacityError(f"page {self.account_id} already has {self.MAX_LIKERS} likers")
        self.likers.append(account)


class User(Account):
    """A person with friends and liked pages."""

    MAX_FRIENDS: ClassVar[int] = 10
    MAX_LIKED_PAGES: ClassVar[int] = 10

    def __init__(
        self,
        user_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> None:
        super().__init__(user_id)
        self.first_name = first_name or None
        self.last_name = last_name or None
        self.friends: list[User] = []
        self.liked_pages: list[Page] = []

    def display_name(self) -> str:
        out = ""
        if self.first_name:
            out += self.first_name + " "
        if self.last_name:
            out += self.last_name
        return out

    def add_friend(self, user: User) -> None:
        if user is None:
            raise ValueError("a friend is required")
        if len(self.friends) >= self.MAX_FRIENDS:
            raise CapacityError(f"user {self.account_id} already has {self.MAX_FRIENDS} friends")
        self.friends.append(user)

    def like_page(self, page: Page) -> None:
        if page is None:
            raise ValueError("a page is required")
        if len(self.liked_pages) >= self.MAX_LIKED_PAGES:
            raise CapacityError(
                f"user {self.account_id} already likes {self.MAX_LIKED_PAGES} pages"
            )
        self.liked_pages.append(page)

    def home_text(self) -> str:
        """Render the latest post of every friend and every liked page."""
        out = self.display_name() + " || Home Page\n\n"
        for number, friend in enumerate(self.friends, start=1):
            latest = friend.latest_post()
            if latest is not None:
                out += latest.render()
            else:
                out += f"No recent posts from friend {number}.\n"
        for number, page in enumerate(self.liked_pages, start=1):
            latest = page.latest_post()
            if latest is not None:
                out += latest.render()
            else:
                out += f"No recent posts from liked page {number}.\n"
        return out

    def friend_list_text(self) -> str:
        return self.display_name() + " || Friends\n" + "".join(
            friend.details() for friend in self.friends
        )

    def liked_pages_text(self) -> str:
        return self.display_name() + " || Liked Pages\n\n" + "".join(
            page.details() for page in self.liked_pages
        )