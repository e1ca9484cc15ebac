"""The social network: loading its data and the actions a user can take."""

from __future__ import annotations

from pathlib import Path

from chirpboard.dates import get_today
from chirpboard.entities import Account, Page, User
from chirpboard.loader import read_comments, read_pages, read_posts, read_users
from chirpboard.posts import CapacityError, Comment, DuplicateLikeError, Memory, Post

USER_FILE = "User.txt"
PAGE_FILE = "Page.txt"
POST_FILE = "Post.txt"
COMMENT_FILE = "Comment.txt"

_MEMORIES_HEADER = (
    "\nWe hope you enjoy looking back and sharing your memories on our app,"
    "from the most recent to those long ago.\n\n"
)


class NotFoundError(LookupError):
    """Raised when a user, page or post id does not match anything loaded."""


class SocialMediaApp:
    """Holds every user, page and post, and the user currently signed in."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.pages: list[Page] = []
        self.posts: list[Post] = []
        self.current_user: User | None = None
        self.total_comments = 0

    # Loading

    def load(self, directory: str | Path) -> list[str]:
        """Load the data files from ``directory``.

        The users file is required. Returns the names of the other data
        files that were missing and therefore skipped.
        """
        root = Path(directory)
        user_path = root / USER_FILE
        if not user_path.is_file():
            raise FileNotFoundError(f"{user_path} does not exist")
        user_records = read_users(user_path.read_text(encoding="utf-8"))
        self.users = [
            User(record.user_id, record.first_name, record.last_name)
            for record in user_records
        ]

        missing: list[str] = []
        page_text = self._read_optional(root, PAGE_FILE, missing)
        self.pages = read_pages(page_text) if page_text is not None else []

        for user, record in zip(self.users, user_records):
            for friend_id in record.friend_ids:
                friend = self._lookup_user(friend_id)
                if friend is None:
                    continue
                try:
                    user.add_friend(friend)
                except CapacityError:
                    pass
        for user, record in zip(self.users, user_records):
            for page_id in record.liked_page_ids:
                page = self._lookup_page(page_id)
                if page is None:
                    continue
                try:
                    user.like_page(page)
                except CapacityError:
                    pass
                try:
                    page.add_liker(user)
                except CapacityError:
                    pass

        post_text = self._read_optional(root, POST_FILE, missing)
        if post_text is not None:
            self._load_posts(post_text)

        comment_text = self._read_optional(root, COMMENT_FILE, missing)
        if comment_text is not None:
            self._load_comments(comment_text)
        return missing

    @staticmethod
    def _read_optional(root: Path, name: str, missing: list[str]) -> str | None:
        path = root / name
        if not path.is_file():
            missing.append(name)
            return None
        return path.read_text(encoding="utf-8")

    def _load_posts(self, text: str) -> None:
        self.posts = []
        for record in read_posts(text):
            post = record.to_post()
            self.posts.append(post)
            author = self._lookup_account(record.author_id)
            if author is None:
                continue
            try:
                author.add_post(post)
            except CapacityError:
                pass
            post.author = author
            for liker_id in record.liker_ids:
                liker = self._lookup_account(liker_id)
                if liker is None:
                    continue
                try:
                    post.add_liker(liker)
                except (CapacityError, DuplicateLikeError):
                    pass

    def _load_comments(self, text: str) -> None:
        records = read_comments(text)
        self.total_comments = len(records)
        for record in records:
            post = self._lookup_post(record.post_id)
            if post is None:
                continue
            comment = Comment(record.comment_id, record.text)
            try:
                post.add_comment(comment)
            except CapacityError:
                pass
            comment.author = self._lookup_account(record.author_id)
            # Loading stops at the first comment that lands on a post.
            break

    # Lookups

    def _lookup_user(self, user_id: str) -> User | None:
        if not user_id or not user_id.startswith("u"):
            return None
        return next((user for user in self.users if user.account_id == user_id), None)

    def _lookup_page(self, page_id: str) -> Page | None:
        if not page_id or not page_id.startswith("p"):
            return None
        return next((page for page in self.pages if page.account_id == page_id), None)

    def _lookup_post(self, post_id: str) -> Post | None:
        if not post_id or not post_id.startswith("post"):
            return None
        return next((post for post in self.posts if post.post_id == post_id), None)

    def _lookup_account(self, account_id: str) -> Account | None:
        if account_id.startswith("p"):
            return self._lookup_page(account_id)
        return self._lookup_user(account_id)

    def find_user(self, user_id: str) -> User:
        user = self._lookup_user(user_id)
        if user is None:
            raise NotFoundError(f"no user with id {user_id!r}")
        return user

    def find_page(self, page_id: str) -> Page:
        page = self._lookup_page(page_id)
        if page is None:
            raise NotFoundError(f"no page with id {page_id!r}")
        return page

    def find_post(self, post_id: str) -> Post:
        post = self._lookup_post(post_id)
        if post is None:
            raise NotFoundError(f"no post with id {post_id!r}")
        return post

    # Actions of the current user

    def set_current_user(self, user_id: str) -> User:
        self.current_user = self.find_user(user_id)
        return self.current_user

    def _user(self) -> User:
        if self.current_user is None:
            raise RuntimeError("no current user is set")
        return self.current_user

    def view_home(self) -> str:
        return self._user().home_text()

    def view_timeline(self) -> str:
        return self._user().timeline_text()

    def view_post(self, post_id: str) -> str:
        return self.find_post(post_id).render(True)

    def view_friend_list(self) -> str:
        return self._user().friend_list_text()

    def view_liked_pages(self) -> str:
        return self._user().liked_pages_text()

    def view_post_likers(self, post_id: str) -> str:
        return self.find_post(post_id).render_liked_list()

    def view_page(self, page_id: str) -> str:
        return self.find_page(page_id).timeline_text()

    def view_memories(self) -> str:
        return _MEMORIES_HEADER + self._user().memories_text()

    def like_post(self, post_id: str) -> None:
        user = self._user()
        self.find_post(post_id).add_liker(user)

    def post_comment(self, post_id: str, text: str) -> Comment:
        """Comment on a post as the current user and return the new comment."""
        user = self._user()
        post = self.find_post(post_id)
        comment = Comment(f"c{self.total_comments}", text or None, user)
        self.total_comments += 1
        post.add_comment(comment)
        return comment

    def share_memory(self, post_id: str, text: str) -> Memory:
        """Re-share one of the current user's own posts as a memory."""
        user = self._user()
        post = self.find_post(post_id)
        if post.author is not user:
            raise PermissionError(f"post {post_id} was not written by {user.account_id}")
        memory = Memory(f"post{len(self.posts) + 1}", text, get_today(), user, post)
        user.add_post(memory)
        self.posts.append(memory)
        return memory