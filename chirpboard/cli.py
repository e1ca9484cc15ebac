"""Interactive menu-driven front end."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from chirpboard.app import NotFoundError, SocialMediaApp
from chirpboard.dates import Date, set_today
from chirpboard.posts import CapacityError, DuplicateLikeError

_RULE = "=========================================="

COMMANDS = (
    "  |View Home",
    "  |View Timeline",
    "  |View Post",
    "  |View Friend List",
    "  |View Liked Pages",
    "  |View Liked List",
    "  |View Memories",
    "  |View Page",
    "  |Like Post",
    " |Post Comment",
    " |Share Memory",
    " |Exit",
)

_WORD_SPLIT = re.compile(r"(\S+)(.*)", re.S)


class _Console:
    """Reads whitespace-separated words and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError("input ended")
        self._pending = line

    def word(self) -> str:
        while not self._pending.strip():
            self._fill()
        match = _WORD_SPLIT.match(self._pending.lstrip())
        assert match is not None
        self._pending = match.group(2)
        return match.group(1)

    def int_or_none(self) -> int | None:
        try:
            return int(self.word())
        except ValueError:
            return None

    def ignore(self) -> None:
        if not self._pending:
            self._fill()
        self._pending = self._pending[1:]

    def line(self) -> str:
        if not self._pending:
            self._fill()
        line, _, rest = self._pending.partition("\n")
        self._pending = rest
        return line


def _ask_int(console: _Console, out: TextIO, prompt: str, low: int, high: int) -> int:
    out.write(prompt)
    value = console.int_or_none()
    while value is None or not low <= value <= high:
        out.write(prompt)
        value = console.int_or_none()
    return value


def run(app: SocialMediaApp, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user exits or the input ends."""
    console = _Console(stdin)
    out = stdout
    try:
        out.write(f"\n{_RULE}\n Welcome to the Social Media Application! \n{_RULE}\n")
        while True:
            out.write("\n|Enter user ID to set as current user (e.g., u7): ")
            user_id = console.line()
            out.write("\n")
            try:
                user = app.set_current_user(user_id)
            except NotFoundError:
                out.write("User not found.\n")
                continue
            out.write(f"{user.display_name()} set as Current User.\n")
            break
        out.write("\n")
        out.write("Enter current system date (dd mm yyyy): \n")
        day = _ask_int(console, out, "|Enter Date: ", 0, 31)
        month = _ask_int(console, out, "|Enter Month: ", 0, 12)
        year = _ask_int(console, out, "|Enter Year: ", 1999, 2025)
        console.ignore()
        today = Date(day, month, year)
        set_today(today)
        out.write(f"\nSystem Date set to: {today}\n")

        out.write(f"\n{_RULE}\nPlease select an option from the menu:\n")
        for number, name in enumerate(COMMANDS, start=1):
            out.write(f"  {number}. {name}\n")
        out.write(f"{_RULE}\n")

        while True:
            out.write(f"\n{_RULE}\nEnter your choice (1-{len(COMMANDS)}): ")
            choice = console.int_or_none()
            while choice is None or not 0 <= choice <= len(COMMANDS):
                out.write("Enter again:\n")
                choice = console.int_or_none()
            console.ignore()
            if _dispatch(app, console, out, choice):
                return
    except EOFError:
        return


def _dispatch(app: SocialMediaApp, console: _Console, out: TextIO, choice: int) -> bool:
    """Carry out one menu choice; return True when the user asked to exit."""
    if choice == 1:
        out.write(app.view_home())
    elif choice == 2:
        out.write(app.view_timeline())
    elif choice == 3:
        out.write("Enter post ID to view (e.g., post8): ")
        post_id = console.line()
        try:
            out.write(app.view_post(post_id))
        except NotFoundError:
            pass
    elif choice == 4:
        out.write(app.view_friend_list())
    elif choice == 5:
        out.write(app.view_liked_pages())
    elif choice == 6:
        out.write("Enter post ID to view its liked list (e.g., post8): ")
        post_id = console.line()
        try:
            out.write(app.view_post_likers(post_id))
        except NotFoundError:
            out.write("Post not found!\n")
    elif choice == 7:
        out.write(app.view_memories())
    elif choice == 8:
        out.write("Enter page ID to view (e.g., p2): ")
        page_id = console.line()
        try:
            out.write(app.view_page(page_id))
        except NotFoundError:
            pass
    elif choice == 9:
        out.write("Enter post ID to like (e.g., post8): ")
        post_id = console.line()
        try:
            app.like_post(post_id)
        except (NotFoundError, DuplicateLikeError, CapacityError):
            pass
        out.write("Post has been Liked.\n")
    elif choice == 10:
        out.write("Enter post ID to comment on (e.g., p2): ")
        post_id = console.line()
        out.write("Enter your comment: ")
        text = console.line()
        try:
            app.post_comment(post_id, text)
        except (NotFoundError, CapacityError):
            pass
        out.write("Comment has been Posted.\n")
    elif choice == 11:
        out.write("Enter post ID to share as a memory (e.g., post8): ")
        post_id = console.line()
        out.write("Enter memory content: ")
        text = console.line()
        try:
            app.share_memory(post_id, text)
        except (NotFoundError, PermissionError, CapacityError):
            pass
        out.write("Memory has been Shared.\n")
    elif choice == 12:
        out.write("Exiting program.\n")
        return True
    else:
        out.write("Error.\n")
    return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Social media dashboard.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding User.txt, Page.txt, Post.txt and Comment.txt",
    )
    args = parser.parse_args(argv)
    app = SocialMediaApp()
    try:
        missing = app.load(args.directory)
    except FileNotFoundError:
        print("File do not exist.")
        return 1
    for _ in missing:
        sys.stdout.write("File not found.")
    run(app, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())