import pytest

from chirpboard.dates import Date, get_today, set_today
from chirpboard.posts import (
    Activity,
    ActivityKind,
    CapacityError,
    Comment,
    DuplicateLikeError,
    Memory,
    Post,
)


class StubAccount:
    def __init__(self, name, ident="u1"):
        self.name = name
        self.ident = ident

    def display_name(self):
        return self.name

    def details(self):
        return f"{self.ident} : {self.name}\n"


@pytest.fixture
def restore_today():
    saved = get_today()
    yield
    set_today(saved)


def make_post(text="hello", author=None, activity=None):
    return Post("post1", text, Date(10, 5, 2020), author or StubAccount("Ann Lee"), activity)


def test_activity_codes_and_labels():
    assert ActivityKind(1) is ActivityKind.FEELING
    assert ActivityKind(4).label == "celebrating"
    assert ActivityKind.THINKING_ABOUT.label == "thinking about"


def test_activity_describe():
    activity = Activity(ActivityKind.MAKING, "bread")
    assert activity.describe() == " is making bread\n"


def test_activity_without_kind_or_value_is_silent():
    assert Activity(None, "bread").describe() == ""
    assert Activity(ActivityKind.FEELING, None).describe() == ""


def test_comment_render_contains_author_and_quoted_text():
    out = Comment("c1", "nice one", StubAccount("Bob")).render()
    assert out.startswith("Bob wrote: ")
    assert out.endswith('"nice one"\n')


def test_comment_without_text():
    assert Comment("c1", None, StubAccount("Bob")).render() == "Bob wrote: "


def test_add_liker_and_duplicate():
    post = make_post()
    fan = StubAccount("Fan", "u2")
    post.add_liker(fan)
    with pytest.raises(DuplicateLikeError):
        post.add_liker(fan)
    assert post.likers == [fan]


def test_add_liker_capacity():
    post = make_post()
    for n in range(Post.MAX_LIKERS):
        post.add_liker(StubAccount(f"f{n}", f"u{n}"))
    with pytest.raises(CapacityError):
        post.add_liker(StubAccount("late", "u99"))
    assert len(post.likers) == Post.MAX_LIKERS


def test_add_liker_none_rejected():
    with pytest.raises(ValueError):
        make_post().add_liker(None)


def test_add_comment_capacity():
    post = make_post()
    for n in range(Post.MAX_COMMENTS):
        post.add_comment(Comment(f"c{n}", "x", StubAccount("A")))
    with pytest.raises(CapacityError):
        post.add_comment(Comment("c99", "x", StubAccount("A")))
    assert len(post.comments) == Post.MAX_COMMENTS


def test_render_plain_share():
    out = make_post("hello").render(show_comments=False)
    assert out.startswith("--- Ann Lee shared ")
    assert '"hello"' in out
    assert "..." not in out
    assert out.endswith("\n")


def test_render_with_date():
    post = make_post("hello")
    out = post.render(True, False)
    assert out.endswith("..." + str(post.share_date) + "\n")


def test_render_with_activity():
    post = make_post("text", activity=Activity(ActivityKind.FEELING, "happy"))
    out = post.render(False, False)
    assert " shared " not in out
    assert " is feeling happy\n    " in out


def test_render_includes_comments_in_order():
    post = make_post()
    first = Comment("c1", "first", StubAccount("A"))
    second = Comment("c2", "second", StubAccount("B"))
    post.add_comment(first)
    post.add_comment(second)
    out = post.render()
    assert out.endswith(post.render_comments())
    assert out.index('"first"') < out.index('"second"')
    assert post.render_comments() == "\t\t\t" + first.render() + "\t\t\t" + second.render() + "\n"


def test_render_liked_list():
    post = make_post()
    a = StubAccount("A", "u1")
    b = StubAccount("B", "u2")
    post.add_liker(a)
    post.add_liker(b)
    out = post.render_liked_list()
    assert out.startswith("\nPost Liked By:\n")
    assert out.endswith(a.details() + b.details())


def test_memory_render(restore_today):
    set_today(Date(10, 5, 2024))
    author = StubAccount("Ann Lee")
    original = Post("post1", "old times", Date(10, 5, 2020), author)
    memory = Memory("post2", "remember this", get_today(), author, original)
    out = memory.render(True, True)
    assert out.startswith("~~~ Ann Lee shared a memory ~~~ ...")
    assert "(4 Years Ago)" in out
    assert '"remember this"' in out
    assert original.render(True, False) in out


def test_memory_render_without_date_omits_years(restore_today):
    set_today(Date(10, 5, 2024))
    author = StubAccount("Ann Lee")
    original = Post("post1", "old times", Date(10, 5, 2020), author)
    memory = Memory("post2", "remember this", get_today(), author, original)
    out = memory.render(False, False)
    assert "Years Ago" not in out
    assert out.endswith(original.render(True, False))
    assert memory.original is original