import pytest

from chirpboard.app import NotFoundError, SocialMediaApp
from chirpboard.dates import Date, set_today
from chirpboard.posts import DuplicateLikeError, Memory

USERS = """3
u1 Amna Khan u2 u3 -1 p1 -1
u2 Bilal Ahmed u1 -1 -1
u3 Sara Ali u1 -1 p1 p2 -1
"""

PAGES = """2
p1 Daily News
p2 Food Lovers
"""

POSTS = """3
------
1
post1
15 6 2020
Hello world
u1
u2 p1 -1
------
2
post2
10 3 2024
Lunch time
1
happy
u2
-1
------
1
post3
1 1 2024
Breaking story
p1
u1 u3 -1
------
"""

COMMENTS = """2
c1 post1 u2 Nice post
c2 post3 u1 Great read
"""


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "User.txt").write_text(USERS, encoding="utf-8")
    (tmp_path / "Page.txt").write_text(PAGES, encoding="utf-8")
    (tmp_path / "Post.txt").write_text(POSTS, encoding="utf-8")
    (tmp_path / "Comment.txt").write_text(COMMENTS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def app(data_dir):
    set_today(Date(15, 6, 2025))
    application = SocialMediaApp()
    application.load(data_dir)
    return application


def test_load_reports_no_missing_files(data_dir):
    assert SocialMediaApp().load(data_dir) == []


def test_users_and_friends(app):
    u1 = app.find_user("u1")
    assert u1.display_name() == "Amna Khan"
    assert [friend.account_id for friend in u1.friends] == ["u2", "u3"]
    assert u1.friends[0] is app.find_user("u2")


def test_liked_pages_are_linked_both_ways(app):
    p1 = app.find_page("p1")
    assert [user.account_id for user in p1.likers] == ["u1", "u3"]
    assert [page.account_id for page in app.find_user("u3").liked_pages] == ["p1", "p2"]


def test_lookups_reject_wrong_prefix_and_unknown_id(app):
    with pytest.raises(NotFoundError):
        app.find_user("p1")
    with pytest.raises(NotFoundError):
        app.find_user("u9")
    with pytest.raises(NotFoundError):
        app.find_page("u1")
    with pytest.raises(NotFoundError):
        app.find_post("c1")


def test_posts_have_authors_and_likers(app):
    post3 = app.find_post("post3")
    assert post3.author is app.find_page("p1")
    post1 = app.find_post("post1")
    assert post1.likers == [app.find_user("u2"), app.find_page("p1")]
    assert post1 in app.find_user("u1").timeline


def test_only_first_resolved_comment_is_attached(app):
    post1 = app.find_post("post1")
    assert [comment.comment_id for comment in post1.comments] == ["c1"]
    assert post1.comments[0].author is app.find_user("u2")
    assert app.find_post("post3").comments == []
    assert app.total_comments == 2


def test_missing_users_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SocialMediaApp().load(tmp_path)


def test_missing_optional_files_are_reported(data_dir):
    (data_dir / "Comment.txt").unlink()
    (data_dir / "Page.txt").unlink()
    application = SocialMediaApp()
    assert application.load(data_dir) == ["Page.txt", "Comment.txt"]
    assert application.pages == []


def test_set_current_user(app):
    user = app.set_current_user("u1")
    assert user is app.find_user("u1")
    assert app.current_user is user
    with pytest.raises(NotFoundError):
        app.set_current_user("x1")


def test_views_need_a_current_user(app):
    with pytest.raises(RuntimeError):
        app.view_home()


def test_view_home_lists_latest_posts(app):
    app.set_current_user("u1")
    text = app.view_home()
    assert text.startswith("Amna Khan || Home Page\n\n")
    assert "is feeling happy" in text
    assert "No recent posts from friend 2." in text
    assert '"Breaking story"' in text


def test_view_post_and_likers(app):
    text = app.view_post("post1")
    assert '"Hello world"' in text
    assert "(15/6/2020)" in text
    likers = app.view_post_likers("post1")
    assert "u2 : Bilal Ahmed\n" in likers
    with pytest.raises(NotFoundError):
        app.view_post_likers("post99")


def test_view_friend_and_page_lists(app):
    app.set_current_user("u1")
    assert "u3 : Sara Ali\n" in app.view_friend_list()
    assert app.view_liked_pages().endswith("p1 : Daily News\n")
    assert app.view_page("p1").startswith("Daily News || Timeline\n\n")


def test_like_post_once(app):
    app.set_current_user("u3")
    app.like_post("post1")
    assert app.find_user("u3") in app.find_post("post1").likers
    with pytest.raises(DuplicateLikeError):
        app.like_post("post1")


def test_post_comment_numbers_from_loaded_count(app):
    app.set_current_user("u3")
    comment = app.post_comment("post3", "Interesting")
    assert comment.comment_id == "c2"
    assert comment.author is app.find_user("u3")
    assert app.find_post("post3").comments == [comment]
    assert app.post_comment("post3", "Again").comment_id == "c3"


def test_share_memory(app):
    app.set_current_user("u1")
    memory = app.share_memory("post1", "Throwback")
    assert isinstance(memory, Memory)
    assert memory.post_id == "post4"
    assert memory.original is app.find_post("post1")
    assert app.find_post("post4") is memory
    assert app.find_user("u1").timeline[-1] is memory
    assert memory.share_date == Date(15, 6, 2025)


def test_share_memory_of_someone_elses_post_is_refused(app):
    app.set_current_user("u1")
    with pytest.raises(PermissionError):
        app.share_memory("post2", "Not mine")
    assert len(app.posts) == 3


def test_view_memories(app):
    app.set_current_user("u1")
    text = app.view_memories()
    assert "On this Day" in text
    assert "Years Ago" in text
    assert '"Hello world"' in text
    app.set_current_user("u2")
    assert "No memories from this day in previous years." in app.view_memories()