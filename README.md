# chirpboard

chirpboard is a small social network that runs in the terminal. It reads
users, pages, posts and comments from four plain text files. You then act
as one of the users. You can read a home feed and timelines, look at pages,
like posts, write comments and share memories of old posts.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
chirpboard [DIRECTORY]
```

`DIRECTORY` is the folder that holds the data files. If you leave it out,
the current directory is used.

- If `User.txt` is missing, the program prints `File do not exist.` and
  exits with status 1.
- For each of the other three files that is missing, it prints
  `File not found.` and goes on without that file.

The program first asks which user you are, for example `u7`. If no user has
that id, it asks again. Next it asks for the current date:

- the day, from 0 to 31;
- the month, from 0 to 12;
- the year, from 1999 to 2025.

If a value is outside its range or is not a number, the program asks for it
again. It then shows a numbered menu:

1. View Home: the latest post, dated no later than today, of each friend and each liked page
2. View Timeline: your own posts, oldest first, with their comments
3. View Post
4. View Friend List
5. View Liked Pages
6. View Liked List: who liked a post
7. View Memories: your posts made on this day and month in earlier years
8. View Page
9. Like Post
10. Post Comment
11. Share Memory: repost one of your own posts with a note
12. Exit

If you enter a number outside 0 to 12, the program prints `Enter again:`.
Choice 0 prints `Error.`. The program stops when you choose Exit or when the
input ends.

## Data files

There are four whitespace-separated files: `User.txt`, `Page.txt`,
`Post.txt` and `Comment.txt`. Each one starts with a count of its records.

- **User.txt**: for each user:
  - the id (`u1`, `u2`, ...);
  - a first name and a last name, one word each;
  - the ids of the user's friends, ending with `-1`;
  - the ids of the pages the user likes, ending with `-1`.
- **Page.txt**: for each page, the id (`p1`, ...) followed by the page
  title, which runs to the end of the line.
- **Post.txt**: after the count comes one line that is skipped. For each
  post the file holds:
  - the post type (`1` for a plain post, `2` for a post with an activity),
    the post id (`post1`, ...) and the date as day, month and year;
  - the text of the post on its own line;
  - for type `2` only, an activity number and a value on its own line. The
    activity numbers are 1 for feeling, 2 for thinking about, 3 for making
    and 4 for celebrating. For any other number, no activity is shown;
  - the id of the user or page that posted it;
  - the ids of the accounts that liked it, ending with `-1`;
  - one separator line, which is skipped.
- **Comment.txt**: for each comment, the comment id, the post id, the id of
  the author and the comment text up to the end of the line. Loading stops
  at the first comment whose post exists. That comment is the only one
  attached to a post. The count of comment records still sets the numbering
  of new comments (`c<n>`).

Ids are matched by their prefix: `u` for users, `p` for pages and `post`
for posts. Links to ids that do not exist are ignored when the files are
loaded.

These limits apply:

- A user has at most 10 friends and 10 liked pages.
- A page has at most 10 likers.
- A timeline holds at most 10 posts.
- A post holds at most 10 likers and 10 comments.
- An account can like a post only once.

## Using it from Python

```python
from chirpboard.app import SocialMediaApp
from chirpboard.dates import Date, set_today

app = SocialMediaApp()
skipped = app.load("data")          # names of optional files that were missing
app.set_current_user("u7")
set_today(Date(15, 11, 2017))
print(app.view_home())
```

`SocialMediaApp` in `chirpboard.app` carries out each menu action.

- `load(directory)` reads the files. It raises `FileNotFoundError` when
  `User.txt` is missing.
- `find_user`, `find_page` and `find_post` raise `chirpboard.app.NotFoundError`
  for an unknown id. So does every action that takes an id.
- The view methods return the text to show. They are `view_home`,
  `view_timeline`, `view_post`, `view_friend_list`, `view_liked_pages`,
  `view_post_likers`, `view_page` and `view_memories`.
- `like_post(post_id)` raises `chirpboard.posts.DuplicateLikeError` when the
  current user has already liked the post.
- `like_post` and `post_comment` raise `chirpboard.posts.CapacityError` when
  a limit is reached.
- `post_comment(post_id, text)` returns the new `Comment`.
- `share_memory(post_id, text)` returns the new `Memory`. It raises
  `PermissionError` when the post was not written by the current user, and
  `CapacityError` when the user's timeline is full.

The other modules are these:

- `chirpboard.entities` holds `User` and `Page`, which are built on
  `Account`.
- `chirpboard.posts` holds `Post`, `Memory`, `Comment` and `Activity`.
- `chirpboard.loader` holds the file parsers `read_users`, `read_pages`,
  `read_posts` and `read_comments`.
- `chirpboard.dates` holds `Date`, together with `set_today` and `get_today`.

## What it does not do

Changes made while the program runs stay in memory only. New likes,
comments and shared memories are never written back to the data files.
There is no way to create users, pages or new original posts.