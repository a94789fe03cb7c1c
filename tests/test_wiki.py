"""Tests for the subreddit wiki endpoints."""

from datetime import datetime, timezone

import pytest

from asyncddit import (
    InvalidArgument,
    ListOptions,
    WikiPermissionLevel,
    WikiPageSettingsUpdateRequest,
)


def assert_is_v_95(user):
    assert user.id == "164ab8"
    assert user.name == "v_95"
    assert user.fullname == "t2_164ab8"
    assert user.created == datetime(2017, 3, 12, 4, 56, 47, tzinfo=timezone.utc)
    assert user.post_karma == 691
    assert user.comment_karma == 22235
    assert user.has_verified_email is True
    assert user.nsfw is True


@pytest.mark.asyncio
async def test_page(reddit, mux, page_data):
    mux.handle("/r/testsubreddit/wiki/testpage", page_data)

    page = await reddit.wiki.page("testsubreddit", "testpage")

    assert len(mux.requests) == 1
    assert mux.last.method == "GET"
    assert page.content == "test reason"
    assert page.reason == "this is a reason!"
    assert page.may_revise is True
    assert page.revision_id == "3c4e9fab-ef2c-11ea-90b6-0e9189256887"
    assert page.revision_date == datetime(2020, 9, 5, 3, 59, 45, tzinfo=timezone.utc)
    assert_is_v_95(page.revision_by)


@pytest.mark.asyncio
async def test_pages(reddit, mux):
    mux.handle("/r/testsubreddit/wiki/pages", {"kind": "wikipagelisting", "data": ["faq", "index"]})

    pages = await reddit.wiki.pages("testsubreddit")

    assert mux.last.method == "GET"
    assert pages == ["faq", "index"]


@pytest.mark.asyncio
async def test_settings(reddit, mux, settings_data):
    mux.handle("/r/testsubreddit/wiki/settings/testpage", settings_data)

    settings = await reddit.wiki.settings("testsubreddit", "testpage")

    assert len(mux.requests) == 1
    assert mux.last.method == "GET"
    assert settings.permission_level is WikiPermissionLevel.SUBREDDIT_WIKI_PERMISSIONS
    assert settings.listed is True
    assert len(settings.editors) == 1
    assert_is_v_95(settings.editors[0])


@pytest.mark.asyncio
async def test_update_settings(reddit, mux, settings_data):
    path = "/r/testsubreddit/wiki/settings/testpage"
    mux.handle(path, settings_data)

    with pytest.raises(InvalidArgument, match="update_request: cannot be None"):
        await reddit.wiki.update_settings("testsubreddit", "testpage", None)
    assert mux.requests == []

    settings = await reddit.wiki.update_settings(
        "testsubreddit",
        "testpage",
        WikiPageSettingsUpdateRequest(
            listed=False,
            permission_level=WikiPermissionLevel.APPROVED_CONTRIBUTORS_ONLY,
        ),
    )

    assert mux.last.method == "POST"
    assert mux.last.path == path
    assert mux.last.form == {"permlevel": "1", "listed": "false"}
    assert settings.listed is True
    assert_is_v_95(settings.editors[0])


@pytest.mark.asyncio
async def test_update_settings_sends_only_set_fields(reddit, mux, settings_data):
    mux.handle("/r/testsubreddit/wiki/settings/testpage", settings_data)

    await reddit.wiki.update_settings(
        "testsubreddit", "testpage", WikiPageSettingsUpdateRequest(listed=True)
    )
    assert mux.last.form == {"listed": "true"}

    await reddit.wiki.update_settings(
        "testsubreddit",
        "testpage",
        WikiPageSettingsUpdateRequest(permission_level=WikiPermissionLevel.MODERATORS_ONLY),
    )
    assert mux.last.form == {"permlevel": "2"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method, action", [("allow", "add"), ("deny", "del")])
async def test_editors(reddit, mux, method, action):
    path = f"/r/testsubreddit/api/wiki/alloweditor/{action}"
    # the endpoint answers with an empty body
    mux.handle(path, body="")

    response = await getattr(reddit.wiki, method)("testsubreddit", "testpage", "testusername")

    assert response.data is None
    assert len(mux.requests) == 1
    assert mux.last.method == "POST"
    assert mux.last.path == path
    assert mux.last.form == {"page": "testpage", "username": "testusername"}


@pytest.mark.asyncio
async def test_discussions(reddit, mux, discussions_data):
    mux.handle("/r/testsubreddit/wiki/discussions/testpage", discussions_data)

    posts = await reddit.wiki.discussions("testsubreddit", "testpage")

    assert mux.last.method == "GET"
    assert mux.last.query == {}
    assert len(posts) == 1
    post = posts[0]
    assert post.id == "imj8g5"
    assert post.fullname == "t3_imj8g5"
    assert post.created == datetime(2020, 9, 4, 16, 33, 33, tzinfo=timezone.utc)
    assert post.edited is None
    assert post.permalink == "/r/helloworldtestt/comments/imj8g5/test/"
    assert post.url == "https://www.reddit.com/r/helloworldtestt/wiki/index"
    assert post.title == "test"
    assert post.likes is True
    assert post.score == 1
    assert post.upvote_ratio == 1
    assert post.num_comments == 0
    assert post.subreddit_name == "helloworldtestt"
    assert post.subreddit_name_prefixed == "r/helloworldtestt"
    assert post.subreddit_id == "t5_2uquw1"
    assert post.author == "v_95"
    assert post.author_id == "t2_164ab8"


@pytest.mark.asyncio
async def test_discussions_list_options(reddit, mux, discussions_data):
    mux.handle("/r/testsubreddit/wiki/discussions/testpage", discussions_data)

    await reddit.wiki.discussions("testsubreddit", "testpage", ListOptions(after="t3_x", limit=5))

    assert mux.last.query == {"after": "t3_x", "limit": "5"}


@pytest.mark.asyncio
async def test_edit(reddit, mux):
    mux.handle("/r/testsubreddit/api/wiki/edit")

    await reddit.wiki.edit("testsubreddit", "testpage", "new content")
    assert mux.last.form == {"page": "testpage", "content": "new content"}

    await reddit.wiki.edit("testsubreddit", "testpage", "newer content", reason="typo")
    assert mux.last.form == {"page": "testpage", "content": "newer content", "reason": "typo"}


@pytest.mark.asyncio
async def test_revert(reddit, mux):
    mux.handle("/r/testsubreddit/api/wiki/revert")

    await reddit.wiki.revert("testsubreddit", "testpage", "abc-123")

    assert mux.last.method == "POST"
    assert mux.last.form == {"page": "testpage", "revision": "abc-123"}


@pytest.mark.asyncio
async def test_toggle_visibility(reddit, mux):
    mux.handle("/r/testsubreddit/api/wiki/hide", {"status": True})

    hidden = await reddit.wiki.toggle_visibility("testsubreddit", "testpage", "abc-123")

    assert hidden is True
    assert mux.last.form == {"page": "testpage", "revision": "abc-123"}
