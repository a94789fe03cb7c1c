from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from .base import Thing
from .utils import timestamp
from .mixins import Created, Votable

if TYPE_CHECKING:
    from .utils import JsonType


class Submitted(NamedTuple):
    """
    A newly submitted post.

    Attributes
    ----------
    id : str
        The ID of the post, without the kind prefix.
    fullname : str
        The ID of the post, prefixed with its kind (ex. `t3_abc`).
    url : str
        The URL of the post.
    """
    id: str = ""
    fullname: str = ""
    url: str = ""

    @classmethod
    def from_data(cls, data: Optional[dict]) -> Submitted:
        if not data:
            return cls()
        return cls(data.get("id", ""), data.get("name", ""), data.get("url", ""))


class WikiPermissionLevel(IntEnum):
    """
    Who can edit a wiki page.
    """
    SUBREDDIT_WIKI_PERMISSIONS = 0
    APPROVED_CONTRIBUTORS_ONLY = 1
    MODERATORS_ONLY = 2


class User(Thing, Created):
    def __init__(self, user_data: JsonType):
        Thing.__init__(self, user_data)
        data = user_data["data"]
        Created.__init__(self, data)
        self.data = data
        self.post_karma: int = data.get("link_karma", 0)
        self.comment_karma: int = data.get("comment_karma", 0)
        self.has_verified_email: bool = bool(data.get("has_verified_email"))
        self.is_employee: bool = data.get("is_employee", False)
        self.is_suspended: bool = data.get("is_suspended", False)
        # the NSFW flag lives on the user's profile subreddit
        self.nsfw: bool = (data.get("subreddit") or {}).get("over_18", False)


class Post(Thing, Created, Votable):
    def __init__(self, post_data: JsonType):
        Thing.__init__(self, post_data)
        data = post_data["data"]
        Created.__init__(self, data)
        Votable.__init__(self, data)
        self.data = data
        self.title = data["title"]
        self.url = data["url"]
        self.text = data["selftext"]
        self.permalink = data["permalink"]
        self.edited = timestamp(data["edited"])
        self.author = data["author"]
        self.author_id = data.get("author_fullname")
        self.subreddit_name = data["subreddit"]
        self.subreddit_name_prefixed = data["subreddit_name_prefixed"]
        self.subreddit_id = data["subreddit_id"]
        self.upvote_ratio = data["upvote_ratio"]
        self.num_comments = data["num_comments"]
        self.send_replies = data["send_replies"]
        self.stickied = data["stickied"]
        self.spoiler = data["spoiler"]
        self.locked = data["locked"]
        self.is_self = data["is_self"]
        self.nsfw = data["over_18"]
        self.saved = data["saved"]

    def __repr__(self) -> str:
        return "Post({0.id}, {0.title})".format(self)


class WikiPage:
    """
    A single wiki page, as of its latest revision.

    Attributes
    ----------
    content : str
        The page contents, in markdown.
    reason : Optional[str]
        The reason given for the latest revision.
    may_revise : bool
        Whether the current user is allowed to edit the page.
    revision_id : str
        The ID of the latest revision.
    revision_date : Optional[datetime]
        When the latest revision was made.
    revision_by : Optional[User]
        The author of the latest revision.
    """
    def __init__(self, page_data: JsonType):
        data = page_data["data"]
        self.data = data
        self.content: str = data["content_md"]
        self.reason: Optional[str] = data.get("reason")
        self.may_revise: bool = data["may_revise"]
        self.revision_id: str = data["revision_id"]
        self.revision_date = timestamp(data.get("revision_date"))
        revision_by = data.get("revision_by")
        self.revision_by: Optional[User] = User(revision_by) if revision_by else None

    def __repr__(self) -> str:
        return f"WikiPage({self.revision_id})"


class WikiPageSettings:
    def __init__(self, settings_data: JsonType):
        data = settings_data["data"]
        self.data = data
        self.permission_level = WikiPermissionLevel(data["permlevel"])
        self.listed: bool = data["listed"]
        self.editors: List[User] = [User(user_data) for user_data in data["editors"]]

    def __repr__(self) -> str:
        return f"WikiPageSettings({self.permission_level.name}, listed={self.listed})"
