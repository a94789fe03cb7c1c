from typing import Any, Dict, NamedTuple, Optional

from .models import WikiPermissionLevel


class SubmitSelfOptions(NamedTuple):
    """
    Options used for selftext posts.

    `send_replies` is only sent when set: leave it as `None` to use the account default.
    """
    subreddit: str
    title: str
    text: str = ""
    flair_id: str = ""
    flair_text: str = ""
    send_replies: Optional[bool] = None
    nsfw: bool = False
    spoiler: bool = False

    def to_form(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.subreddit:
            data["sr"] = self.subreddit
        if self.title:
            data["title"] = self.title
        if self.text:
            data["text"] = self.text
        _add_common(data, self)
        return data


class SubmitURLOptions(NamedTuple):
    """
    Options used for link posts.

    `send_replies` is only sent when set: leave it as `None` to use the account default.
    """
    subreddit: str
    title: str
    url: str
    flair_id: str = ""
    flair_text: str = ""
    send_replies: Optional[bool] = None
    resubmit: bool = False
    nsfw: bool = False
    spoiler: bool = False

    def to_form(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.subreddit:
            data["sr"] = self.subreddit
        if self.title:
            data["title"] = self.title
        if self.url:
            data["url"] = self.url
        if self.resubmit:
            data["resubmit"] = True
        _add_common(data, self)
        return data


def _add_common(data: Dict[str, Any], opts):
    if opts.flair_id:
        data["flair_id"] = opts.flair_id
    if opts.flair_text:
        data["flair_text"] = opts.flair_text
    if opts.send_replies is not None:
        data["sendreplies"] = opts.send_replies
    if opts.nsfw:
        data["nsfw"] = True
    if opts.spoiler:
        data["spoiler"] = True


class WikiPageSettingsUpdateRequest(NamedTuple):
    """
    Wiki page settings to change. Fields left as `None` are not sent.
    """
    listed: Optional[bool] = None
    permission_level: Optional[WikiPermissionLevel] = None

    def to_form(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.permission_level is not None:
            data["permlevel"] = int(self.permission_level)
        if self.listed is not None:
            data["listed"] = self.listed
        return data


class ListOptions(NamedTuple):
    """
    Pagination parameters for listing endpoints, sent as they are.
    """
    after: Optional[str] = None
    before: Optional[str] = None
    limit: Optional[int] = None
    count: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        return {key: value for key, value in self._asdict().items() if value is not None}
