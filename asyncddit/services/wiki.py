from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..base import ClientBase
from ..exceptions import InvalidArgument
from ..models import Post, WikiPage, WikiPageSettings

if TYPE_CHECKING:
    from ..options import ListOptions, WikiPageSettingsUpdateRequest


class WikiService(ClientBase):
    """
    Subreddit wiki endpoints.
    """

    ##################################################
    # Pages
    ##################################################

    async def page(self, subreddit: str, page: str) -> WikiPage:
        """
        Retrieves a wiki page.

        Parameters
        ----------
        subreddit : str
            Name of the subreddit, without the '/r/' prefix.
        page : str
            Name of the page.

        Returns
        -------
        WikiPage
            The page, as of its latest revision.
        """
        response = await self._client.get(f"/r/{subreddit}/wiki/{page}")
        return WikiPage(response.data)

    async def pages(self, subreddit: str) -> List[str]:
        """
        Retrieves the names of all wiki pages of a subreddit.
        """
        response = await self._client.get(f"/r/{subreddit}/wiki/pages")
        return list(response.data["data"])

    async def discussions(
        self, subreddit: str, page: str, opts: Optional[ListOptions] = None
    ) -> List[Post]:
        """
        Retrieves posts linking to a wiki page.

        Parameters
        ----------
        subreddit : str
            Name of the subreddit, without the '/r/' prefix.
        page : str
            Name of the page.
        opts : Optional[ListOptions]
            Pagination parameters, passed to the endpoint as they are.

        Returns
        -------
        List[Post]
            The posts, in the order returned.
        """
        params = opts.to_params() if opts is not None else None
        response = await self._client.get(f"/r/{subreddit}/wiki/discussions/{page}", params)
        return [Post(post_data) for post_data in response.data["data"]["children"]]

    # these return {} on success

    def edit(self, subreddit: str, page: str, content: str, reason: Optional[str] = None):
        data = {
            "page": page,
            "content": content,
        }
        if reason:
            data["reason"] = reason
        return self._client.post_form(f"/r/{subreddit}/api/wiki/edit", data)

    def revert(self, subreddit: str, page: str, revision_id: str):
        data = {
            "page": page,
            "revision": revision_id,
        }
        return self._client.post_form(f"/r/{subreddit}/api/wiki/revert", data)

    async def toggle_visibility(self, subreddit: str, page: str, revision_id: str) -> bool:
        """
        Toggles whether a revision is hidden from the page's history.

        Returns
        -------
        bool
            `True` if the revision is now hidden, `False` otherwise.
        """
        data = {
            "page": page,
            "revision": revision_id,
        }
        response = await self._client.post_form(f"/r/{subreddit}/api/wiki/hide", data)
        return bool(response.data["status"])

    ##################################################
    # Settings
    ##################################################

    async def settings(self, subreddit: str, page: str) -> WikiPageSettings:
        response = await self._client.get(f"/r/{subreddit}/wiki/settings/{page}")
        return WikiPageSettings(response.data)

    async def update_settings(
        self,
        subreddit: str,
        page: str,
        update_request: Optional[WikiPageSettingsUpdateRequest],
    ) -> WikiPageSettings:
        """
        Changes the settings of a wiki page. Only the fields set on the request are sent.

        Returns
        -------
        WikiPageSettings
            The settings after the update.

        Raises
        ------
        InvalidArgument
            `update_request` is `None`.
        """
        if update_request is None:
            raise InvalidArgument("update_request: cannot be None")
        response = await self._client.post_form(
            f"/r/{subreddit}/wiki/settings/{page}", update_request.to_form()
        )
        return WikiPageSettings(response.data)

    def allow(self, subreddit: str, page: str, username: str):
        """
        Allows a user to edit a wiki page.
        """
        return self._set_editor(subreddit, page, username, "add")

    def deny(self, subreddit: str, page: str, username: str):
        """
        Reverses `allow`.
        """
        return self._set_editor(subreddit, page, username, "del")

    def _set_editor(self, subreddit: str, page: str, username: str, action: str):
        data = {
            "page": page,
            "username": username,
        }
        return self._client.post_form(f"/r/{subreddit}/api/wiki/alloweditor/{action}", data)
