from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Union

from ..base import ClientBase
from ..models import Submitted
from ..exceptions import APIError, InvalidArgument

if TYPE_CHECKING:
    from ..client import Response
    from ..options import SubmitSelfOptions, SubmitURLOptions


class LinkService(ClientBase):
    """
    Post (link) related endpoints.
    """

    ##################################################
    # Submitting
    ##################################################

    async def submit_self(self, opts: SubmitSelfOptions) -> Submitted:
        """
        Submits a selftext post.

        Parameters
        ----------
        opts : SubmitSelfOptions
            The subreddit, title, text and optional settings of the post.

        Returns
        -------
        Submitted
            The newly created post.

        Raises
        ------
        APIError
            The post was rejected.
        """
        return await self._submit(opts, "self")

    async def submit_url(self, opts: SubmitURLOptions) -> Submitted:
        """
        Submits a link post.

        Parameters
        ----------
        opts : SubmitURLOptions
            The subreddit, title, URL and optional settings of the post.

        Returns
        -------
        Submitted
            The newly created post.

        Raises
        ------
        APIError
            The post was rejected.
        """
        return await self._submit(opts, "link")

    async def _submit(
        self, opts: Union[SubmitSelfOptions, SubmitURLOptions], kind: str
    ) -> Submitted:
        data: Dict[str, Any] = opts.to_form()
        data["kind"] = kind
        data["api_type"] = "json"
        response = await self._client.post_form("/api/submit", data)
        # the post is wrapped as {"json": {"data": {...}}}
        root = (response.data or {}).get("json") or {}
        if root.get("errors"):
            raise APIError(root["errors"])
        return Submitted.from_data(root.get("data"))

    ##################################################
    # Post settings
    ##################################################

    # these endpoints all return {} on success

    def enable_replies(self, thing_id: str):
        return self._set_replies(thing_id, True)

    def disable_replies(self, thing_id: str):
        return self._set_replies(thing_id, False)

    def _set_replies(self, thing_id: str, state: bool):
        data = {
            "id": thing_id,
            "state": state,
        }
        return self._client.post_form("/api/sendreplies", data)

    def mark_nsfw(self, thing_id: str):
        return self._client.post_form("/api/marknsfw", {"id": thing_id})

    def unmark_nsfw(self, thing_id: str):
        return self._client.post_form("/api/unmarknsfw", {"id": thing_id})

    def spoiler(self, thing_id: str):
        return self._client.post_form("/api/spoiler", {"id": thing_id})

    def unspoiler(self, thing_id: str):
        return self._client.post_form("/api/unspoiler", {"id": thing_id})

    def lock(self, thing_id: str):
        return self._client.post_form("/api/lock", {"id": thing_id})

    def unlock(self, thing_id: str):
        return self._client.post_form("/api/unlock", {"id": thing_id})

    def delete(self, thing_id: str):
        return self._client.post_form("/api/del", {"id": thing_id})

    async def hide(self, *thing_ids: str) -> Response:
        """
        Hides posts from the current user's listings.

        Parameters
        ----------
        *thing_ids : str
            Fullnames of the posts to hide.

        Raises
        ------
        InvalidArgument
            No IDs were provided.
        """
        return await self._set_hidden("/api/hide", thing_ids)

    async def unhide(self, *thing_ids: str) -> Response:
        """
        Reverses `hide`.

        Parameters
        ----------
        *thing_ids : str
            Fullnames of the posts to unhide.

        Raises
        ------
        InvalidArgument
            No IDs were provided.
        """
        return await self._set_hidden("/api/unhide", thing_ids)

    async def _set_hidden(self, path: str, thing_ids) -> Response:
        if not thing_ids:
            raise InvalidArgument("must provide at least 1 id")
        return await self._client.post_form(path, {"id": ','.join(thing_ids)})
