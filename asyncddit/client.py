import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, NamedTuple, Optional, cast

import aiohttp

from .utils import JsonType, form_value
from .exceptions import HTTPException, RateLimited, UnsupportedTokenType

logger = logging.getLogger(__name__)

BASE_URL = "https://oauth.reddit.com"
TOKEN_URL = "https://www.reddit.com/api/v1/access_token"


class RateLimitLock(asyncio.Event):
    def __init__(self):
        super().__init__()
        self._unlocker: Optional[asyncio.Task] = None
        self._deadline = 0.0
        self.unlock()  # start as unlocked

    lock = asyncio.Event.clear
    unlock = asyncio.Event.set

    def unlock_after(self, timeout: float):
        if not timeout or timeout < 0:
            # the reset is either missing or already behind us
            timeout = 1
        deadline = asyncio.get_running_loop().time() + timeout
        if self._unlocker is not None and not self._unlocker.done():
            # a pending unlock can only be pushed back, never brought forward
            if deadline <= self._deadline:
                return
            self._unlocker.cancel()
        self._deadline = deadline
        self._unlocker = asyncio.create_task(self._unlock_at(deadline))

    async def _unlock_at(self, deadline: float):
        await asyncio.sleep(deadline - asyncio.get_running_loop().time())
        self.unlock()

    def cancel(self):
        if self._unlocker is not None:
            self._unlocker.cancel()
            self._unlocker = None
        self.unlock()

    def is_locked(self):
        return not self.is_set()


class Rate(NamedTuple):
    """
    Rate limit information reported with every response.
    """
    remaining: Optional[float]
    used: Optional[int]
    reset: Optional[int]

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "Rate":
        def parse(name: str, kind):
            value = headers.get(name)
            if value is None:
                return None
            try:
                return kind(float(value))
            except (ValueError, OverflowError):
                return None
        return cls(
            parse("x-ratelimit-remaining", float),
            parse("x-ratelimit-used", int),
            parse("x-ratelimit-reset", int),
        )


class Response(NamedTuple):
    """
    Metadata of a completed request, along with the decoded JSON body.

    Attributes
    ----------
    status : int
        The HTTP status code.
    headers : Mapping[str, str]
        The response headers.
    rate : Rate
        The rate limit state after this request.
    data : Optional[JsonType]
        The decoded JSON body, or `None` if the body was empty.
    """
    status: int
    headers: Mapping[str, str]
    rate: Rate
    data: Optional[JsonType]


class HTTPClient:
    """
    Class responsible for doing the requests to the Reddit API.
    """
    def __init__(
        self,
        user_agent: str,
        client_id: str,
        client_secret: str,
        username: str,
        password: str,
        *,
        base_url: str = BASE_URL,
        token_url: str = TOKEN_URL,
        timeout: Optional[float] = None,
    ):
        asyncio.get_running_loop()  # sessions have to be created inside a running loop
        if timeout is None:
            session_timeout = aiohttp.client.DEFAULT_TIMEOUT
        else:
            session_timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = aiohttp.ClientSession(timeout=session_timeout)
        self._token: Optional[str] = None
        self._token_expires = datetime.now(timezone.utc)
        self._user_agent = user_agent
        self.client_id = client_id
        self.__client_secret = client_secret
        self._username = username
        self._password = password
        self._base_url = base_url.rstrip('/')
        self._token_url = token_url
        self._ratelimit = RateLimitLock()
        self._token_lock = asyncio.Lock()

    def close(self):
        self._ratelimit.cancel()
        return self._session.close()

    async def _get_token(self, *, force_refresh: bool = False) -> str:
        # concurrent callers share a single token request
        async with self._token_lock:
            now = datetime.now(timezone.utc)
            if self._token is None or (now >= self._token_expires or force_refresh):
                logger.info("Requesting a new access token for %s", self._username)
                async with self._session.post(
                    self._token_url,
                    data={
                        "grant_type": "password",
                        "username": self._username,
                        "password": self._password,
                    },
                    headers={"User-Agent": self._user_agent},
                    auth=aiohttp.BasicAuth(self.client_id, self.__client_secret),
                ) as response:
                    data = await response.json(content_type=None)
                    if response.status != 200 or data is None or "error" in data:
                        raise HTTPException(response, data)
                if data["token_type"].lower() != "bearer":
                    raise UnsupportedTokenType(data["token_type"])
                self._token = cast(str, data["access_token"])
                self._token_expires = now + timedelta(seconds=data["expires_in"])
            return self._token

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Response:
        """
        Executes a single request against the API.

        Parameters
        ----------
        method : str
            The HTTP method.
        url : str
            The endpoint path, relative to the API base URL.
        params : Optional[Mapping[str, Any]]
            Query string parameters.
        data : Optional[Mapping[str, Any]]
            Form fields, sent ``application/x-www-form-urlencoded``.

        Returns
        -------
        Response
            The response metadata together with the decoded body.

        Raises
        ------
        RateLimited
            The API responded with 429.
        HTTPException
            The API responded with any other non-200 status.
        """
        await self._ratelimit.wait()
        token = await self._get_token()
        full_url = "{}/{}".format(self._base_url, url.lstrip('/'))
        if params is not None:
            params = self._encode(params)
        if data is not None:
            data = self._encode(data)
        logger.debug("Request: %s %s params=%s data=%s", method, full_url, params, data)
        async with self._session.request(
            method,
            full_url,
            params=params,
            data=data,
            headers={
                "Authorization": f"bearer {token}",
                "User-Agent": self._user_agent,
                "Accept": "application/json",
            },
        ) as response:
            # check for rate limits
            rate = Rate.from_headers(response.headers)
            logger.debug("Remaining: %s", rate.remaining)
            if response.status == 429:
                # we've hit the rate limit somehow
                self._lock_ratelimit(rate)
                raise RateLimited(response, await self._read_error(response))
            if rate.remaining is not None and rate.remaining <= 0:
                # this one went through, but the next one won't
                self._lock_ratelimit(rate)
            if response.status != 200:
                raise HTTPException(response, await self._read_error(response))
            # an empty body decodes to None
            decoded = await response.json(content_type=None)
            return Response(response.status, response.headers, rate, decoded)

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None):
        return self.request("GET", url, params=params)

    def post_form(self, url: str, data: Mapping[str, Any]):
        return self.request("POST", url, data=data)

    def _lock_ratelimit(self, rate: Rate):
        logger.warning("Rate limit reached, locking for %s seconds", rate.reset)
        self._ratelimit.lock()
        self._ratelimit.unlock_after(rate.reset or 0)

    @staticmethod
    def _encode(fields: Mapping[str, Any]) -> Dict[str, str]:
        return {key: form_value(value) for key, value in fields.items()}

    @staticmethod
    async def _read_error(response: aiohttp.ClientResponse):
        try:
            return await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            return await response.text()
