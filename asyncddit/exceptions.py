import aiohttp
from typing import Any, List, Optional, Union


class RedditException(Exception):
    """
    Base exception class for Reddit API.
    """
    pass


class InvalidArgument(RedditException, ValueError):
    """
    An argument failed a local check. No request has been sent.
    """
    pass


class UnsupportedTokenType(RedditException):
    """
    OAuth2 Token request returned unsupported token type.
    """
    def __init__(self, token_type):
        super().__init__(f"Token type `{token_type}` is not supported")


class HTTPException(RedditException):
    """Exception that's thrown when an HTTP request operation fails.

    Attributes
    ----------
    response: aiohttp.ClientResponse
        The response of the failed HTTP request.
    status: int
        The status code of the HTTP request.
    data: Optional[dict]
        The response data, if available.
    """

    def __init__(self, response: aiohttp.ClientResponse, data: Optional[Union[dict, str]] = None):
        self.response = response
        self.status = response.status
        self.data = data
        super().__init__(f"{self.response.reason} (status code: {self.status}): {self.data}")


class RateLimited(HTTPException):
    """
    The API responded with 429. Further requests wait until the rate limit resets.
    """
    pass


class APIError(RedditException):
    """Exception that's thrown when the API reports errors inside a successful response.

    Attributes
    ----------
    errors: List[List[Any]]
        The error entries, each usually in the ``[code, message, field]`` form.
    """

    def __init__(self, errors: List[List[Any]]):
        self.errors = errors
        super().__init__(
            "; ".join(": ".join(str(part) for part in error if part) for error in errors)
        )
