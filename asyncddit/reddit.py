from .client import HTTPClient
from .services import LinkService, WikiService


class Reddit:
    """
    The main class for the Reddit API access.

    Has to be created from within a running event loop.
    Keyword arguments are passed to the underlying `HTTPClient`:\n
    • `base_url` for the API root, defaults to `https://oauth.reddit.com`\n
    • `token_url` for the OAuth2 token endpoint\n
    • `timeout` for the total time a single request may take, in seconds

    Attributes
    ----------
    link : LinkService
        Post (link) related endpoints.
    wiki : WikiService
        Subreddit wiki endpoints.
    """
    def __init__(
        self,
        user_agent: str,
        client_id: str,
        client_secret: str,
        username: str,
        password: str,
        **kwargs,
    ):
        self.client_id = client_id
        self._client = HTTPClient(
            user_agent, client_id, client_secret, username, password, **kwargs
        )
        self.request = self._client.request  # forward the request method
        self.link = LinkService(self._client)
        self.wiki = WikiService(self._client)

    def close(self):
        return self._client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
