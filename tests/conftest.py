"""Shared fixtures: a local API server recording every request, and a client pointed at it."""

import json
import asyncio
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from asyncddit import Reddit

TESTDATA = Path(__file__).parent / "testdata"
TOKEN_PATH = "/api/v1/access_token"


def read_fixture(name: str) -> Dict[str, Any]:
    return json.loads((TESTDATA / name).read_text())


class RecordedRequest(NamedTuple):
    method: str
    path: str
    query: Dict[str, str]
    form: Dict[str, str]
    headers: Dict[str, str]


class Mux:
    """Routes requests by path to canned responses and records them."""

    def __init__(self):
        self.url = ""
        self.routes: Dict[str, Dict[str, Any]] = {}
        self.requests: List[RecordedRequest] = []
        self.token_requests = 0
        self.token_payload = {
            "access_token": "test-token",
            "token_type": "bearer",
            "expires_in": 3600,
        }

    def handle(
        self,
        path: str,
        payload: Any = None,
        *,
        status: int = 200,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        delay: float = 0,
    ):
        if body is None:
            body = json.dumps({} if payload is None else payload)
        self.routes[path] = {
            "status": status,
            "body": body,
            "headers": headers or {},
            "delay": delay,
        }

    async def dispatch(self, request: web.Request) -> web.Response:
        if request.path == TOKEN_PATH:
            self.token_requests += 1
            return web.json_response(self.token_payload)
        form = await request.post()
        self.requests.append(
            RecordedRequest(
                request.method,
                request.path,
                dict(request.query),
                dict(form),
                dict(request.headers),
            )
        )
        route = self.routes.get(request.path)
        if route is None:
            return web.json_response({"message": "Not Found", "error": 404}, status=404)
        if route["delay"]:
            await asyncio.sleep(route["delay"])
        return web.Response(
            status=route["status"],
            text=route["body"],
            content_type="application/json",
            headers=route["headers"],
        )

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest_asyncio.fixture
async def mux():
    mux = Mux()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", mux.dispatch)
    server = TestServer(app)
    await server.start_server()
    mux.url = str(server.make_url("/"))
    yield mux
    await server.close()


@pytest_asyncio.fixture
async def make_reddit(mux):
    clients = []

    def make(**kwargs):
        client = Reddit(
            "asyncddit-tests",
            "client-id",
            "client-secret",
            "testuser",
            "testpassword",
            base_url=mux.url,
            token_url=mux.url.rstrip("/") + TOKEN_PATH,
            **kwargs,
        )
        clients.append(client)
        return client

    yield make
    for client in clients:
        await client.close()


@pytest_asyncio.fixture
async def reddit(make_reddit):
    return make_reddit()


@pytest.fixture
def page_data():
    return read_fixture("wiki/page.json")


@pytest.fixture
def settings_data():
    return read_fixture("wiki/page-settings.json")


@pytest.fixture
def discussions_data():
    return read_fixture("wiki/discussions.json")
