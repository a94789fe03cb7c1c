from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .utils import JsonType
    from .client import HTTPClient


class ClientBase:
    def __init__(self, client: HTTPClient):
        self._client = client


class Thing:
    def __init__(self, thing_data: JsonType):
        self.kind: str = thing_data["kind"]
        self.id: str = thing_data["data"]["id"]
        self.name: str = thing_data["data"]["name"]
        assert not self.id.startswith(self.kind)

    @property
    def fullname(self) -> str:
        return f"{self.kind}_{self.id}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}: ({self.name})"

    def __eq__(self, other):
        if not isinstance(other, Thing):
            return NotImplemented
        return self.fullname == other.fullname

    def __hash__(self):
        return hash(self.fullname)
