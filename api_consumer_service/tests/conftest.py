"""
Fixtures compartidas: una app con las APIs externas simuladas mediante
`httpx.MockTransport`.
"""

import json
from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.clients import DownstreamFetcher
from app.config import Settings
from app.main import create_app

RANDOM_USER_URL = "https://randomuser.test/api/"
POKEAPI_URL = "https://pokeapi.test/api/v2/pokemon"

RANDOM_USER_BODY = json.dumps(
    {"results": [{"name": {"first": "Ana", "last": "Souza"}}]}
).encode()


class BrokenBodyStream(httpx.AsyncByteStream):
    """Cuerpo que se corta a mitad de la lectura."""

    async def __aiter__(self):
        yield b'{"results": ['
        raise httpx.ReadError("connection reset by peer")


class FakeUpstream:
    """Simula randomuser.me y PokeAPI, registrando las URLs pedidas."""

    def __init__(self):
        self.requested: List[str] = []
        self.fail_with = None
        self.broken_body = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)

        if self.fail_with is not None:
            raise self.fail_with
        if self.broken_body:
            return httpx.Response(200, stream=BrokenBodyStream())
        if url == RANDOM_USER_URL:
            return httpx.Response(200, content=RANDOM_USER_BODY)
        if url.startswith(POKEAPI_URL + "/"):
            name = url.rsplit("/", 1)[-1]
            if name == "missingno":
                return httpx.Response(404, text="Not Found")
            return httpx.Response(200, json={"name": name, "id": 25})
        return httpx.Response(500, text="unexpected")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        RANDOM_USER_URL=RANDOM_USER_URL,
        POKEAPI_POKEMON_URL=POKEAPI_URL,
        FETCH_TIMEOUT=5.0,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def fetcher(upstream) -> DownstreamFetcher:
    return DownstreamFetcher.create(transport=httpx.MockTransport(upstream))


@pytest.fixture
def app(settings, fetcher):
    return create_app(settings=settings, fetcher=fetcher)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
