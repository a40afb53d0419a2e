"""
Pruebas de los handlers y de la tabla de rutas, sin pasar por HTTP.
"""

import asyncio
import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.dispatcher import RouteEntry, build_route_table, build_router
from app.errors import InvalidPathParameterError, SerializationError
from app.handlers import (
    ProxyAllHandler,
    ProxyParameterizedHandler,
    StaticRecordHandler,
)
from app.schemas import Message, default_message


class RecordingFetcher:
    def __init__(self, body: bytes = b"{}"):
        self.body = body
        self.urls = []

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        return self.body


def test_route_table(settings):
    routes = build_route_table(settings)

    assert [(r.method, r.path) for r in routes] == [
        ("GET", "/retornarUsuarioAleatorio"),
        ("GET", "/retornarStruct"),
        ("GET", "/retornarPokemon/{nome}"),
    ]
    assert isinstance(routes[0].handler, ProxyAllHandler)
    assert isinstance(routes[1].handler, StaticRecordHandler)
    assert isinstance(routes[2].handler, ProxyParameterizedHandler)


def test_proxy_all_ignores_path_params():
    fetcher = RecordingFetcher(b'{"ok": true}')
    handler = ProxyAllHandler("https://randomuser.test/api/")

    resp = asyncio.run(handler.handle(fetcher, {"nome": "ignored"}))

    assert resp.body == b'{"ok": true}'
    assert resp.media_type == "application/json"
    assert fetcher.urls == ["https://randomuser.test/api/"]


def test_parameterized_missing_param():
    handler = ProxyParameterizedHandler("https://pokeapi.test/pokemon", "nome")

    with pytest.raises(InvalidPathParameterError):
        asyncio.run(handler.handle(RecordingFetcher(), {}))


def test_static_record_serialization_failure():
    def broken() -> Message:
        raise ValueError("boom")

    with pytest.raises(SerializationError):
        asyncio.run(StaticRecordHandler(broken).handle(None, {}))


def test_serialization_failure_becomes_500_and_service_continues():
    """El dispatcher responde 500 con `detail` y las demás rutas siguen activas."""
    def broken() -> Message:
        raise ValueError("boom")

    app = FastAPI()
    app.state.fetcher = None
    app.include_router(build_router([
        RouteEntry("GET", "/roto", StaticRecordHandler(broken), "roto"),
        RouteEntry("GET", "/retornarStruct", StaticRecordHandler(), "retornar_struct"),
    ]))
    client = TestClient(app)

    resp = client.get("/roto")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "No se pudo serializar el registro: boom"}

    resp = client.get("/retornarStruct")
    assert resp.status_code == 200
    assert resp.json()["Body"] == "Hello, Mundão!"


def test_message_is_immutable_and_bounded():
    msg = default_message()

    with pytest.raises(Exception):
        msg.body = "otro"
    with pytest.raises(ValueError):
        Message(body="x", number=128, decimal=0.0, validate_=False)

    assert json.loads(msg.model_dump_json(by_alias=True))["Number"] == 124
