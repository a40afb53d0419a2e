"""Handlers de las rutas del servicio.

Cada handler produce exactamente una respuesta por invocación:
- ProxyAllHandler: reenvía una URL fija
- ProxyParameterizedHandler: reenvía una URL formada con un segmento de la ruta
- StaticRecordHandler: serializa el registro fijo `Message`
"""

from typing import Callable, Mapping

from fastapi import Response

from .clients import DownstreamFetcher
from .errors import InvalidPathParameterError, SerializationError
from .schemas import Message, default_message
from .urls import build_resource_url

JSON_MEDIA_TYPE = "application/json"


class RouteHandler:
    """Capacidad común: atender una petición con sus parámetros de ruta."""

    async def handle(
        self, fetcher: DownstreamFetcher, path_params: Mapping[str, str]
    ) -> Response:
        raise NotImplementedError


class ProxyAllHandler(RouteHandler):
    """Reenvía el cuerpo de una URL fija, sin inspeccionarlo."""

    def __init__(self, url: str):
        self.url = url

    async def handle(self, fetcher, path_params):
        body = await fetcher.fetch(self.url)
        return Response(content=body, media_type=JSON_MEDIA_TYPE)


class ProxyParameterizedHandler(RouteHandler):
    """
    Reenvía `base_url/<param>`.

    El valor del parámetro se valida y escapa con `build_resource_url`
    antes de realizar la llamada.
    """

    def __init__(self, base_url: str, param: str):
        self.base_url = base_url
        self.param = param

    def target_url(self, path_params: Mapping[str, str]) -> str:
        try:
            segment = path_params[self.param]
        except KeyError:
            raise InvalidPathParameterError(f"Falta el parámetro '{self.param}'")
        return build_resource_url(self.base_url, segment)

    async def handle(self, fetcher, path_params):
        body = await fetcher.fetch(self.target_url(path_params))
        return Response(content=body, media_type=JSON_MEDIA_TYPE)


class StaticRecordHandler(RouteHandler):
    """Serializa un registro construido en cada petición."""

    def __init__(self, factory: Callable[[], Message] = default_message):
        self.factory = factory

    async def handle(self, fetcher, path_params):
        try:
            body = self.factory().model_dump_json(by_alias=True)
        except (ValueError, TypeError) as e:
            raise SerializationError(f"No se pudo serializar el registro: {e}") from e
        return Response(content=body, media_type=JSON_MEDIA_TYPE)
