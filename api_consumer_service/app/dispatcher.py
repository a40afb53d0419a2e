"""
dispatcher.py
=============

Tabla de rutas estática y su registro sobre un `APIRouter` de FastAPI.

La tabla se construye una vez al arrancar y no se modifica después. Cada
endpoint invoca su handler y traduce los errores del servicio a
`HTTPException`, de modo que un fallo afecta solo a esa petición.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from fastapi import APIRouter, HTTPException, Request, Response

from . import __version__
from .config import Settings, settings as default_settings
from .errors import ServiceError
from .handlers import (
    ProxyAllHandler,
    ProxyParameterizedHandler,
    RouteHandler,
    StaticRecordHandler,
)
from .schemas import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteEntry:
    method: str
    path: str
    handler: RouteHandler
    name: str


def build_route_table(settings: Settings) -> Tuple[RouteEntry, ...]:
    """Rutas públicas del servicio."""
    return (
        RouteEntry(
            "GET",
            "/retornarUsuarioAleatorio",
            ProxyAllHandler(settings.RANDOM_USER_URL),
            "retornar_usuario_aleatorio",
        ),
        RouteEntry(
            "GET",
            "/retornarStruct",
            StaticRecordHandler(),
            "retornar_struct",
        ),
        RouteEntry(
            "GET",
            "/retornarPokemon/{nome}",
            ProxyParameterizedHandler(settings.POKEAPI_POKEMON_URL, "nome"),
            "retornar_pokemon",
        ),
    )


ERROR_RESPONSES: Dict = {
    400: {"model": ErrorResponse, "description": "Parámetro de ruta inválido"},
    404: {"model": ErrorResponse, "description": "Recurso no encontrado"},
    500: {"model": ErrorResponse, "description": "Error interno"},
    502: {"model": ErrorResponse, "description": "Fallo del upstream"},
    504: {"model": ErrorResponse, "description": "Timeout del upstream"},
}


def _make_endpoint(entry: RouteEntry):
    async def endpoint(request: Request) -> Response:
        fetcher = request.app.state.fetcher
        try:
            return await entry.handler.handle(fetcher, dict(request.path_params))
        except ServiceError as e:
            logger.warning(
                "%s %s -> %s: %s",
                request.method, request.url.path, e.status_code, e.message,
            )
            raise HTTPException(status_code=e.status_code, detail=e.message)

    endpoint.__name__ = entry.name
    return endpoint


def build_router(
    routes: Iterable[RouteEntry], settings: Settings = default_settings
) -> APIRouter:
    """
    Registra cada entrada de la tabla en un `APIRouter`.

    Args:
        routes: Entradas (método, patrón, handler, nombre)
        settings: Configuración; aporta el nombre del servicio en `/health`

    Returns:
        Router listo para `app.include_router`
    """
    router = APIRouter(responses=ERROR_RESPONSES)

    for entry in routes:
        router.add_api_route(
            entry.path,
            _make_endpoint(entry),
            methods=[entry.method],
            name=entry.name,
            response_class=Response,
        )

    @router.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """Verificación de estado del servicio."""
        return HealthResponse(
            status="ok",
            service=settings.APP_NAME,
            version=__version__,
        )

    return router
