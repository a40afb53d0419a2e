"""
Punto de entrada principal del API Consumer Service.

Servicio de demostración que consume APIs públicas:
1. `/retornarUsuarioAleatorio`: reenvía un usuario aleatorio de randomuser.me
2. `/retornarStruct`: devuelve un registro fijo serializado como JSON
3. `/retornarPokemon/{nome}`: reenvía la ficha de un Pokémon de PokeAPI

Las rutas se definen en `dispatcher.py` y los handlers en `handlers.py`.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .clients import DownstreamFetcher
from .config import Settings, settings as default_settings
from .dispatcher import build_route_table, build_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    fetcher: Optional[DownstreamFetcher] = None,
) -> FastAPI:
    """
    Crea y configura la aplicación FastAPI del servicio.

    - Configura CORS.
    - Al arrancar configura el logging y crea el fetcher compartido (si no
      se inyectó uno); al apagar lo cierra.
    - Registra la tabla de rutas.

    Args:
        settings: Configuración a usar; por defecto la global
        fetcher: Fetcher ya construido (útil en pruebas)

    Returns:
        Instancia configurada de `FastAPI`.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Corre en el proceso que atiende peticiones, también con reload
        configure_logging(settings.LOG_LEVEL)
        if app.state.fetcher is None:
            app.state.fetcher = DownstreamFetcher.create(timeout=settings.FETCH_TIMEOUT)

        logger.info(f"{settings.APP_NAME} iniciado - Puerto: {settings.PORT}")
        logger.info(f"Random User API: {settings.RANDOM_USER_URL}")
        logger.info(f"PokeAPI: {settings.POKEAPI_POKEMON_URL}")
        yield
        await app.state.fetcher.aclose()

    app = FastAPI(
        title="API Consumer Service",
        description="Servicio de demostración que consume APIs públicas y devuelve JSON",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.fetcher = fetcher

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Rutas del servicio ---
    app.include_router(
        build_router(build_route_table(settings), settings),
        tags=["api"],
    )

    return app


def run() -> None:
    """Arranca Uvicorn con la configuración global."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.ENV == "dev",
        log_level=default_settings.LOG_LEVEL,
    )


# Instancia por defecto utilizada por Uvicorn
app = create_app()

if __name__ == "__main__":
    run()
