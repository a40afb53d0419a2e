"""
Módulo de configuración del API Consumer Service.

Utiliza `pydantic-settings` para cargar la configuración desde variables
de entorno y/o archivos `.env`. Todos los atributos definidos en `Settings`
pueden sobreescribirse mediante variables de entorno con el mismo nombre.

Ejemplo de `.env`:
    APP_NAME=api_consumer_service
    ENV=prod
    PORT=10000
    RANDOM_USER_URL=https://randomuser.me/api/
    POKEAPI_POKEMON_URL=https://pokeapi.co/api/v2/pokemon
    FETCH_TIMEOUT=30
    LOG_LEVEL=info
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración central del servicio.

    Atributos principales:
        APP_NAME:
            Nombre de la aplicación (aparece en la documentación de FastAPI).
        ENV:
            Entorno de ejecución: "dev", "prod", "test", etc.
        HOST / PORT:
            Interfaz y puerto en los que escucha Uvicorn.
        RANDOM_USER_URL:
            Endpoint externo de usuarios aleatorios.
        POKEAPI_POKEMON_URL:
            URL base de la API de Pokémon; el nombre se agrega como último
            segmento.
        FETCH_TIMEOUT:
            Timeout (en segundos) de cada llamada saliente.
        LOG_LEVEL:
            Nivel de logging de la aplicación y de Uvicorn.
        CORS_ORIGINS:
            Orígenes permitidos, separados por coma.
    """

    APP_NAME: str = "api_consumer_service"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 10000

    # APIs públicas consumidas
    RANDOM_USER_URL: str = "https://randomuser.me/api/"
    POKEAPI_POKEMON_URL: str = "https://pokeapi.co/api/v2/pokemon"

    FETCH_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# Instancia única de configuración usada en el resto de la app
settings = Settings()
