"""Cliente de descarga para las APIs externas.

Realiza un único GET por llamada y devuelve el cuerpo crudo. Cualquier
fallo se reporta con una excepción de `app.errors`, nunca terminando el
proceso.
"""

import logging

import httpx

from ..errors import (
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class DownstreamFetcher:
    """
    Cliente para las APIs públicas consumidas por el servicio.

    Comparte un `httpx.AsyncClient` entre peticiones; no reintenta.
    """

    def __init__(self, client: httpx.AsyncClient):
        """
        Args:
            client: Cliente HTTP asíncrono ya configurado (timeout, transporte)
        """
        self.client = client

    @classmethod
    def create(cls, timeout: float = 30.0, transport=None) -> "DownstreamFetcher":
        """Crea el fetcher con su propio cliente HTTP."""
        client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )
        return cls(client)

    async def fetch(self, url: str) -> bytes:
        """
        Descarga el cuerpo completo de `url`.

        Args:
            url: URL completa del recurso

        Returns:
            Bytes de la respuesta, sin validar ni transformar

        Raises:
            UpstreamTimeoutError: Si se agota el tiempo de espera
            UpstreamStatusError: Si el upstream responde con un código no 2xx
            UpstreamUnavailableError: Si falla la conexión o la lectura
        """
        logger.info("GET %s", url)

        try:
            response = await self.client.get(url)
            response.raise_for_status()
            return response.content

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Upstream %s respondió %s", url, status)
            raise UpstreamStatusError(url, status) from e
        except httpx.TimeoutException as e:
            logger.warning("Timeout consultando %s", url)
            raise UpstreamTimeoutError(f"Timeout consultando {url}", url) from e
        except httpx.HTTPError as e:
            logger.warning("Error de conexión con %s: %s", url, e)
            raise UpstreamUnavailableError(
                f"Error de conexión con {url}", url
            ) from e

    async def aclose(self) -> None:
        await self.client.aclose()
