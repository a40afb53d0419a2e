"""
Errores del servicio.

Cada fallo de una petición se representa con una excepción que lleva el
código HTTP con el que debe responderse. El dispatcher los convierte en
`HTTPException`, de modo que un fallo nunca detiene el servidor.
"""

from typing import Optional


class ServiceError(Exception):
    """Error asociado a una única petición."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UpstreamError(ServiceError):
    """Fallo al consultar una API externa."""

    status_code = 502

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message, status_code)
        self.url = url


class UpstreamUnavailableError(UpstreamError):
    """Error de conexión o de lectura del cuerpo de la respuesta."""


class UpstreamTimeoutError(UpstreamError):
    status_code = 504


class UpstreamStatusError(UpstreamError):
    """La API externa respondió con un código distinto de 2xx."""

    def __init__(self, url: str, upstream_status: int):
        # Un 404 del upstream se propaga tal cual; el resto es un 502
        status = 404 if upstream_status == 404 else 502
        super().__init__(
            f"Upstream respondió {upstream_status}",
            url,
            status_code=status,
        )
        self.upstream_status = upstream_status


class InvalidPathParameterError(ServiceError):
    status_code = 400


class SerializationError(ServiceError):
    status_code = 500
