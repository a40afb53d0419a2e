"""
urls.py — Construcción de URLs salientes
========================================

Los segmentos que llegan en la ruta son entrada no confiable: se validan
contra una lista blanca antes de formar la URL del upstream.
"""

import re
from urllib.parse import quote

from .errors import InvalidPathParameterError

# Nombres e ids de PokeAPI: letras, dígitos y guiones
SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9-]{1,64}")


def build_resource_url(base_url: str, segment: str) -> str:
    """
    Agrega `segment` como último segmento de `base_url`.

    Args:
        base_url: URL base del recurso, con o sin `/` final
        segment: Valor extraído de la ruta entrante

    Returns:
        URL completa con el segmento escapado y en minúsculas

    Raises:
        InvalidPathParameterError: Si el segmento no pasa la lista blanca
    """
    if not SEGMENT_PATTERN.fullmatch(segment):
        raise InvalidPathParameterError(f"Parámetro inválido: {segment!r}")

    return f"{base_url.rstrip('/')}/{quote(segment.lower(), safe='')}"
