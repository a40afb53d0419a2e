"""API Consumer Service Application.

Servicio HTTP que consume APIs públicas y responde JSON.

Arquitectura:
    - clients/: Llamadas salientes (httpx)
    - handlers.py: Lógica de cada ruta
    - dispatcher.py: Tabla de rutas y traducción de errores
    - schemas.py: Modelos Pydantic
    - config.py: Configuración (pydantic-settings)

Usage:
    uvicorn app.main:app --port 10000
"""

__version__ = "1.0.0"
