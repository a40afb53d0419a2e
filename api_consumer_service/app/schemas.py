"""
Esquemas Pydantic del API Consumer Service.

Define el registro fijo que devuelve `/retornarStruct` y las estructuras
públicas de salud y de error.
"""

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# REGISTRO FIJO
# ---------------------------------------------------------------------------

class Message(BaseModel):
    """
    Registro de forma fija serializado por `/retornarStruct`.

    Las claves JSON conservan los nombres `Body`, `Number`, `Decimal`
    y `Validate`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str = Field(..., alias="Body", description="Texto del mensaje.")
    number: int = Field(
        ...,
        alias="Number",
        ge=-128,
        le=127,
        description="Entero con signo de 8 bits.",
    )
    # float de 64 bits: se serializa 1687.87845, no el 1687.8784 de un float32
    decimal: float = Field(..., alias="Decimal", description="Valor decimal.")
    validate_: bool = Field(..., alias="Validate", description="Bandera booleana.")


def default_message() -> Message:
    """Construye el registro literal servido por `/retornarStruct`."""
    return Message(
        body="Hello, Mundão!",
        number=124,
        decimal=1687.87845,
        validate_=True,
    )


# ---------------------------------------------------------------------------
# ESTRUCTURAS PÚBLICAS
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    """Respuesta del endpoint de salud."""
    status: str
    service: str
    version: str


class ErrorResponse(BaseModel):
    """Cuerpo de las respuestas de error."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Error de conexión con https://randomuser.me/api/"
            }
        }
