"""Taxonomía cerrada de errores del cliente.

Los errores son *valores* (no excepciones): viajan en `Failure` y se comparan
estructuralmente. `ApiError` es la unión cerrada de las cuatro variantes.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ItemNotFound(BaseModel):
    """El recurso no existe (HTTP 404)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["item_not_found"] = "item_not_found"

    def __str__(self) -> str:
        return "Item not found"


class UnknownApiError(BaseModel):
    """Cualquier otro estado HTTP fuera de 2xx."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown_api_error"] = "unknown_api_error"
    code: int = Field(..., description="Código HTTP recibido.")

    def __str__(self) -> str:
        return f"Unknown API error (HTTP {self.code})"


class TransportError(BaseModel):
    """Fallo de red/timeout/DNS antes de obtener un estado HTTP."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport_error"] = "transport_error"
    reason: str = Field(default="", description="Descripción del fallo de transporte.")

    def __str__(self) -> str:
        return f"Transport error: {self.reason}" if self.reason else "Transport error"


class DecodingError(BaseModel):
    """Respuesta 2xx cuyo cuerpo no encaja con la forma esperada."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["decoding_error"] = "decoding_error"
    reason: str = Field(default="", description="Detalle del fallo de decodificación.")

    def __str__(self) -> str:
        return f"Decoding error: {self.reason}" if self.reason else "Decoding error"


ITEM_NOT_FOUND = ItemNotFound()

ApiError = Union[ItemNotFound, UnknownApiError, TransportError, DecodingError]

__all__ = [
    "ITEM_NOT_FOUND",
    "ApiError",
    "DecodingError",
    "ItemNotFound",
    "TransportError",
    "UnknownApiError",
]
