"""Modelos del dominio (Pydantic v2).

Nota:
- `Task` describe *qué* es una tarea; el formato de cable (`userId`) se
  resuelve con alias, el código Python usa `owner_id`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Task(BaseModel):
    """Una tarea del servicio remoto.

    Valor inmutable: dos tareas con los mismos campos son iguales.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(
        ...,
        description="Identificador de la tarea (normalmente asignado por el servidor).",
    )
    owner_id: str = Field(
        ...,
        alias="userId",
        description="Identificador del usuario propietario.",
    )
    title: str = Field(
        ...,
        description="Título libre de la tarea.",
    )
    finished: bool = Field(
        ...,
        description="Indica si la tarea está completada.",
    )

    def to_wire(self) -> dict[str, Any]:
        """Representación JSON con los nombres de campo del servicio."""

        return self.model_dump(mode="json", by_alias=True)
