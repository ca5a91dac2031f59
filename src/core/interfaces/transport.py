"""Contrato del adaptador de transporte HTTP.

Protocol estructural: cualquier objeto con `execute(...)` sirve, de modo que
el Core se puede probar con un transporte falso sin red.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable


class TransportFailure(Exception):
    """No se obtuvo ningún estado HTTP (conexión, timeout, DNS...)."""


@dataclass(frozen=True)
class RawResponse:
    """Resultado crudo de una llamada: estado + cuerpo (posiblemente ausente)."""

    status_code: int
    body: bytes | None = None


@runtime_checkable
class HttpTransport(Protocol):
    """Ejecuta una única petición HTTP.

    Reglas:
    - Devuelve `RawResponse` para cualquier estado HTTP, incluidos 4xx/5xx.
    - Lanza `TransportFailure` si no hubo respuesta.
    """

    def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        ...
