"""Componentes de UI para CLI (Rich).

- Evita mezclar lógica de comandos con detalles visuales.
- Tablas/paneles reutilizables por todos los comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import ApiError, ItemNotFound
from core.domain.models import Task


def build_tasks_table(tasks: Iterable[Task], *, title: str = "Tasks") -> Table:
    """Tabla Rich con una fila por tarea, en el orden recibido."""

    table = Table(title=Text(title))
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Owner", style="white")
    table.add_column("Title", style="white")
    table.add_column("Done", style="green")
    for task in tasks:
        # Valores del servidor: texto literal, nunca markup de Rich.
        table.add_row(
            Text(task.id),
            Text(task.owner_id),
            Text(task.title),
            "yes" if task.finished else "no",
        )
    return table


def build_error_panel(error: ApiError) -> Panel:
    """Panel rojo (o amarillo para 404) que describe el error de la API."""

    border = "yellow" if isinstance(error, ItemNotFound) else "red"
    body = Text(str(error))
    return Panel(body, title=Text(error.kind, style=f"bold {border}"), border_style=border)
