"""CLI `todo-client` (Typer + Rich).

Thin front-end over `TodoApiClient`: every command issues one request and
renders either the result or the error panel (exit code 1 on failure).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import build_error_panel, build_tasks_table
from core.config import AppSettings
from core.domain.models import Task
from core.domain.result import Failure, Result
from core.logging_setup import configure_logging
from core.services.todo_client import TodoApiClient

app = typer.Typer(no_args_is_help=True, help="Client for the remote todo REST service.")

_console = Console()


@dataclass(frozen=True)
class CliOptions:
    """Global options shared by every command (stored in `ctx.obj`)."""

    base_url: str | None = None
    as_json: bool = False


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Base endpoint of the service (defaults to TODO_API_BASE_URL).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and responses."),
) -> None:
    configure_logging(verbose)
    ctx.obj = CliOptions(base_url=base_url, as_json=as_json)


def _build_client(options: CliOptions) -> TodoApiClient:
    overrides: dict[str, Any] = {}
    if options.base_url:
        overrides["base_url"] = options.base_url
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(
            "a base URL is required (use --base-url or TODO_API_BASE_URL)",
            param_hint="--base-url",
        ) from exc
    return TodoApiClient.from_settings(settings)


def _emit(options: CliOptions, result: Result[Any, Any], *, title: str = "Tasks") -> None:
    if isinstance(result, Failure):
        if options.as_json:
            _console.print_json(data={"error": result.error.model_dump(mode="json")})
        else:
            _console.print(build_error_panel(result.error))
        raise typer.Exit(code=1)

    value = result.value
    if options.as_json:
        if value is None:
            payload: Any = {"ok": True}
        elif isinstance(value, list):
            payload = [task.to_wire() for task in value]
        else:
            payload = value.to_wire()
        _console.print_json(json.dumps(payload))
        return

    if value is None:
        _console.print("[green]OK[/green]")
    elif isinstance(value, list):
        _console.print(build_tasks_table(value, title=title))
    else:
        _console.print(build_tasks_table([value], title=title))


@app.command(name="list")
def list_tasks(ctx: typer.Context) -> None:
    """List every task, in server order."""

    with _build_client(ctx.obj) as client:
        _emit(ctx.obj, client.list_tasks())


@app.command()
def get(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task id.")) -> None:
    """Show a single task."""

    if not task_id.strip():
        raise typer.BadParameter("task id must not be empty", param_hint="TASK_ID")
    with _build_client(ctx.obj) as client:
        _emit(ctx.obj, client.get_task(task_id), title=f"Task {task_id}")


@app.command()
def add(
    ctx: typer.Context,
    task_id: str = typer.Option(..., "--id", help="Task id sent in the request body."),
    user_id: str = typer.Option(..., "--user-id", help="Owner id."),
    title: str = typer.Option(..., "--title", help="Task title."),
    finished: bool = typer.Option(False, "--finished/--pending", help="Completion flag."),
) -> None:
    """Create a task."""

    task = Task(id=task_id, owner_id=user_id, title=title, finished=finished)
    with _build_client(ctx.obj) as client:
        _emit(ctx.obj, client.add_task(task), title="Created")


@app.command()
def delete(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task id.")) -> None:
    """Delete a task."""

    if not task_id.strip():
        raise typer.BadParameter("task id must not be empty", param_hint="TASK_ID")
    with _build_client(ctx.obj) as client:
        _emit(ctx.obj, client.delete_task(task_id))


def run() -> None:
    app()
