from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from lol_api_schema.apis import default_registry
from lol_api_schema.cli.common import parse_params, schema_errors
from lol_api_schema.core.config import settings
from lol_api_schema.schema.operation import type_name

app = typer.Typer(
    no_args_is_help=True,
    help="Browse League of Legends API schemas and bind requests without sending them.",
)

_VERSION_OPTION = typer.Option(
    None, "--version", "-v", help="Module version (defaults to the newest registered)."
)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (defaults to LOL_SCHEMA_LOG_LEVEL)."
    ),
) -> None:
    level = (log_level or settings.log_level).upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown logging level {level!r}.", param_hint="--log-level")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("modules")
def modules_cmd() -> None:
    """List registered API modules."""

    for module in default_registry().modules():
        typer.echo(
            f"{module.name} {module.version}: {module.description} "
            f"(entities={len(module.entities)} operations={len(module.operations)})"
        )


@app.command("entities")
def entities_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    version: str | None = _VERSION_OPTION,
) -> None:
    """List the DTOs a module declares."""

    with schema_errors():
        api = default_registry().get(module, version)

    for model in api.entities:
        typer.echo(model.__name__)


@app.command("operations")
def operations_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    version: str | None = _VERSION_OPTION,
) -> None:
    """List a module's operations with their signatures."""

    with schema_errors():
        api = default_registry().get(module, version)

    for op in api.operations:
        params = ", ".join(p.name if p.required else f"{p.name}?" for p in op.params)
        typer.echo(f"{op.name}({params}) -> {op.result_name}  [{op.method} {op.path}]")


@app.command("describe")
def describe_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    entity: str = typer.Argument(..., help="DTO name (e.g. LeagueEntryDto)."),
    version: str | None = _VERSION_OPTION,
) -> None:
    """Show the wire fields of a DTO."""

    with schema_errors():
        model = default_registry().entity(module, entity, version=version)

    typer.echo(f"{model.__name__} ({module})")
    for field in model.wire_fields():
        flag = "required" if field.required else "optional"
        line = f"  {field.wire_name}: {type_name(field.annotation)} [{flag}]"
        if field.description:
            line += f"  {field.description}"
        typer.echo(line)


@app.command("json-schema")
def json_schema_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    entity: str = typer.Argument(..., help="DTO name (e.g. LeagueEntryDto)."),
    version: str | None = _VERSION_OPTION,
) -> None:
    """Print the JSON Schema of a DTO (wire names)."""

    with schema_errors():
        model = default_registry().entity(module, entity, version=version)

    typer.echo(json.dumps(model.model_json_schema(by_alias=True), indent=2))


@app.command("url")
def url_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    operation: str = typer.Argument(..., help="Operation name (e.g. get_challenger_league)."),
    param: list[str] | None = typer.Option(
        None,
        "--param",
        "-p",
        help="Argument as name=value. Lists are comma-separated; bodies are JSON or @file.",
    ),
    version: str | None = _VERSION_OPTION,
) -> None:
    """Bind arguments to an operation and print the request it would send."""

    with schema_errors():
        op = default_registry().operation(module, operation, version=version)
        request = op.build_request(**parse_params(op, param or []))

    typer.echo(f"{request.method} {request.url}")
    if request.content:
        typer.echo(request.content.decode("utf-8"))


@app.command("validate")
def validate_cmd(
    module: str = typer.Argument(..., help="Module name (e.g. league)."),
    operation: str = typer.Argument(..., help="Operation name (e.g. get_challenger_league)."),
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON response payload."
    ),
    version: str | None = _VERSION_OPTION,
    dump: bool = typer.Option(
        False, "--dump", help="When set, print the payload re-serialized in wire form."
    ),
) -> None:
    """Check a saved response payload against an operation's result shape."""

    try:
        payload = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.echo(f"Error: {file} is not valid JSON: {e}", err=True)
        raise typer.Exit(code=1) from e

    with schema_errors():
        op = default_registry().operation(module, operation, version=version)
        value = op.parse_response(payload)

    typer.echo(f"OK: {file.name} matches {op.result_name}")
    if dump:
        typer.echo(json.dumps(op.dump_response(value), indent=2))
