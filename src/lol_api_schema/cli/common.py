from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, get_origin

import typer

from lol_api_schema.schema.errors import ParameterError, SchemaError
from lol_api_schema.schema.operation import Operation, ParamIn

_LIST_ORIGINS = (list, tuple, set, frozenset)


@contextmanager
def schema_errors() -> Iterator[None]:
    """
    Report schema failures as a single line on stderr and exit with code 1.
    Anything else propagates.
    """
    try:
        yield
    except SchemaError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _split_csv(value: str) -> list[str]:
    parts = [p.strip() for p in value.split(",")]
    return [p for p in parts if p]


def _body_value(raw: str) -> Any:
    # `@file.json` reads the body from a file
    if raw.startswith("@"):
        try:
            text = Path(raw[1:]).read_text(encoding="utf-8")
        except OSError as e:
            raise ParameterError(f"Cannot read body file {raw[1:]!r}: {e.strerror}") from e
    else:
        text = raw
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParameterError(f"Body is not valid JSON: {e}") from e


def parse_params(operation: Operation, pairs: list[str]) -> dict[str, Any]:
    """Turn repeated `name=value` options into keyword arguments for `operation`."""

    arguments: dict[str, Any] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ParameterError(f"Expected name=value, got {pair!r}")

        param = operation.param(name)
        if param.location is ParamIn.BODY:
            arguments[name] = _body_value(raw)
        elif get_origin(param.annotation) in _LIST_ORIGINS:
            arguments[name] = _split_csv(raw)
        else:
            arguments[name] = raw
    return arguments
