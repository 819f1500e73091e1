from __future__ import annotations


class SchemaError(RuntimeError):
    """Base exception for schema-related failures."""


class SchemaLookupError(SchemaError, LookupError):
    """Requested module, entity or operation is not registered."""


class ParameterError(SchemaError, ValueError):
    """Arguments do not fit an operation's declared parameters (missing, unknown, too many IDs, etc.)."""


class ResponseShapeError(SchemaError):
    """Payload does not match the declared result shape of an operation."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"
