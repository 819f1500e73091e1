from __future__ import annotations

import logging
from dataclasses import dataclass

from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.errors import SchemaLookupError
from lol_api_schema.schema.operation import Operation

logger = logging.getLogger(__name__)


def _version_key(version: str) -> tuple[int, ...]:
    parts: list[int] = []
    for chunk in version.lstrip("v").split("."):
        try:
            parts.append(int(chunk))
        except ValueError:
            parts.append(0)
    return tuple(parts)


@dataclass(frozen=True)
class ApiKey:
    name: str
    version: str


@dataclass(frozen=True)
class ApiModule:
    """
    One API module at one version: its DTOs, its operations, and the
    Protocol a conforming client implements.
    """

    name: str
    version: str
    description: str
    entities: tuple[type[RiotModel], ...]
    operations: tuple[Operation, ...]
    protocol: type | None = None

    @property
    def key(self) -> ApiKey:
        return ApiKey(name=self.name, version=self.version)

    def entity(self, name: str) -> type[RiotModel]:
        for model in self.entities:
            if model.__name__ == name:
                return model
        raise SchemaLookupError(f"{self.name} {self.version} has no entity {name!r}")

    def operation(self, name: str) -> Operation:
        for op in self.operations:
            if op.name == name:
                return op
        raise SchemaLookupError(f"{self.name} {self.version} has no operation {name!r}")


class SchemaRegistry:
    def __init__(self) -> None:
        self._modules: dict[ApiKey, ApiModule] = {}

    def register(self, module: ApiModule) -> None:
        if module.key in self._modules:
            raise ValueError(f"Duplicate module registration: {module.key}")
        self._modules[module.key] = module
        logger.debug(
            "Registered %s %s (%d entities, %d operations)",
            module.name,
            module.version,
            len(module.entities),
            len(module.operations),
        )

    def __contains__(self, key: object) -> bool:
        return key in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def modules(self) -> list[ApiModule]:
        return sorted(self._modules.values(), key=lambda m: (m.name, _version_key(m.version)))

    def versions(self, name: str) -> list[str]:
        return [m.version for m in self.modules() if m.name == name]

    def get(self, name: str, version: str | None = None) -> ApiModule:
        # Without a version, the newest registered version wins.
        if version is not None:
            module = self._modules.get(ApiKey(name=name, version=version))
            if module is None:
                raise SchemaLookupError(f"No module registered for name={name} version={version}")
            return module

        candidates = [m for m in self._modules.values() if m.name == name]
        if not candidates:
            raise SchemaLookupError(f"No module registered for name={name}")
        return max(candidates, key=lambda m: _version_key(m.version))

    def entity(self, module: str, entity: str, *, version: str | None = None) -> type[RiotModel]:
        return self.get(module, version).entity(entity)

    def operation(self, module: str, operation: str, *, version: str | None = None) -> Operation:
        return self.get(module, version).operation(operation)

    def find_entity(self, name: str) -> list[tuple[ApiModule, type[RiotModel]]]:
        """All modules declaring an entity with this name (names repeat across modules)."""

        found: list[tuple[ApiModule, type[RiotModel]]] = []
        for module in self.modules():
            for model in module.entities:
                if model.__name__ == name:
                    found.append((module, model))
        return found
