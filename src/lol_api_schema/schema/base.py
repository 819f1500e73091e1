from __future__ import annotations

from typing import Any, NamedTuple, Self

from pydantic import BaseModel, ConfigDict

Json = dict[str, Any]


class WireField(NamedTuple):
    name: str
    wire_name: str
    annotation: Any
    required: bool
    description: str | None


class RiotModel(BaseModel):
    """
    Base for every DTO.

    - Attributes are snake_case; the JSON names are carried as aliases.
    - Either name is accepted on input, output always uses the JSON names.
    - Fields the payload never carried are left out of `to_wire()`, so an
      absent optional record stays absent and an explicit null stays null.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_wire(cls, payload: Any) -> Self:
        return cls.model_validate(payload)

    def to_wire(self) -> Json:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @classmethod
    def wire_fields(cls) -> list[WireField]:
        return [
            WireField(
                name=name,
                wire_name=info.alias or name,
                annotation=info.annotation,
                required=info.is_required(),
                description=info.description,
            )
            for name, info in cls.model_fields.items()
        ]
