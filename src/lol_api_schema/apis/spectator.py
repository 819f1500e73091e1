"""Records shared verbatim by current-game-v1.0 and featured-games-v1.0."""

from __future__ import annotations

from pydantic import Field

from lol_api_schema.schema.base import RiotModel


class BannedChampion(RiotModel):
    champion_id: int = Field(..., alias="championId")
    pick_turn: int = Field(..., alias="pickTurn", description="Turn during which the champion was banned.")
    team_id: int = Field(..., alias="teamId", description="Team that banned the champion.")


class Observer(RiotModel):
    encryption_key: str = Field(
        ...,
        alias="encryptionKey",
        description="Key used to decrypt the spectator grid game data for playback.",
    )
