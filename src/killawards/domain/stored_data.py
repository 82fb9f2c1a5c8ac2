"""Persisted per-player kill counters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .models import PlayerID


class PlayerRecord(BaseModel):
    """Counter state for one player."""

    model_config = ConfigDict(populate_by_name=True)

    kill_count: int = Field(default=0, ge=0, alias="killCount")


class StoredData(RootModel[dict[PlayerID, PlayerRecord]]):
    """Mapping of player id to record, serialised as the document root."""

    root: dict[PlayerID, PlayerRecord] = Field(default_factory=dict)

    def get(self, player_id: PlayerID) -> PlayerRecord | None:
        return self.root.get(player_id)

    def get_or_create(self, player_id: PlayerID) -> PlayerRecord:
        record = self.root.get(player_id)
        if record is None:
            record = PlayerRecord()
            self.root[player_id] = record
        return record

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.root
