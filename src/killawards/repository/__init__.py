"""Persistence adapters for Kill Awards documents."""

from killawards.repository.json_store import JsonConfigRepository, JsonStoredDataRepository

__all__ = ["JsonConfigRepository", "JsonStoredDataRepository"]
