"""JSON documents backing the configuration and the kill counters."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from killawards.domain.rules_config import Configuration
from killawards.domain.stored_data import StoredData
from killawards.errors import ConfigurationError

logger = logging.getLogger(__name__)


def document_path(base_path: Path, name: str) -> Path:
    """Return the path of the document keyed by ``name``."""

    return base_path / f"{name}.json"


class JsonConfigRepository:
    """Read and write the human-editable configuration document."""

    def __init__(self, base_path: Path, name: str) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.path = document_path(base_path, name)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Configuration | None:
        """Return the stored configuration, or ``None`` when there is none."""

        if not self.path.exists():
            return None
        try:
            return Configuration.model_validate_json(self.path.read_bytes())
        except ValidationError as exc:
            raise ConfigurationError(self.path, str(exc)) from exc

    def save(self, config: Configuration) -> Path:
        """Serialize the configuration to disk and return its path."""

        payload = config.model_dump_json(by_alias=True, indent=2)
        self.path.write_text(payload, encoding="utf-8")
        return self.path


class JsonStoredDataRepository:
    """Persist kill counters as a single JSON document."""

    def __init__(self, base_path: Path, name: str) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.path = document_path(base_path, name)

    def exists(self) -> bool:
        return self.path.exists()

    def load_or_create(self) -> StoredData:
        """Load the counters, starting empty when the file is absent or unreadable."""

        if not self.path.exists():
            return StoredData()
        try:
            return StoredData.model_validate_json(self.path.read_bytes())
        except (OSError, ValidationError):
            logger.warning("Kill counter file %s is unreadable, starting empty", self.path)
            return StoredData()

    def save(self, stored: StoredData) -> Path:
        """Serialize the counters to disk and return the document path."""

        payload = stored.model_dump_json(by_alias=True, indent=2)
        self.path.write_text(payload, encoding="utf-8")
        return self.path

    def delete(self) -> None:
        """Remove the counter document if it exists."""

        if self.path.exists():
            self.path.unlink()
