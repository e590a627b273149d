"""
JSON seed loader implementation with orjson.
"""

from pathlib import Path
from typing import Any, Type

import orjson
from pydantic import BaseModel, ValidationError
from structlog import get_logger

from spa_admin.domain.entities import (
    Appointment,
    Client,
    Product,
    Transaction,
)
from spa_admin.infrastructure.storage import CollectionName, StoreSnapshot

from .interfaces import SeedLoader

logger = get_logger(__name__)


class SnapshotJsonLoader(SeedLoader):
    """
    Loads a store snapshot from a JSON seed file.

    Expected JSON format (every key optional):
        {
          "clients": [{"id": "1", "name": "...", "isVip": true, ...}],
          "appointments": [...],
          "products": [...],
          "transactions": [...]
        }

    Handles:
    - Records failing validation: skipped with a warning
    - Repeated ids within a collection: first one wins
    - Clients without clinical data: default sheet
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024

    MODELS: dict[CollectionName, Type[BaseModel]] = {
        CollectionName.CLIENTS: Client,
        CollectionName.APPOINTMENTS: Appointment,
        CollectionName.PRODUCTS: Product,
        CollectionName.TRANSACTIONS: Transaction,
    }

    def supports(self, source: Path) -> bool:
        """Check if file is JSON; existence is checked by ``load``."""
        return source.suffix.lower() == ".json"

    def _validate_file(self, source: Path) -> None:
        """Validate file before processing."""
        if not source.exists():
            raise FileNotFoundError(f"Seed file not found: {source}")

        if not source.is_file():
            raise ValueError(f"Path is not a file: {source}")

        file_size = source.stat().st_size
        if file_size > self.MAX_FILE_SIZE:
            raise ValueError(
                f"File too large: {file_size} bytes > {self.MAX_FILE_SIZE} "
                "bytes"
            )

        if file_size == 0:
            raise ValueError(f"File is empty: {source}")

    def load(self, source: Path) -> StoreSnapshot:
        """
        Load every collection from ``source``.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is empty, too large, not JSON or not
                a JSON object.
        """
        self._validate_file(source)

        logger.info(f"Loading seed data from {source}")

        try:
            data = orjson.loads(source.read_bytes())
        except orjson.JSONDecodeError as e:
            logger.error(f"JSON decode error in {source}: {e}")
            raise ValueError(f"Invalid JSON format: {e}") from e

        return self.parse(data)

    def parse(self, data: Any) -> StoreSnapshot:
        """Build a snapshot from already decoded JSON."""
        if not isinstance(data, dict):
            raise ValueError("Seed JSON must be an object of collections")

        collections = {
            name.value: self._parse_collection(name, data.get(name.value))
            for name in CollectionName
        }
        snapshot = StoreSnapshot(**collections)
        logger.info("Seed data parsed", counts=snapshot.counts())
        return snapshot

    def _parse_collection(
        self, name: CollectionName, records: Any
    ) -> tuple[BaseModel, ...]:
        if records is None:
            return ()
        if not isinstance(records, list):
            raise ValueError(f"'{name.value}' must be a JSON array")

        model = self.MODELS[name]
        seen: set[str] = set()
        entities: list[BaseModel] = []
        for position, record in enumerate(records):
            entity = self._parse_record(model, name, position, record)
            if entity is None:
                continue
            if entity.id in seen:
                logger.warning(
                    "Duplicate id skipped",
                    collection=name.value,
                    entity_id=entity.id,
                )
                continue
            seen.add(entity.id)
            entities.append(entity)

        if len(entities) != len(records):
            logger.warning(
                f"Loaded {len(entities)}/{len(records)} {name.value}"
            )
        return tuple(entities)

    def _parse_record(
        self,
        model: Type[BaseModel],
        name: CollectionName,
        position: int,
        record: Any,
    ) -> Any:
        if not isinstance(record, dict):
            logger.warning(
                "Skipping non-object record",
                collection=name.value,
                position=position,
            )
            return None
        try:
            return model.model_validate(record)
        except ValidationError as e:
            logger.warning(
                "Skipping invalid record",
                collection=name.value,
                position=position,
                errors=e.error_count(),
            )
            return None
