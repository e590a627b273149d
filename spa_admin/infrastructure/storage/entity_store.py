"""
Process-local entity store.

Holds the four collections as tuples inside one frozen snapshot. Writers
build a new snapshot and swap it in with a single assignment, so a snapshot
handed out earlier never changes underneath its reader.
"""

import dataclasses
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Iterable

from structlog import get_logger

from spa_admin.domain.entities import (
    Appointment,
    Client,
    Product,
    Transaction,
)

logger = get_logger(__name__)


class CollectionName(StrEnum):
    CLIENTS = "clients"
    APPOINTMENTS = "appointments"
    PRODUCTS = "products"
    TRANSACTIONS = "transactions"


@dataclass(frozen=True)
class StoreSnapshot:
    """Immutable, consistent view of every collection at one instant."""

    clients: tuple[Client, ...] = ()
    appointments: tuple[Appointment, ...] = ()
    products: tuple[Product, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def collection(self, name: CollectionName | str) -> tuple[Any, ...]:
        return getattr(self, CollectionName(name).value)

    def counts(self) -> dict[str, int]:
        return {
            name.value: len(self.collection(name)) for name in CollectionName
        }

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """JSON-ready dump using the camelCase seed layout."""
        return {
            name.value: [
                entity.model_dump(mode="json", by_alias=True)
                for entity in self.collection(name)
            ]
            for name in CollectionName
        }


class EntityStore:
    """
    Owner of the current snapshot.

    All operations are total; entities are never mutated in place.
    """

    def __init__(self, initial: StoreSnapshot | None = None) -> None:
        self._snapshot = initial or StoreSnapshot()

    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    def replace(
        self, name: CollectionName | str, items: Iterable[Any]
    ) -> StoreSnapshot:
        """Swap one collection for a new ordered sequence."""
        return self.replace_many(**{CollectionName(name).value: items})

    def replace_many(self, **collections: Iterable[Any]) -> StoreSnapshot:
        """
        Swap several collections in one step.

        Readers see either none or all of the new collections.

        Raises:
            ValueError: If a keyword is not a collection name.
        """
        changes = {
            CollectionName(name).value: tuple(items)
            for name, items in collections.items()
        }
        self._snapshot = dataclasses.replace(self._snapshot, **changes)
        logger.debug(
            "Store collections replaced",
            collections=sorted(changes),
            counts=self._snapshot.counts(),
        )
        return self._snapshot
