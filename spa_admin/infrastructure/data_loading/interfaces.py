"""
Interface for seed loaders.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from spa_admin.infrastructure.storage import StoreSnapshot


class SeedLoader(ABC):
    """Turns a seed source into a store snapshot."""

    @abstractmethod
    def supports(self, source: Path) -> bool:
        """Check if this loader can read ``source``."""

    @abstractmethod
    def parse(self, data: Any) -> StoreSnapshot:
        """Build a snapshot from already decoded data."""

    @abstractmethod
    def load(self, source: Path) -> StoreSnapshot:
        """
        Read ``source`` and build a snapshot from it.

        Raises:
            FileNotFoundError: If source doesn't exist.
            ValueError: If the content is not a valid seed.
        """
