"""
Seeding use case: build the in-memory store a session starts from.
"""

from datetime import date
from pathlib import Path

from structlog import get_logger

from spa_admin.application.store import SpaStore
from spa_admin.infrastructure.data_loading import (
    SeedLoader,
    SnapshotJsonLoader,
    build_demo_snapshot,
)
from spa_admin.infrastructure.storage import StoreSnapshot
from spa_admin.utils.datetime_helpers import get_today

logger = get_logger(__name__)


def create_store(
    seed_file: Path | None = None,
    load_demo_data: bool = True,
    today: date | None = None,
    loader: SeedLoader | None = None,
) -> SpaStore:
    """
    Create a store from a seed file, the demo data, or nothing.

    A seed file takes precedence over the demo data.

    Args:
        seed_file: Optional JSON seed path.
        load_demo_data: Use the built-in demo data when no seed is given.
        today: Anchor date for the demo data.
        loader: Seed loader (optional).

    Raises:
        FileNotFoundError: If ``seed_file`` does not exist.
        ValueError: If ``seed_file`` is not a format the loader reads, or
            not a valid seed.
    """
    if seed_file is not None:
        seed_file = Path(seed_file)
        loader = loader or SnapshotJsonLoader()
        if not loader.supports(seed_file):
            raise ValueError(f"Unsupported seed file format: {seed_file}")
        snapshot = loader.load(seed_file)
        source = str(seed_file)
    elif load_demo_data:
        snapshot = build_demo_snapshot(today or get_today())
        source = "demo"
    else:
        snapshot = StoreSnapshot()
        source = "empty"

    logger.info("Store created", source=source, counts=snapshot.counts())
    return SpaStore.from_snapshot(snapshot)
