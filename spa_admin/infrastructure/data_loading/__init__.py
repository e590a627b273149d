from .demo_seed import build_demo_snapshot
from .interfaces import SeedLoader
from .json_loader import SnapshotJsonLoader

__all__ = [
    "SeedLoader",
    "SnapshotJsonLoader",
    "build_demo_snapshot",
]
