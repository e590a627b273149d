"""
Pytest configuration and fixtures
"""

import os
import sys
from datetime import date

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from spa_admin.application import SpaStore  # noqa: E402
from spa_admin.domain.entities import (  # noqa: E402
    Client,
    Product,
    Transaction,
    TransactionType,
)
from spa_admin.infrastructure.data_loading import (  # noqa: E402
    build_demo_snapshot,
)
from spa_admin.infrastructure.logger import reset_logging  # noqa: E402


@pytest.fixture
def today() -> date:
    """Fixed reference date"""
    return date(2026, 10, 19)


@pytest.fixture
def demo_store(today) -> SpaStore:
    """Store seeded with the built-in demo data"""
    return SpaStore.from_snapshot(build_demo_snapshot(today))


@pytest.fixture
def empty_store() -> SpaStore:
    return SpaStore()


@pytest.fixture
def client() -> Client:
    return Client(id="c1", name="Ana", phone="555-0101", email="ana@x.com")


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id="p1", name="Aceite", quantity=12, min_stock=5),
        Product(id="p2", name="Mascarilla", quantity=3, min_stock=10),
    ]


@pytest.fixture
def ledger_transactions() -> list[Transaction]:
    """Income 350 + 800, expenses 120 + 200"""
    return [
        Transaction(
            id="t1", date=date(2023, 10, 1), amount=350,
            type=TransactionType.INCOME,
        ),
        Transaction(
            id="t2", date=date(2023, 10, 2), amount=120,
            type=TransactionType.EXPENSE,
        ),
        Transaction(
            id="t3", date=date(2023, 10, 5), amount=800,
            type=TransactionType.INCOME,
        ),
        Transaction(
            id="t4", date=date(2023, 10, 10), amount=200,
            type=TransactionType.EXPENSE,
        ),
    ]


@pytest.fixture
def clean_logging():
    """Reset logging configuration before and after the test"""
    reset_logging()
    yield
    reset_logging()
