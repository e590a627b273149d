"""
Dashboard derivations.

Pure functions over a StoreSnapshot (or its collections) and a caller
supplied ``today``. Nothing is cached; every call recomputes from scratch.
"""

from datetime import date
from typing import Iterable, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from structlog import get_logger

from spa_admin.domain.entities import (
    Appointment,
    Client,
    Product,
    Transaction,
    TransactionType,
)
from spa_admin.domain.value_objects import Money
from spa_admin.infrastructure.storage import StoreSnapshot

logger = get_logger(__name__)


class CashFlowPoint(BaseModel):
    """Income and expense totals for one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(description="ISO date")
    income: float = 0.0
    expense: float = 0.0


class AccountTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_income: float
    total_expense: float
    balance: float


class DashboardSummary(BaseModel):
    """Every figure shown on the dashboard for one day."""

    model_config = ConfigDict(frozen=True)

    today: str
    todays_appointments: int
    vip_clients: int
    low_stock_products: int
    monthly_income: float
    totals: AccountTotals
    cash_flow: list[CashFlowPoint]
    birthdays: list[str]
    low_stock_names: list[str]


def count_appointments_on(
    appointments: Iterable[Appointment], today: date
) -> int:
    return sum(1 for apt in appointments if apt.appointment_date == today)


def count_vip_clients(clients: Iterable[Client]) -> int:
    return sum(1 for client in clients if client.is_vip)


def low_stock_products(products: Iterable[Product]) -> list[Product]:
    """Products at or below their reorder threshold, in store order."""
    return [product for product in products if product.is_low_stock]


def count_low_stock(products: Iterable[Product]) -> int:
    return len(low_stock_products(products))


def monthly_income(transactions: Iterable[Transaction], today: date) -> float:
    """
    Income booked in the current month.

    Only the month number is compared: income from the same month of an
    earlier year is counted too.
    """
    return float(
        Money.total(
            t.amount
            for t in transactions
            if t.is_income and t.transaction_date.month == today.month
        )
    )


def account_totals(transactions: Iterable[Transaction]) -> AccountTotals:
    income = Money.zero()
    expense = Money.zero()
    for transaction in transactions:
        if transaction.is_income:
            income = income + transaction.money_amount
        else:
            expense = expense + transaction.money_amount
    return AccountTotals(
        total_income=float(income),
        total_expense=float(expense),
        balance=float(income.difference(expense)),
    )


def cash_flow_series(
    transactions: Sequence[Transaction],
) -> list[CashFlowPoint]:
    """
    Group transactions by date into income/expense pairs.

    One point per distinct date, ascending. The result does not depend on
    the order of the input.
    """
    if not transactions:
        return []

    df = pd.DataFrame(
        {
            "date": [t.transaction_date.isoformat() for t in transactions],
            "type": [t.type.value for t in transactions],
            "amount": [t.amount for t in transactions],
        }
    )
    grouped = (
        df.pivot_table(
            index="date",
            columns="type",
            values="amount",
            aggfunc="sum",
            fill_value=0.0,
        )
        .reindex(
            columns=[
                TransactionType.INCOME.value,
                TransactionType.EXPENSE.value,
            ],
            fill_value=0.0,
        )
        .sort_index()
    )

    return [
        CashFlowPoint(
            date=str(day),
            income=round(float(row[TransactionType.INCOME.value]), 2),
            expense=round(float(row[TransactionType.EXPENSE.value]), 2),
        )
        for day, row in grouped.iterrows()
    ]


def clients_with_birthday(
    clients: Iterable[Client], today: date
) -> list[Client]:
    return [client for client in clients if client.has_birthday_on(today)]


def search_clients(clients: Iterable[Client], term: str) -> list[Client]:
    """Clients whose name or email contains ``term``, ignoring case."""
    return [client for client in clients if client.matches(term)]


def agenda(appointments: Iterable[Appointment]) -> list[Appointment]:
    """Appointments ordered by start time, ties kept in store order."""
    return sorted(appointments, key=lambda apt: apt.time)


def ledger(
    transactions: Sequence[Transaction], limit: int | None = None
) -> list[Transaction]:
    """Most recent entries first (reverse insertion order)."""
    recent = list(reversed(transactions))
    return recent if limit is None else recent[:limit]


def compute_dashboard(
    snapshot: StoreSnapshot, today: date
) -> DashboardSummary:
    summary = DashboardSummary(
        today=today.isoformat(),
        todays_appointments=count_appointments_on(
            snapshot.appointments, today
        ),
        vip_clients=count_vip_clients(snapshot.clients),
        low_stock_products=count_low_stock(snapshot.products),
        monthly_income=monthly_income(snapshot.transactions, today),
        totals=account_totals(snapshot.transactions),
        cash_flow=cash_flow_series(snapshot.transactions),
        birthdays=[
            c.name for c in clients_with_birthday(snapshot.clients, today)
        ],
        low_stock_names=[
            p.name for p in low_stock_products(snapshot.products)
        ],
    )
    logger.debug(
        "Dashboard computed",
        today=summary.today,
        counts=snapshot.counts(),
    )
    return summary
