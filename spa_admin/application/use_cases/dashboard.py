"""
Dashboard use case: every view-model the dashboard needs, from one
snapshot.
"""

from dataclasses import dataclass
from datetime import date

from structlog import get_logger

from spa_admin.application.store import SpaStore
from spa_admin.domain.entities import (
    Appointment,
    Client,
    Product,
    Transaction,
)
from spa_admin.infrastructure.analysis import (
    DashboardSummary,
    agenda,
    clients_with_birthday,
    compute_dashboard,
    ledger,
    low_stock_products,
    search_clients,
)
from spa_admin.utils.datetime_helpers import get_today

logger = get_logger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Summary figures plus the lists the dashboard renders."""

    summary: DashboardSummary
    todays_agenda: list[Appointment]
    birthday_clients: list[Client]
    low_stock: list[Product]
    recent_transactions: list[Transaction]
    matching_clients: list[Client]


class BuildDashboardUseCase:
    """
    Build the dashboard for one day.

    Reads a single snapshot so every figure describes the same state.
    """

    def __init__(
        self,
        store: SpaStore,
        recent_transactions_limit: int = 5,
    ) -> None:
        self.store = store
        self.recent_transactions_limit = recent_transactions_limit

    def execute(
        self, today: date, search_term: str | None = None
    ) -> DashboardView:
        snapshot = self.store.snapshot()
        summary = compute_dashboard(snapshot, today)

        todays = [
            apt
            for apt in agenda(snapshot.appointments)
            if apt.appointment_date == today
        ]
        matching = (
            search_clients(snapshot.clients, search_term)
            if search_term
            else list(snapshot.clients)
        )

        logger.info(
            "Dashboard built",
            today=today.isoformat(),
            appointments_today=summary.todays_appointments,
            low_stock=summary.low_stock_products,
        )
        return DashboardView(
            summary=summary,
            todays_agenda=todays,
            birthday_clients=clients_with_birthday(snapshot.clients, today),
            low_stock=low_stock_products(snapshot.products),
            recent_transactions=ledger(
                snapshot.transactions, self.recent_transactions_limit
            ),
            matching_clients=matching,
        )


def build_dashboard(
    store: SpaStore,
    today: date | None = None,
    search_term: str | None = None,
    recent_transactions_limit: int = 5,
) -> DashboardView:
    """
    Build the dashboard with default settings.

    Args:
        store: Store to read.
        today: Reference date, defaults to the system date.
        search_term: Optional client filter (name or email).
        recent_transactions_limit: Ledger rows to include.
    """
    use_case = BuildDashboardUseCase(
        store, recent_transactions_limit=recent_transactions_limit
    )
    return use_case.execute(today or get_today(), search_term=search_term)
