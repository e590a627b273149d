"""
Spa store: the explicit state object handed to the presentation layer.

Every mutation command builds new collection tuples and swaps them into the
underlying EntityStore in one step.
"""

from datetime import date
from typing import Any, Callable, TypeVar

from structlog import get_logger

from spa_admin.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    FacialZone,
    Product,
    Transaction,
    TransactionType,
)
from spa_admin.domain.entities.base import Entity
from spa_admin.domain.value_objects import UpdateResult
from spa_admin.infrastructure.storage import (
    CollectionName,
    EntityStore,
    StoreSnapshot,
)

logger = get_logger(__name__)

# Every new appointment is booked as income at this flat amount.
APPOINTMENT_INCOME_AMOUNT = 100.0
UNKNOWN_CLIENT_NAME = "Unknown"

E = TypeVar("E", bound=Entity)


class SpaStore:
    """
    Clients, agenda, inventory and ledger for one running instance.

    Updates addressed to an id that does not exist leave the store as it
    was and report ``UpdateResult.NOT_FOUND_NOOP``.
    """

    def __init__(self, entity_store: EntityStore | None = None) -> None:
        self._entities = entity_store or EntityStore()

    @classmethod
    def from_snapshot(cls, snapshot: StoreSnapshot) -> "SpaStore":
        return cls(EntityStore(snapshot))

    def snapshot(self) -> StoreSnapshot:
        return self._entities.snapshot()

    # Clients

    def add_client(self, client: Client) -> Client:
        snapshot = self.snapshot()
        self._entities.replace(
            CollectionName.CLIENTS, (*snapshot.clients, client)
        )
        logger.debug("Client added", client_id=client.id)
        return client

    def update_client(self, client: Client) -> UpdateResult:
        return self._replace_by_id(
            CollectionName.CLIENTS, client.id, lambda _: client
        )

    def update_clinical_data(
        self, client_id: str, **changes: Any
    ) -> UpdateResult:
        """
        Merge ``changes`` into a client's clinical sheet.

        Levels outside 0-100 are clamped.

        Raises:
            ValueError: If a change names an unknown clinical field.
        """

        def apply(client: Client) -> Client:
            return client.model_copy(
                update={
                    "clinical_data": client.clinical_data.with_changes(
                        **changes
                    )
                }
            )

        return self._replace_by_id(CollectionName.CLIENTS, client_id, apply)

    def toggle_treated_area(
        self, client_id: str, zone: FacialZone | str
    ) -> UpdateResult:
        zone = FacialZone(zone)
        return self._replace_by_id(
            CollectionName.CLIENTS,
            client_id,
            lambda client: client.model_copy(
                update={"clinical_data": client.clinical_data.toggled(zone)}
            ),
        )

    def update_history(self, client_id: str, history: str) -> UpdateResult:
        return self._replace_by_id(
            CollectionName.CLIENTS,
            client_id,
            lambda client: client.model_copy(update={"history": history}),
        )

    # Agenda

    def add_appointment(self, appointment: Appointment) -> Appointment:
        """
        Store a new appointment together with its income transaction.

        The appointment is always stored as pending. Both collections are
        swapped in one step.
        """
        stored = appointment.model_copy(
            update={"status": AppointmentStatus.PENDING}
        )
        income = Transaction(
            date=stored.appointment_date,
            description=f"Service: {stored.service} - {stored.client_name}",
            amount=APPOINTMENT_INCOME_AMOUNT,
            type=TransactionType.INCOME,
        )
        snapshot = self.snapshot()
        self._entities.replace_many(
            appointments=(*snapshot.appointments, stored),
            transactions=(*snapshot.transactions, income),
        )
        logger.info(
            "Appointment booked",
            appointment_id=stored.id,
            transaction_id=income.id,
            date=stored.appointment_date.isoformat(),
            amount=income.amount,
        )
        return stored

    def schedule_appointment(
        self,
        client_id: str,
        appointment_date: date,
        time: str,
        service: str,
    ) -> Appointment:
        """Book an appointment, copying the client's current name."""
        client = next(
            (c for c in self.snapshot().clients if c.id == client_id), None
        )
        if client is None:
            logger.warning(
                "Booking for unknown client", client_id=client_id
            )
        return self.add_appointment(
            Appointment(
                client_id=client_id,
                client_name=client.name if client else UNKNOWN_CLIENT_NAME,
                date=appointment_date,
                time=time,
                service=service,
            )
        )

    def update_appointment_status(
        self, appointment_id: str, status: AppointmentStatus | str
    ) -> UpdateResult:
        """Set any status; transitions are not restricted."""
        status = AppointmentStatus(status)
        return self._replace_by_id(
            CollectionName.APPOINTMENTS,
            appointment_id,
            lambda apt: apt.model_copy(update={"status": status}),
        )

    # Inventory

    def add_product(self, product: Product) -> Product:
        snapshot = self.snapshot()
        self._entities.replace(
            CollectionName.PRODUCTS, (*snapshot.products, product)
        )
        logger.debug("Product added", product_id=product.id)
        return product

    def update_product_stock(
        self, product_id: str, delta: int
    ) -> UpdateResult:
        """Apply a signed stock change; quantity never drops below zero."""
        return self._replace_by_id(
            CollectionName.PRODUCTS,
            product_id,
            lambda product: product.with_stock_delta(delta),
        )

    def _replace_by_id(
        self,
        name: CollectionName,
        entity_id: str,
        transform: Callable[[E], E],
    ) -> UpdateResult:
        current = self.snapshot().collection(name)
        if not any(entity.id == entity_id for entity in current):
            logger.info(
                "Update skipped, id not found",
                collection=name.value,
                entity_id=entity_id,
            )
            return UpdateResult.NOT_FOUND_NOOP

        self._entities.replace(
            name,
            [
                transform(entity) if entity.id == entity_id else entity
                for entity in current
            ],
        )
        logger.debug(
            "Entity updated", collection=name.value, entity_id=entity_id
        )
        return UpdateResult.APPLIED
