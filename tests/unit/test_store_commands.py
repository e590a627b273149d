"""
Unit tests for SpaStore mutation commands
"""

import random
from datetime import date

import pytest

from spa_admin.application import APPOINTMENT_INCOME_AMOUNT, SpaStore
from spa_admin.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    FacialZone,
    Product,
    TransactionType,
)
from spa_admin.domain.value_objects import UpdateResult


def make_appointment(**overrides) -> Appointment:
    data = {
        "client_id": "1",
        "client_name": "Ana Sofía Lopez",
        "date": date(2026, 10, 21),
        "time": "11:00",
        "service": "Peeling",
    }
    data.update(overrides)
    return Appointment(**data)


class TestClientCommands:
    """Tests for client commands"""

    def test_add_client_appends(self, empty_store, client):
        empty_store.add_client(client)
        other = empty_store.add_client(Client(name="Bea", phone="2"))

        assert [c.id for c in empty_store.snapshot().clients] == [
            client.id,
            other.id,
        ]

    def test_update_client_replaces_by_id(self, demo_store):
        original = demo_store.snapshot().clients[1]
        renamed = original.model_copy(update={"name": "María G."})

        result = demo_store.update_client(renamed)

        clients = demo_store.snapshot().clients
        assert result is UpdateResult.APPLIED
        assert result.applied
        assert clients[1].name == "María G."
        assert len(clients) == 3

    def test_update_unknown_client_is_noop(self, demo_store):
        """Unknown id leaves length and contents unchanged"""
        before = demo_store.snapshot()

        result = demo_store.update_client(
            Client(id="missing", name="Ghost", phone="0")
        )

        assert result is UpdateResult.NOT_FOUND_NOOP
        assert not result.applied
        assert demo_store.snapshot().clients == before.clients
        assert demo_store.snapshot() is before

    @pytest.mark.parametrize("raw, stored", [(150, 100), (-5, 0)])
    def test_clinical_update_clamps(self, demo_store, raw, stored):
        result = demo_store.update_clinical_data("1", hydration_level=raw)

        client = demo_store.snapshot().clients[0]
        assert result is UpdateResult.APPLIED
        assert client.clinical_data.hydration_level == stored
        assert client.clinical_data.oil_level == 40

    def test_clinical_update_unknown_field_leaves_store(self, demo_store):
        before = demo_store.snapshot()

        with pytest.raises(ValueError):
            demo_store.update_clinical_data("1", moisture=10)

        assert demo_store.snapshot() is before

    def test_clinical_update_unknown_client(self, demo_store):
        assert (
            demo_store.update_clinical_data("missing", oil_level=10)
            is UpdateResult.NOT_FOUND_NOOP
        )

    def test_toggle_area_twice(self, demo_store):
        original = demo_store.snapshot().clients[0].clinical_data

        demo_store.toggle_treated_area("1", FacialZone.FOREHEAD)
        toggled = demo_store.snapshot().clients[0].clinical_data
        demo_store.toggle_treated_area("1", "forehead")
        restored = demo_store.snapshot().clients[0].clinical_data

        assert FacialZone.FOREHEAD not in toggled.treated_areas
        assert restored.treated_areas == original.treated_areas

    def test_toggle_area_rejects_unknown_zone(self, demo_store):
        with pytest.raises(ValueError):
            demo_store.toggle_treated_area("1", "elbow")

    def test_update_history(self, demo_store):
        demo_store.update_history("3", "Sesión 3: sin reacciones.")

        assert (
            demo_store.snapshot().clients[2].history
            == "Sesión 3: sin reacciones."
        )


class TestAppointmentCommands:
    """Tests for agenda commands"""

    def test_add_appointment_books_income(self, demo_store):
        """Appointment and its income transaction land together"""
        before = demo_store.snapshot()

        stored = demo_store.add_appointment(make_appointment())

        after = demo_store.snapshot()
        assert len(after.appointments) == len(before.appointments) + 1
        assert len(after.transactions) == len(before.transactions) + 1

        income = after.transactions[-1]
        assert after.appointments[-1] == stored
        assert income.type is TransactionType.INCOME
        assert income.amount == APPOINTMENT_INCOME_AMOUNT == 100
        assert income.transaction_date == stored.appointment_date
        assert income.description == "Service: Peeling - Ana Sofía Lopez"

    def test_add_appointment_forces_pending(self, empty_store):
        stored = empty_store.add_appointment(
            make_appointment(status=AppointmentStatus.COMPLETED)
        )

        assert stored.status is AppointmentStatus.PENDING
        assert (
            empty_store.snapshot().appointments[0].status
            is AppointmentStatus.PENDING
        )

    def test_prior_snapshot_sees_neither(self, empty_store):
        before = empty_store.snapshot()

        empty_store.add_appointment(make_appointment())

        assert before.appointments == ()
        assert before.transactions == ()

    def test_schedule_copies_client_name(self, demo_store):
        apt = demo_store.schedule_appointment(
            "3", date(2026, 10, 22), "16:15", "Radiofrecuencia"
        )

        assert apt.client_name == "Carla Ruiz"
        assert apt.client_id == "3"

    def test_schedule_unknown_client(self, empty_store):
        apt = empty_store.schedule_appointment(
            "nobody", date(2026, 10, 22), "16:15", "Masaje"
        )

        assert apt.client_name == "Unknown"
        assert len(empty_store.snapshot().transactions) == 1

    def test_client_name_not_refreshed_on_rename(self, demo_store):
        apt = demo_store.schedule_appointment(
            "3", date(2026, 10, 22), "16:15", "Masaje"
        )
        carla = demo_store.snapshot().clients[2]
        demo_store.update_client(carla.model_copy(update={"name": "Carla R."}))

        stored = demo_store.snapshot().appointments[-1]
        assert stored.id == apt.id
        assert stored.client_name == "Carla Ruiz"

    @pytest.mark.parametrize(
        "first, second",
        [
            (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED),
            (AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED),
            (AppointmentStatus.COMPLETED, AppointmentStatus.PENDING),
        ],
    )
    def test_any_status_transition(self, demo_store, first, second):
        demo_store.update_appointment_status("1", first)
        result = demo_store.update_appointment_status("1", second)

        assert result is UpdateResult.APPLIED
        assert demo_store.snapshot().appointments[0].status is second

    def test_status_from_string(self, demo_store):
        demo_store.update_appointment_status("2", "confirmed")

        assert (
            demo_store.snapshot().appointments[1].status
            is AppointmentStatus.CONFIRMED
        )

    def test_status_unknown_appointment(self, demo_store):
        before = demo_store.snapshot()

        result = demo_store.update_appointment_status(
            "missing", AppointmentStatus.CONFIRMED
        )

        assert result is UpdateResult.NOT_FOUND_NOOP
        assert demo_store.snapshot() is before


class TestInventoryCommands:
    """Tests for inventory commands"""

    def test_stock_clamped_at_zero(self, empty_store):
        product = empty_store.add_product(
            Product(name="Mascarilla", quantity=3, min_stock=10)
        )

        empty_store.update_product_stock(product.id, -10)

        assert empty_store.snapshot().products[0].quantity == 0

    def test_stock_never_negative(self, empty_store):
        """Random signed deltas never push quantity below zero"""
        product = empty_store.add_product(Product(name="Toallas", quantity=5))
        rng = random.Random(1234)

        for _ in range(200):
            delta = rng.randint(-50, 40)
            empty_store.update_product_stock(product.id, delta)
            assert empty_store.snapshot().products[0].quantity >= 0

    def test_stock_increment(self, demo_store):
        demo_store.update_product_stock("2", 1)

        assert demo_store.snapshot().products[1].quantity == 4

    def test_stock_unknown_product(self, demo_store):
        before = demo_store.snapshot()

        assert (
            demo_store.update_product_stock("missing", 5)
            is UpdateResult.NOT_FOUND_NOOP
        )
        assert demo_store.snapshot() is before

    def test_add_product_defaults(self, empty_store):
        product = empty_store.add_product(Product(name="Crema Solar"))

        stored = empty_store.snapshot().products[0]
        assert stored == product
        assert (stored.min_stock, stored.unit) == (5, "unidad")
        assert (stored.quantity, stored.price) == (0, 0)


class TestStoreConstruction:
    def test_from_snapshot(self, demo_store):
        copy = SpaStore.from_snapshot(demo_store.snapshot())

        copy.update_product_stock("1", 1)

        assert demo_store.snapshot().products[0].quantity == 12
        assert copy.snapshot().products[0].quantity == 13
