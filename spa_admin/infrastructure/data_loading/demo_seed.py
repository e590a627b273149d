"""
Built-in demo data: a few clients, products, today's agenda and a month
of ledger entries.
"""

from datetime import date

from spa_admin.domain.entities import (
    Appointment,
    AppointmentStatus,
    Client,
    ClinicalData,
    FacialZone,
    Product,
    SkinType,
    Transaction,
    TransactionType,
)
from spa_admin.infrastructure.storage import StoreSnapshot


def build_demo_snapshot(today: date) -> StoreSnapshot:
    """
    Demo snapshot anchored on ``today``.

    Today's appointments and one client's birthday fall on ``today`` so the
    dashboard has something to show.
    """
    clients = (
        Client(
            id="1",
            name="Ana Sofía Lopez",
            phone="555-0101",
            email="ana@example.com",
            birth_date=date(1990, 5, 15),
            is_vip=True,
            history=(
                "Paciente presenta mejora en la zona T. Se recomienda "
                "continuar con hidratación profunda."
            ),
            clinical_data=ClinicalData(
                skin_type=SkinType.COMBINATION,
                hydration_level=60,
                oil_level=40,
                sensitivity_level=80,
                treated_areas={FacialZone.FOREHEAD, FacialZone.NOSE},
                allergies="Nueces, Látex",
            ),
            last_visit=date(2023, 10, 15),
        ),
        Client(
            id="2",
            name="María Gonzalez",
            phone="555-0102",
            email="maria@example.com",
            birth_date=today,
            history="Primera visita. Piel joven con leve tendencia acnéica.",
            clinical_data=ClinicalData(
                skin_type=SkinType.OILY,
                hydration_level=75,
                oil_level=90,
                sensitivity_level=20,
                treated_areas={FacialZone.CHEEKS, FacialZone.CHIN},
                allergies="Ninguna conocida",
            ),
            last_visit=date(2023, 10, 20),
        ),
        Client(
            id="3",
            name="Carla Ruiz",
            phone="555-0103",
            email="carla@example.com",
            birth_date=date(1985, 11, 30),
            is_vip=True,
            history=(
                "Tratamiento anti-edad fase 2 completado. Reacción "
                "favorable al retinol."
            ),
            clinical_data=ClinicalData(
                skin_type=SkinType.DRY,
                hydration_level=30,
                oil_level=10,
                sensitivity_level=50,
                treated_areas={
                    FacialZone.EYES,
                    FacialZone.FOREHEAD,
                    FacialZone.NECK,
                },
                allergies="Sulfatos",
            ),
            last_visit=date(2023, 10, 18),
        ),
    )

    products = (
        Product(
            id="1",
            name="Aceite de Argán Puro",
            quantity=12,
            min_stock=5,
            price=45.00,
            unit="Botella 50ml",
        ),
        Product(
            id="2",
            name="Mascarilla de Arcilla",
            quantity=3,
            min_stock=10,
            price=25.00,
            unit="Tarro 200g",
        ),
        Product(
            id="3",
            name="Suero Vitamina C",
            quantity=8,
            min_stock=5,
            price=60.00,
            unit="Gotero 30ml",
        ),
        Product(
            id="4",
            name="Toallas Faciales",
            quantity=50,
            min_stock=20,
            price=5.00,
            unit="Unidad",
        ),
    )

    appointments = (
        Appointment(
            id="1",
            client_id="1",
            client_name="Ana Sofía Lopez",
            date=today,
            time="10:00",
            service="Hidratación Profunda",
            status=AppointmentStatus.CONFIRMED,
        ),
        Appointment(
            id="2",
            client_id="2",
            client_name="María Gonzalez",
            date=today,
            time="14:30",
            service="Limpieza Facial",
        ),
    )

    transactions = (
        Transaction(
            id="1",
            date=date(2023, 10, 1),
            description="Venta de productos",
            amount=350,
            type=TransactionType.INCOME,
        ),
        Transaction(
            id="2",
            date=date(2023, 10, 2),
            description="Reposición de stock",
            amount=120,
            type=TransactionType.EXPENSE,
        ),
        Transaction(
            id="3",
            date=date(2023, 10, 5),
            description="Servicios de Spa",
            amount=800,
            type=TransactionType.INCOME,
        ),
        Transaction(
            id="4",
            date=date(2023, 10, 10),
            description="Pago de servicios públicos",
            amount=200,
            type=TransactionType.EXPENSE,
        ),
    )

    return StoreSnapshot(
        clients=clients,
        appointments=appointments,
        products=products,
        transactions=transactions,
    )
