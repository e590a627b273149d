"""
Domain layer containing business entities and value objects.

This layer is framework-agnostic and holds no state of its own.
"""

from .entities import (
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
from .value_objects import Money, UpdateResult

__all__ = [
    # Entities
    "Client",
    "ClinicalData",
    "Appointment",
    "Product",
    "Transaction",
    # Enums
    "AppointmentStatus",
    "FacialZone",
    "SkinType",
    "TransactionType",
    # Value Objects
    "Money",
    "UpdateResult",
]
