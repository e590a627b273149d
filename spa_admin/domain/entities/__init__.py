from .appointment import Appointment, AppointmentStatus
from .client import Client, ClinicalData, FacialZone, SkinType
from .product import DEFAULT_MIN_STOCK, DEFAULT_UNIT, Product
from .transaction import Transaction, TransactionType

__all__ = [
    "Appointment",
    "Client",
    "ClinicalData",
    "Product",
    "Transaction",
    "AppointmentStatus",
    "FacialZone",
    "SkinType",
    "TransactionType",
    "DEFAULT_MIN_STOCK",
    "DEFAULT_UNIT",
]
