from .store import APPOINTMENT_INCOME_AMOUNT, SpaStore

__all__ = ["APPOINTMENT_INCOME_AMOUNT", "SpaStore"]
