from datetime import date, datetime
from enum import StrEnum

from pydantic import Field, field_validator

from .base import Entity


class AppointmentStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AppointmentStatus.PENDING: "Pendiente",
    AppointmentStatus.CONFIRMED: "Confirmada",
    AppointmentStatus.COMPLETED: "Completada",
    AppointmentStatus.CANCELLED: "Cancelada",
}


class Appointment(Entity):
    """
    Scheduled service for a client.

    ``client_name`` is copied when the appointment is created and is not
    refreshed if the client is renamed later.
    """

    client_id: str
    client_name: str
    appointment_date: date = Field(alias="date")
    time: str = Field(description="Start time, HH:MM 24h")
    service: str
    status: AppointmentStatus = AppointmentStatus.PENDING

    @field_validator("time", mode="before")
    @classmethod
    def validate_time(cls, v: str) -> str:
        try:
            parsed = datetime.strptime(str(v).strip(), "%H:%M")
        except ValueError as e:
            raise ValueError(f"Invalid time, expected HH:MM: {v!r}") from e
        return parsed.strftime("%H:%M")

    def available_actions(self) -> tuple[AppointmentStatus, ...]:
        """
        Status changes the agenda offers for this appointment.

        Completed and cancelled can still be swapped for each other.
        """
        actions = []
        if self.status is not AppointmentStatus.COMPLETED:
            actions.append(AppointmentStatus.COMPLETED)
        if self.status is not AppointmentStatus.CANCELLED:
            actions.append(AppointmentStatus.CANCELLED)
        return tuple(actions)
