"""
Client entity with its embedded clinical (skin diagnostic) record.

Uses Pydantic for validation and serialization.
"""

import math
from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from spa_admin.utils.datetime_helpers import parse_optional_date

from .base import ENTITY_MODEL_CONFIG, Entity

LEVEL_MIN = 0
LEVEL_MAX = 100


class SkinType(StrEnum):
    """Skin type as recorded on the clinical sheet."""

    DRY = "Seca"
    COMBINATION = "Mixta"
    OILY = "Grasa"
    NORMAL = "Normal"
    SENSITIVE = "Sensible"

    @classmethod
    def _missing_(cls, value: object) -> "SkinType | None":
        # Accept member names as well ("dry", "Oily").
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class FacialZone(StrEnum):
    """Zones of the face map that can be marked as treated."""

    FOREHEAD = "forehead"
    EYES = "eyes"
    NOSE = "nose"
    CHEEKS = "cheeks"
    CHIN = "chin"
    NECK = "neck"

    @property
    def label(self) -> str:
        return _ZONE_LABELS[self]


_ZONE_LABELS = {
    FacialZone.FOREHEAD: "Frente",
    FacialZone.EYES: "Contorno Ojos",
    FacialZone.NOSE: "Nariz / Zona T",
    FacialZone.CHEEKS: "Mejillas",
    FacialZone.CHIN: "Mentón",
    FacialZone.NECK: "Cuello",
}


class ClinicalData(BaseModel):
    """
    Structured skin diagnostic for a client.

    Attributes:
        skin_type: Skin type category.
        hydration_level: Hydration gauge, clamped to 0-100.
        oil_level: Oil/sebum gauge, clamped to 0-100.
        sensitivity_level: Sensitivity gauge, clamped to 0-100.
        treated_areas: Facial zones under treatment, no duplicates.
        allergies: Free-text allergy notes.
    """

    model_config = ENTITY_MODEL_CONFIG

    skin_type: SkinType = SkinType.NORMAL
    hydration_level: int = 50
    oil_level: int = 50
    sensitivity_level: int = 20
    treated_areas: frozenset[FacialZone] = frozenset()
    allergies: str = ""

    @field_validator("skin_type", mode="before")
    @classmethod
    def default_skin_type(cls, v: Any) -> Any:
        if v is None or v == "":
            return SkinType.NORMAL
        if isinstance(v, str):
            return SkinType(v.strip())
        return v

    @field_validator(
        "hydration_level", "oil_level", "sensitivity_level", mode="before"
    )
    @classmethod
    def clamp_level(cls, v: Any, info: ValidationInfo) -> int:
        """Clamp gauge values into range instead of rejecting them."""
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        try:
            level = float(v)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid level: {v!r}") from e
        if math.isnan(level):
            raise ValueError(f"Invalid level: {v!r}")
        # Clamp before rounding; round() cannot take an infinity.
        return round(max(LEVEL_MIN, min(LEVEL_MAX, level)))

    @field_validator("treated_areas", mode="before")
    @classmethod
    def normalize_areas(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset([v])
        return v

    @field_validator("allergies", mode="before")
    @classmethod
    def default_allergies(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_serializer("treated_areas")
    def serialize_areas(self, areas: frozenset[FacialZone]) -> list[str]:
        return [zone.value for zone in self.sorted_areas(areas)]

    @staticmethod
    def sorted_areas(areas: frozenset[FacialZone]) -> list[FacialZone]:
        """Areas in face-map order."""
        return [zone for zone in FacialZone if zone in areas]

    def with_changes(self, **changes: Any) -> "ClinicalData":
        """
        Return a re-validated copy with the given fields replaced.

        Values go through the same validators as construction, so levels
        are clamped here too.

        Raises:
            ValueError: If a change names an unknown field.
        """
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(
                f"Unknown clinical fields: {', '.join(sorted(unknown))}"
            )
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def toggled(self, zone: FacialZone | str) -> "ClinicalData":
        """Return a copy with ``zone`` added if absent, removed if present."""
        zone = FacialZone(zone)
        return self.with_changes(treated_areas=self.treated_areas ^ {zone})


class Client(Entity):
    """
    Client domain entity.

    Attributes:
        name: Full name.
        phone: Contact phone.
        email: Contact email, may be empty.
        birth_date: Date of birth, None when unknown.
        is_vip: Loyalty flag.
        history: Free-text evolution notes.
        clinical_data: Embedded skin diagnostic, always complete.
        last_visit: Date of the last visit.
    """

    name: str
    phone: str
    email: str = ""
    birth_date: date | None = None
    is_vip: bool = False
    history: str = ""
    clinical_data: ClinicalData = Field(default_factory=ClinicalData)
    last_visit: date | None = Field(default_factory=date.today)

    @field_validator("birth_date", "last_visit", mode="before")
    @classmethod
    def blank_date_is_none(cls, v: Any) -> date | None:
        return parse_optional_date(v)

    @field_validator("email", "history", mode="before")
    @classmethod
    def blank_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("clinical_data", mode="before")
    @classmethod
    def complete_clinical_data(cls, v: Any) -> Any:
        """Legacy records without clinical data get the default sheet."""
        if v is None:
            return ClinicalData()
        return v

    def has_birthday_on(self, day: date) -> bool:
        """True when month and day match ``day``; the year is ignored."""
        if self.birth_date is None:
            return False
        return (self.birth_date.month, self.birth_date.day) == (
            day.month,
            day.day,
        )

    def matches(self, term: str) -> bool:
        """Case-insensitive search over name and email."""
        needle = term.strip().lower()
        return needle in self.name.lower() or needle in self.email.lower()
