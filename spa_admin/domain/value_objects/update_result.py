from enum import StrEnum


class UpdateResult(StrEnum):
    """Outcome of an update-by-id command."""

    APPLIED = "applied"
    NOT_FOUND_NOOP = "not_found_noop"

    @property
    def applied(self) -> bool:
        return self is UpdateResult.APPLIED
