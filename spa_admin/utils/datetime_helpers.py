from datetime import date, datetime


def get_today() -> date:
    return date.today()


def parse_optional_date(value: str | date | datetime | None) -> date | None:
    """
    Parse a calendar date, treating blanks as missing.

    Accepts ``YYYY-MM-DD`` strings, ``date`` and ``datetime`` objects.

    Raises:
        ValueError: If a non-empty string is not an ISO date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    cleaned = str(value).strip()
    if not cleaned:
        return None
    return date.fromisoformat(cleaned[:10])
