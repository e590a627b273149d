from uuid import uuid4


def new_entity_id() -> str:
    """Return a fresh opaque identifier for a stored entity."""
    return uuid4().hex
