from .entity_store import CollectionName, EntityStore, StoreSnapshot

__all__ = ["CollectionName", "EntityStore", "StoreSnapshot"]
