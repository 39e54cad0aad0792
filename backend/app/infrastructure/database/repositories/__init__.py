from .storage_item_repository import SQLAlchemyKeyValueStore

__all__ = [
    "SQLAlchemyKeyValueStore",
]
