from .storage_item import StorageItemModel

__all__ = [
    "StorageItemModel",
]
