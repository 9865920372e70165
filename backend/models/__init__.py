from models.storage import StorageSlot

__all__ = ["StorageSlot"]
