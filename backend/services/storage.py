"""LocalStorage: a named-slot key/value store backed by the app database."""
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.storage import StorageSlot


class LocalStorage:
    """Durable string slots, in the spirit of a browser's ``localStorage``.

    Every write commits before returning, so a value handed to ``set_item``
    survives a crash immediately after the call.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_item(self, key: str) -> str | None:
        async with self._session_factory() as db:
            slot = await db.get(StorageSlot, key)
            return slot.value if slot else None

    async def set_item(self, key: str, value: str) -> None:
        async with self._session_factory() as db:
            slot = await db.get(StorageSlot, key)
            if slot is None:
                db.add(StorageSlot(key=key, value=value))
            else:
                slot.value = value
            await db.commit()

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as db:
            slot = await db.get(StorageSlot, key)
            if slot is not None:
                await db.delete(slot)
                await db.commit()
