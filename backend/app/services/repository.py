import logging
from typing import Any, Protocol


logger = logging.getLogger(__name__)


class ReservationStore(Protocol):
    async def insert(self, record: Any) -> list[int]:
        ...


class ReservationRepository:
    """Thin persistence wrapper over a ReservationStore."""

    def __init__(self, store: ReservationStore) -> None:
        self._store = store

    async def save(self, record: Any) -> list[int]:
        """Insert an already validated record and return the generated ids."""
        logger.debug("Saving %s", type(record).__name__)
        return await self._store.insert(record)

    def fetch(self) -> None:
        """Read path placeholder; does not query the store."""
        return None
