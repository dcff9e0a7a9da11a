import json
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


INSERT_RESERVATION = text(
    """
    INSERT INTO reservation (
      reservation_date, reservation_time, party_size,
      name, email, phone, notes, extras
    ) VALUES (
      :date, :time, :party,
      :name, :email, :phone, :notes, CAST(:extras AS jsonb)
    )
    RETURNING id
    """
)


def reservation_params(record: Any) -> dict[str, Any]:
    """Map a Reservation onto the bind parameters of INSERT_RESERVATION."""
    extras = dict(getattr(record, "extras", None) or {})
    return {
        "date": record.date,
        "time": record.time,
        "party": record.party,
        "name": record.name,
        "email": record.email,
        "phone": record.phone,
        "notes": record.notes,
        "extras": json.dumps(extras),
    }


class SqlReservationStore:
    """Insert reservations into the ``reservation`` table."""

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]) -> None:
        self._sessionmaker = sessionmaker

    async def insert(self, record: Any) -> list[int]:
        async with self._sessionmaker() as session:
            async with session.begin():
                result = await session.execute(INSERT_RESERVATION, reservation_params(record))
                return list(result.scalars())
