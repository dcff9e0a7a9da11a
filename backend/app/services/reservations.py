from typing import Any, Protocol


class Validator(Protocol):
    async def validate(self, reservation: Any) -> Any:
        ...


class Repository(Protocol):
    async def save(self, record: Any) -> list[int]:
        ...


class ReservationService:
    """Validate a reservation, then persist it."""

    def __init__(self, validator: Validator, repository: Repository) -> None:
        self._validator = validator
        self._repository = repository

    async def create(self, reservation: Any) -> int:
        """Return the id of the newly stored reservation.

        Validation and persistence errors propagate unchanged; nothing is
        saved when validation fails.
        """
        validated = await self._validator.validate(reservation)
        ids = await self._repository.save(validated)
        return ids[0]
