from typing import Any

from pydantic import ValidationError

from backend.app.core.errors import InvalidReservationInput, ReservationValidationError
from backend.app.models.reservation import ReservationRules


def _field_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "reservation",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


class ReservationValidator:
    """Check a reservation against ReservationRules without altering it."""

    def __init__(self, rules: type[ReservationRules] = ReservationRules) -> None:
        self._rules = rules

    async def validate(self, reservation: Any) -> Any:
        """Return ``reservation`` itself once every rule passes.

        Raises InvalidReservationInput when nothing was supplied and
        ReservationValidationError when a field breaks a rule.
        """
        if reservation is None:
            raise InvalidReservationInput()

        try:
            self._rules.model_validate(reservation)
        except ValidationError as exc:
            raise ReservationValidationError(_field_errors(exc)) from exc

        return reservation
