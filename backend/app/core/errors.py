class ReservationError(Exception):
    """Base class for reservation pipeline failures."""


class InvalidReservationInput(ReservationError):
    """No reservation was supplied."""

    def __init__(self, message: str = "A reservation is required") -> None:
        super().__init__(message)


class ReservationValidationError(ReservationError):
    """The reservation broke one or more field rules."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        fields = ", ".join(self.fields) or "reservation"
        super().__init__(f"Invalid reservation: {fields}")

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(error["field"] for error in self.errors)
