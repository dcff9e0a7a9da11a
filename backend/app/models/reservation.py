from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

DATE_FORMAT = "%Y/%m/%d"
TIME_FORMAT = "%I:%M %p"


@dataclass(frozen=True)
class Reservation:
    """A single booking request as supplied by the caller."""

    # extras may hold unhashable JSON values
    __hash__ = None

    date: str
    time: str
    party: int
    name: str
    email: str
    phone: str | None = None
    notes: str | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Reservation":
        known = {name: data[name] for name in _FIELDS if name in data}
        extras = {key: value for key, value in data.items() if key not in _FIELDS}
        return cls(**known, extras=extras)


_FIELDS = ("date", "time", "party", "name", "email", "phone", "notes")


class ReservationRules(BaseModel):
    """Field rules every reservation must satisfy before it is stored.

    Checked in strict mode: the record is stored exactly as supplied, so
    the rules see the same values the database will.
    """

    model_config = ConfigDict(strict=True, from_attributes=True, extra="ignore")

    # "2017/06/10"
    date: str
    # "06:02 AM"
    time: str
    party: int = Field(ge=1)
    name: str
    email: EmailStr
    phone: str | None = None
    notes: str | None = None

    @field_validator("date")
    @classmethod
    def _calendar_date(cls, value: str) -> str:
        try:
            datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            raise ValueError("date must be a calendar date formatted YYYY/MM/DD") from None
        return value

    @field_validator("time")
    @classmethod
    def _clock_time(cls, value: str) -> str:
        try:
            datetime.strptime(value, TIME_FORMAT)
        except ValueError:
            raise ValueError("time must be formatted hh:mm AM or hh:mm PM") from None
        return value

    @field_validator("name")
    @classmethod
    def _non_blank_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _unpadded_email(cls, value: Any) -> Any:
        # EmailStr strips surrounding whitespace before checking the address
        if isinstance(value, str) and value != value.strip():
            raise ValueError("email must not have surrounding whitespace")
        return value
