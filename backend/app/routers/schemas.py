from typing import Any

from pydantic import BaseModel, ConfigDict


class ReservationCreateIn(BaseModel):
    # Field rules are enforced by ReservationValidator, not here.
    model_config = ConfigDict(extra="allow")

    date: Any = None  # "2017/06/10"
    time: Any = None  # "06:02 AM"
    party: Any = None
    name: Any = None
    email: Any = None
    phone: Any = None
    notes: Any = None


class ReservationCreateOut(BaseModel):
    id: int
