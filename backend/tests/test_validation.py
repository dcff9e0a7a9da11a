import pytest

from backend.app.core.errors import InvalidReservationInput, ReservationValidationError
from backend.app.models.reservation import Reservation
from backend.app.services.validation import ReservationValidator


pytestmark = pytest.mark.asyncio(loop_scope="module")


async def test_resolves_with_no_optional_fields(make_reservation):
    reservation = make_reservation()

    result = await ReservationValidator().validate(reservation)

    assert result is reservation
    assert result == make_reservation()


async def test_resolves_with_optional_and_extra_fields(make_reservation):
    reservation = make_reservation(phone="+1-555-0100", notes="window seat", occasion="birthday")

    result = await ReservationValidator().validate(reservation)

    assert result is reservation
    assert result.extras == {"occasion": "birthday"}


async def test_rejects_invalid_email(make_reservation):
    reservation = make_reservation(email="username")

    with pytest.raises(ReservationValidationError) as exc_info:
        await ReservationValidator().validate(reservation)

    assert isinstance(exc_info.value, Exception)
    assert exc_info.value.fields == ("email",)
    assert reservation.email == "username"


async def test_rejects_empty_input():
    with pytest.raises(InvalidReservationInput, match="A reservation is required"):
        await ReservationValidator().validate(None)


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"name": ""}, "name"),
        ({"name": "   "}, "name"),
        ({"name": None}, "name"),
        ({"date": "2017/02/30"}, "date"),
        ({"date": "10-06-2017"}, "date"),
        ({"time": "25:61 AM"}, "time"),
        ({"time": "06:02"}, "time"),
        ({"party": 0}, "party"),
        ({"party": -2}, "party"),
        ({"party": "4"}, "party"),
        ({"party": 4.0}, "party"),
        ({"party": True}, "party"),
        ({"date": " 2017/06/10 "}, "date"),
        ({"email": "  usename@example.com "}, "email"),
        ({"phone": 5550100}, "phone"),
    ],
)
async def test_rejects_broken_required_field(make_reservation, overrides, field):
    with pytest.raises(ReservationValidationError) as exc_info:
        await ReservationValidator().validate(make_reservation(**overrides))

    assert exc_info.value.fields == (field,)


async def test_reports_every_broken_field(make_reservation):
    with pytest.raises(ReservationValidationError) as exc_info:
        await ReservationValidator().validate(make_reservation(email="nope", party=0))

    assert set(exc_info.value.fields) == {"email", "party"}
    assert exc_info.value.__cause__ is not None


async def test_accepts_plain_mapping():
    data = {
        "date": "2017/06/10",
        "time": "06:02 PM",
        "party": 2,
        "name": "Ada",
        "email": "ada@example.com",
    }

    assert await ReservationValidator().validate(data) is data


async def test_missing_fields_in_mapping_are_reported():
    with pytest.raises(ReservationValidationError) as exc_info:
        await ReservationValidator().validate({"foo": "bar"})

    assert set(exc_info.value.fields) == {"date", "time", "party", "name", "email"}


async def test_reservation_is_immutable(make_reservation):
    reservation = make_reservation()

    with pytest.raises(AttributeError):
        reservation.email = "other@example.com"  # type: ignore[misc]
    with pytest.raises(TypeError):
        reservation.extras["foo"] = "bar"  # type: ignore[index]

    assert isinstance(reservation, Reservation)


async def test_reservation_is_not_hashable(make_reservation):
    with pytest.raises(TypeError):
        hash(make_reservation(tags=["vegan"]))
