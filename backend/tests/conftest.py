from unittest.mock import AsyncMock

import pytest

from backend.app.models.reservation import Reservation


@pytest.fixture
def make_reservation():
    """Build a Reservation, overriding any field of a valid booking."""

    def _factory(**overrides) -> Reservation:
        data = {
            "date": "2017/06/10",
            "time": "06:02 AM",
            "party": 4,
            "name": "Family",
            "email": "usename@example.com",
        }
        data.update(overrides)
        return Reservation.from_mapping(data)

    return _factory


@pytest.fixture
def mock_store():
    store = AsyncMock()
    store.insert.return_value = [1]
    return store
