from uuid import UUID

import pytest

from services.shared.domain import TripId, UserId
from services.trip.domain.value_object import InviteId, ItemId


class TestUuidIdentifier:
    @pytest.mark.parametrize("id_type", [TripId, UserId, InviteId, ItemId])
    def test_string_round_trip(self, id_type):
        identifier = id_type.generate()
        assert id_type.from_string(str(identifier)) == identifier

    def test_generate_returns_distinct_values(self):
        assert TripId.generate() != TripId.generate()

    @pytest.mark.parametrize("value", ["", "trip-123", "not-a-uuid", None])
    def test_from_string_returns_none_for_malformed_input(self, value):
        assert TripId.from_string(value) is None

    def test_same_value_different_type_are_not_equal(self):
        value = UUID("8c5e1c1e-3e4b-4a8e-9d7e-0d6f1e2a3b4c")
        assert TripId(value) != UserId(value)

    def test_is_hashable(self):
        user_id = UserId.generate()
        assert {user_id: "x"}[UserId(user_id.value)] == "x"
