from datetime import date
from decimal import Decimal

import pytest

from services.shared.domain import Currency, EmailAddress, IsoDateTime, Money, UserId
from services.shared.utils import to_snapshot
from services.trip.domain.entity import Membership
from services.trip.domain.enum import TripRole


class TestToSnapshot:
    def test_scalars_pass_through(self):
        assert to_snapshot(None) is None
        assert to_snapshot(True) is True
        assert to_snapshot(3) == 3
        assert to_snapshot("x") == "x"

    def test_value_objects_collapse_to_scalars(self):
        user_id = UserId.generate()
        assert to_snapshot(user_id) == str(user_id)
        assert to_snapshot(EmailAddress("A@example.com")) == "a@example.com"
        assert to_snapshot(Currency("usd")) == "USD"
        assert to_snapshot(Decimal("1.50")) == "1.50"
        assert to_snapshot(TripRole.EDITOR) == "EDITOR"

    def test_dates_become_iso_strings(self):
        assert to_snapshot(date(2026, 1, 2)) == "2026-01-02"
        assert (
            to_snapshot(IsoDateTime.from_string("2026-01-02T03:04:05Z"))
            == "2026-01-02T03:04:05+00:00"
        )

    def test_dataclass_becomes_mapping(self):
        user_id = UserId.generate()
        membership = Membership(user_id=user_id, role=TripRole.VIEWER)
        assert to_snapshot(membership) == {"user_id": str(user_id), "role": "VIEWER"}

    def test_nested_collections(self):
        money = Money.of("12.00", "JPY")
        assert to_snapshot({"items": (money,)}) == {
            "items": [{"amount": "12.00", "currency": "JPY"}]
        }

    def test_aggregate_uses_its_snapshot(self, create_trip, owner_id):
        snapshot = to_snapshot(create_trip())
        assert snapshot["name"] == "Kyoto weekend"
        assert snapshot["start_date"] == "2026-01-02"
        assert snapshot["memberships"] == [{"user_id": str(owner_id), "role": "OWNER"}]

    def test_unsupported_type_raises_error(self):
        with pytest.raises(TypeError):
            to_snapshot(object())
