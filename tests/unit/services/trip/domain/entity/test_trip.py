from datetime import date

import pytest

from services.shared.domain import Invalid, IsoDateTime, UserId, Valid
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from services.trip.domain.entity import Membership, Trip
from services.trip.domain.enum import TripRole, TripStatus, TripVisibility
from services.trip.domain.value_object import ItemId


class TestTripInvariants:
    def test_build_valid_trip(self, create_trip, owner_id):
        trip = create_trip()

        assert trip.name == "Kyoto weekend"
        assert trip.day_count == 2
        assert trip.role_of(owner_id) is TripRole.OWNER
        assert trip.owner_ids() == (owner_id,)

    def test_single_day_trip(self, create_trip):
        trip = create_trip(start_date=date(2026, 1, 2), end_date=date(2026, 1, 2))
        assert trip.day_count == 1

    def test_end_before_start_raises_error(self, create_trip):
        with pytest.raises(
            BusinessRuleViolationException, match="End date cannot be before start date"
        ):
            create_trip(start_date=date(2026, 1, 3), end_date=date(2026, 1, 2))

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises_error(self, create_trip, name):
        with pytest.raises(BusinessRuleViolationException, match="Trip name cannot be blank"):
            create_trip(name=name)

    def test_memberships_cannot_be_empty(self, trip_id):
        with pytest.raises(BusinessRuleViolationException, match="at least one member"):
            Trip.build(
                id=trip_id,
                name="Empty",
                start_date=date(2026, 1, 2),
                end_date=date(2026, 1, 3),
                visibility=TripVisibility.PRIVATE,
                memberships=[],
                invites=[],
                items=[],
                created_at=IsoDateTime.now(),
            )

    def test_requires_an_owner(self, trip_id):
        with pytest.raises(BusinessRuleViolationException, match="at least one owner"):
            Trip.build(
                id=trip_id,
                name="No owner",
                start_date=date(2026, 1, 2),
                end_date=date(2026, 1, 3),
                visibility=TripVisibility.PRIVATE,
                memberships=[Membership(user_id=UserId.generate(), role=TripRole.EDITOR)],
                invites=[],
                items=[],
                created_at=IsoDateTime.now(),
            )

    def test_item_outside_range_raises_error(self, create_trip, create_item):
        with pytest.raises(
            BusinessRuleViolationException,
            match=r"within trip date range \(2026-01-02 - 2026-01-03\)",
        ):
            create_trip(items=[create_item(item_date=date(2026, 1, 4))])


class TestTripValidate:
    def _state(self, trip_id, owner_id, **overrides):
        state = {
            "id": trip_id,
            "name": "Kyoto weekend",
            "start_date": date(2026, 1, 2),
            "end_date": date(2026, 1, 3),
            "visibility": TripVisibility.PRIVATE,
            "memberships": [Membership(user_id=owner_id, role=TripRole.OWNER)],
            "invites": [],
            "items": [],
            "created_at": IsoDateTime.now(),
        }
        state.update(overrides)
        return state

    def test_valid_state_returns_trip(self, trip_id, owner_id):
        result = Trip.validate(**self._state(trip_id, owner_id))

        assert isinstance(result, Valid)
        assert result.value.id == trip_id

    def test_violation_returns_reason_without_trip(self, trip_id, owner_id):
        result = Trip.validate(**self._state(trip_id, owner_id, end_date=date(2026, 1, 1)))

        assert result == Invalid("End date cannot be before start date")

    def test_first_violation_is_reported(self, trip_id, owner_id):
        result = Trip.validate(**self._state(trip_id, owner_id, name="", memberships=[]))

        assert result == Invalid("Trip name cannot be blank")


class TestItineraryItems:
    def test_add_item_returns_new_trip(self, create_trip, create_item):
        trip = create_trip()
        item = create_item(item_date=date(2026, 1, 2))

        updated = trip.add_itinerary_item(item)

        assert updated.items == (item,)
        assert trip.items == ()
        assert updated.version == trip.version

    def test_add_unscheduled_item(self, create_trip, create_item):
        updated = create_trip().add_itinerary_item(create_item(item_date=None))
        assert updated.places_to_visit_items() == list(updated.items)

    def test_add_item_with_blank_place_name_raises_error(self, create_trip, create_item):
        with pytest.raises(BusinessRuleViolationException, match="Place name cannot be blank"):
            create_trip().add_itinerary_item(create_item(place_name="  "))

    def test_add_item_out_of_range_is_rejected_not_clamped(self, create_trip, create_item):
        trip = create_trip()
        with pytest.raises(BusinessRuleViolationException):
            trip.add_itinerary_item(create_item(item_date=date(2026, 1, 1)))
        assert trip.items == ()

    @pytest.mark.parametrize(
        "latitude, longitude, message",
        [
            (90.5, 0.0, "Latitude must be between -90 and 90"),
            (0.0, -180.5, "Longitude must be between -180 and 180"),
        ],
    )
    def test_coordinates_out_of_range(self, create_trip, create_item, latitude, longitude, message):
        with pytest.raises(BusinessRuleViolationException, match=message):
            create_trip().add_itinerary_item(
                create_item(latitude=latitude, longitude=longitude)
            )

    def test_remove_item(self, create_trip, create_item):
        item = create_item()
        trip = create_trip(items=[item])

        assert trip.remove_itinerary_item(item.id).items == ()

    def test_second_removal_fails(self, create_trip, create_item):
        item = create_item()
        removed = create_trip(items=[item]).remove_itinerary_item(item.id)

        with pytest.raises(ResourceNotFoundException, match="Itinerary item not found"):
            removed.remove_itinerary_item(item.id)

    def test_update_item_keeps_position(self, create_trip, create_item):
        first, second = create_item(place_name="A"), create_item(place_name="B")
        trip = create_trip(items=[first, second])
        renamed = type(first)(id=first.id, place_name="A2")

        updated = trip.update_itinerary_item(renamed)

        assert [i.place_name for i in updated.items] == ["A2", "B"]

    def test_update_unknown_item_raises_error(self, create_trip, create_item):
        with pytest.raises(ResourceNotFoundException):
            create_trip().update_itinerary_item(create_item())

    def test_move_item_before_another(self, create_trip, create_item):
        a, b, c = (create_item(place_name=name) for name in "ABC")
        trip = create_trip(items=[a, b, c])

        moved = trip.move_itinerary_item(c.id, date(2026, 1, 3), before_item_id=a.id)

        assert [i.place_name for i in moved.items] == ["C", "A", "B"]
        assert moved.find_item(c.id).date == date(2026, 1, 3)

    def test_move_item_to_places_to_visit(self, create_trip, create_item):
        item = create_item(item_date=date(2026, 1, 2))
        moved = create_trip(items=[item]).move_itinerary_item(item.id, None)
        assert moved.find_item(item.id).is_scheduled is False

    def test_move_before_unknown_item_raises_error(self, create_trip, create_item):
        item = create_item()
        with pytest.raises(ResourceNotFoundException):
            create_trip(items=[item]).move_itinerary_item(item.id, None, ItemId.generate())

    def test_date_for_day(self, create_trip):
        trip = create_trip()
        assert trip.date_for_day(1) == date(2026, 1, 2)
        assert trip.date_for_day(2) == date(2026, 1, 3)

    @pytest.mark.parametrize("day_number", [0, 3])
    def test_date_for_day_out_of_range(self, create_trip, day_number):
        with pytest.raises(BusinessRuleViolationException, match="between 1 and 2"):
            create_trip().date_for_day(day_number)


class TestTripDetails:
    def test_update_details(self, create_trip):
        updated = create_trip().update_details(name="  Osaka  ", end_date=date(2026, 1, 5))
        assert updated.name == "Osaka"
        assert updated.day_count == 4

    def test_shrinking_range_below_dated_item_raises_error(self, create_trip, create_item):
        trip = create_trip(items=[create_item(item_date=date(2026, 1, 3))])
        with pytest.raises(BusinessRuleViolationException):
            trip.update_details(end_date=date(2026, 1, 2))

    def test_change_visibility(self, create_trip):
        updated = create_trip().change_visibility(TripVisibility.PUBLIC)
        assert updated.visibility is TripVisibility.PUBLIC

    def test_with_version(self, create_trip):
        assert create_trip(version=1).with_version(2).version == 2


class TestTripStatus:
    def test_new_trip_is_active(self, create_trip):
        assert create_trip().status is TripStatus.ACTIVE

    def test_archive_and_restore(self, create_trip):
        """アーカイブと復元は新しい集約を返し、元の集約は変わらない"""

        # Arrange
        trip = create_trip()

        # Act
        archived = trip.archive()
        restored = archived.restore()

        # Assert
        assert archived.is_archived
        assert restored.status is TripStatus.ACTIVE
        assert trip.status is TripStatus.ACTIVE

    def test_archive_twice_returns_same_trip(self, create_trip):
        archived = create_trip(status=TripStatus.ARCHIVED)

        assert archived.archive() is archived

    def test_restore_active_trip_returns_same_trip(self, create_trip):
        trip = create_trip()

        assert trip.restore() is trip

    def test_snapshot_includes_status(self, create_trip):
        snapshot = create_trip(status=TripStatus.ARCHIVED).snapshot()
        assert snapshot["status"] is TripStatus.ARCHIVED
