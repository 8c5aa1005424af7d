from datetime import date, timedelta

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from services.shared.domain import IsoDateTime, TripId, UserId
from services.trip.domain.entity import ItineraryItem, Membership, Trip
from services.trip.domain.enum import TripRole, TripVisibility
from services.trip.domain.service import generated_days, places_to_visit_items
from services.trip.domain.value_object import ItemId


class TestGeneratedDays:
    """generated_days / places_to_visit_items のテスト"""

    def test_two_day_trip_with_scheduled_and_unscheduled_items(
        self, create_trip, create_item
    ):
        """日付付きアイテムは該当日に、日付未定のアイテムは行きたい場所に入る"""

        # Arrange
        temple = create_item(place_name="Kinkaku-ji", item_date=date(2026, 1, 2))
        market = create_item(place_name="Nishiki Market", item_date=None)
        trip = create_trip(items=[temple, market])

        # Act
        days = generated_days(trip)

        # Assert
        assert [(d.day_number, d.date) for d in days] == [
            (1, date(2026, 1, 2)),
            (2, date(2026, 1, 3)),
        ]
        assert days[0].items == (temple,)
        assert days[1].items == ()
        assert places_to_visit_items(trip) == [market]

    def test_items_keep_list_order_within_a_day(self, create_trip, create_item):
        """同じ日のアイテムは集約に保存された並び順のまま"""

        # Arrange
        first = create_item(place_name="Breakfast", item_date=date(2026, 1, 3))
        second = create_item(place_name="Museum", item_date=date(2026, 1, 3))
        trip = create_trip(items=[first, second])

        # Act
        days = generated_days(trip)

        # Assert
        assert days[1].items == (first, second)

    def test_trip_methods_delegate(self, create_trip, create_item):
        trip = create_trip(items=[create_item(item_date=None)])
        assert trip.generated_days() == generated_days(trip)
        assert trip.places_to_visit_items() == places_to_visit_items(trip)


@st.composite
def trips_with_items(draw):
    start = draw(st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 1, 1)))
    length = draw(st.integers(min_value=0, max_value=30))
    end = start + timedelta(days=length)
    offsets = draw(
        st.lists(st.one_of(st.none(), st.integers(min_value=0, max_value=length)), max_size=20)
    )
    items = [
        ItineraryItem(
            id=ItemId.generate(),
            place_name=f"Place {n}",
            date=None if offset is None else start + timedelta(days=offset),
        )
        for n, offset in enumerate(offsets)
    ]
    return Trip.build(
        id=TripId.generate(),
        name="Generated",
        start_date=start,
        end_date=end,
        visibility=TripVisibility.PRIVATE,
        memberships=[Membership(user_id=UserId.generate(), role=TripRole.OWNER)],
        invites=[],
        items=items,
        created_at=IsoDateTime.now(),
    )


class TestGeneratedDaysProperties:
    """任意の旅行に対して成り立つ性質のテスト"""

    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    @given(trip=trips_with_items())
    def test_one_day_per_date_in_range(self, trip):
        """開始日から終了日まで1日1件、日番号は1から連番"""

        # Act
        days = generated_days(trip)

        # Assert
        assert len(days) == (trip.end_date - trip.start_date).days + 1
        assert [d.day_number for d in days] == list(range(1, len(days) + 1))
        assert days[0].date == trip.start_date
        assert days[-1].date == trip.end_date

    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    @given(trip=trips_with_items())
    def test_items_are_partitioned(self, trip):
        """すべてのアイテムがいずれかの日か行きたい場所のどちらか一方に入る"""

        # Act
        days = generated_days(trip)
        unscheduled = places_to_visit_items(trip)

        # Assert
        scheduled = [item for day in days for item in day.items]
        assert sorted(i.place_name for i in scheduled + unscheduled) == sorted(
            i.place_name for i in trip.items
        )
        assert all(item.date == day.date for day in days for item in day.items)
        assert all(item.date is None for item in unscheduled)
