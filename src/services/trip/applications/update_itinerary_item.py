from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.itinerary_item_details import resolve_item_date
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.trip.domain.factory import ItineraryItemFactory
from services.trip.domain.factory.itinerary_item_factory import ItineraryItemDetails
from services.trip.domain.value_object import ItemId


class UpdateItineraryItemService:
    """旅程アイテム更新ユースケース（EDITOR 以上）"""

    def __init__(
        self, executor: TripCommandExecutor, factory: ItineraryItemFactory
    ) -> None:
        self._executor = executor
        self._factory = factory

    def update(
        self,
        trip_id: TripId,
        actor_id: UserId,
        item_id: ItemId,
        item_details: ItineraryItemDetails,
        day_number: int | None = None,
    ) -> AccessResult[Trip]:
        def mutate(trip: Trip) -> Trip:
            details = resolve_item_date(trip, item_details, day_number)
            return trip.update_itinerary_item(self._factory.create(details, item_id=item_id))

        return self._executor.execute(
            trip_id, actor_id, TripRole.EDITOR, mutate, action="update_itinerary_item"
        )
