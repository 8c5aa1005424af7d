from datetime import date

from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.trip.domain.value_object import ItemId


class MoveItineraryItemService:
    """旅程アイテム移動ユースケース（EDITOR 以上）"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def move(
        self,
        trip_id: TripId,
        actor_id: UserId,
        item_id: ItemId,
        target_date: date | None,
        before_item_id: ItemId | None = None,
    ) -> AccessResult[Trip]:
        """target_date=None で「行きたい場所」へ戻す"""
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.EDITOR,
            lambda trip: trip.move_itinerary_item(item_id, target_date, before_item_id),
            action="move_itinerary_item",
        )
