from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.trip.domain.value_object import ItemId


class RemoveItineraryItemService:
    """旅程アイテム削除ユースケース（EDITOR 以上）"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def remove(self, trip_id: TripId, actor_id: UserId, item_id: ItemId) -> AccessResult[Trip]:
        """存在しないアイテム ID は ResourceNotFoundException（2回目の削除も同様）"""
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.EDITOR,
            lambda trip: trip.remove_itinerary_item(item_id),
            action="remove_itinerary_item",
        )
