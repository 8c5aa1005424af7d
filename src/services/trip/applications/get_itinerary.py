from dataclasses import dataclass

from services.shared.domain import AccessResult, Forbidden, NotFound, Success, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import ItineraryItem, Trip
from services.trip.domain.service import ItineraryDay


@dataclass(frozen=True)
class Itinerary:
    """旅程ビュー（保存しない派生データ）"""

    trip: Trip
    days: list[ItineraryDay]
    places_to_visit: list[ItineraryItem]

    @classmethod
    def of(cls, trip: Trip) -> "Itinerary":
        return cls(
            trip=trip,
            days=trip.generated_days(),
            places_to_visit=trip.places_to_visit_items(),
        )


class GetItineraryService:
    """旅程取得ユースケース"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def get(self, trip_id: TripId, actor_id: UserId | None) -> AccessResult[Itinerary]:
        result = self._executor.load(trip_id, actor_id, required_role=None)
        match result:
            case Success(value=trip):
                return Success(Itinerary.of(trip))
            case NotFound() | Forbidden():
                return result
