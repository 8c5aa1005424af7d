from enum import Enum

from services.shared.domain import UserId
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripStatus
from services.trip.domain.repository import TripRepository


class TripListStatusFilter(str, Enum):
    """一覧の状態フィルター（既定は ACTIVE）"""

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    ALL = "ALL"

    def matches(self, trip: Trip) -> bool:
        if self is TripListStatusFilter.ALL:
            return True
        return trip.status is TripStatus(self.value)


class ListTripsService:
    """旅行一覧ユースケース"""

    def __init__(self, repository: TripRepository) -> None:
        self._repository = repository

    def list(
        self,
        actor_id: UserId,
        status_filter: TripListStatusFilter = TripListStatusFilter.ACTIVE,
    ) -> list[Trip]:
        """メンバーになっている旅行を作成日時の新しい順に返す"""
        trips = self._repository.find_by_user_id(actor_id)
        return sorted(
            (
                trip
                for trip in trips
                if trip.is_member(actor_id) and status_filter.matches(trip)
            ),
            key=lambda trip: trip.created_at.value,
            reverse=True,
        )
