from datetime import date

from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole, TripVisibility


class UpdateTripService:
    """旅行更新ユースケース"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def update_details(
        self,
        trip_id: TripId,
        actor_id: UserId,
        name: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AccessResult[Trip]:
        """名前・日程を更新する（EDITOR 以上）"""
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.EDITOR,
            lambda trip: trip.update_details(name, start_date, end_date),
            action="update_details",
        )

    def change_visibility(
        self, trip_id: TripId, actor_id: UserId, visibility: TripVisibility
    ) -> AccessResult[Trip]:
        """公開範囲を変更する（OWNER のみ）"""
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.change_visibility(visibility),
            action="change_visibility",
        )
