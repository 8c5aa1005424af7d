from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole


class GetTripService:
    """旅行取得ユースケース（メンバー、または公開旅行なら誰でも閲覧可）"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def get(self, trip_id: TripId, actor_id: UserId | None) -> AccessResult[Trip]:
        return self._executor.load(trip_id, actor_id, required_role=None)

    def get_collaborators(self, trip_id: TripId, actor_id: UserId) -> AccessResult[Trip]:
        """メンバーと招待の一覧（OWNER のみ）"""
        return self._executor.load(trip_id, actor_id, required_role=TripRole.OWNER)
