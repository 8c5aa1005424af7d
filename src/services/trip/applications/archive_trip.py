from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole


class ArchiveTripService:
    """旅行のアーカイブ・復元ユースケース（OWNER のみ）

    どちらも冪等で、すでに目的の状態なら保存せずにそのまま返す。
    """

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def archive(self, trip_id: TripId, actor_id: UserId) -> AccessResult[Trip]:
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.archive(),
            action="archive",
        )

    def restore(self, trip_id: TripId, actor_id: UserId) -> AccessResult[Trip]:
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.restore(),
            action="restore",
        )
