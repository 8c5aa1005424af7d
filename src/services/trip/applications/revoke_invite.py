from services.shared.domain import AccessResult, EmailAddress, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole


class RevokeInviteService:
    """招待取り消しユースケース（OWNER のみ）"""

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def revoke(self, trip_id: TripId, actor_id: UserId, email: str) -> AccessResult[Trip]:
        """PENDING の招待が無ければ ResourceNotFoundException"""
        normalized = EmailAddress(email)
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.revoke_invite(normalized),
            action="revoke_invite",
        )
