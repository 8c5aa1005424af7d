from services.shared.domain import AccessResult, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole


class ManageTripMembershipService:
    """メンバーシップ管理ユースケース

    ロール変更・メンバー削除は OWNER のみ、脱退は全メンバーが行える。
    いずれも OWNER が1人もいなくなる変更は BusinessRuleViolationException。
    """

    def __init__(self, executor: TripCommandExecutor) -> None:
        self._executor = executor

    def change_role(
        self, trip_id: TripId, actor_id: UserId, target_id: UserId, role: TripRole
    ) -> AccessResult[Trip]:
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.change_member_role(actor_id, target_id, role),
            action="change_member_role",
        )

    def remove_member(
        self, trip_id: TripId, actor_id: UserId, target_id: UserId
    ) -> AccessResult[Trip]:
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.OWNER,
            lambda trip: trip.remove_member(actor_id, target_id),
            action="remove_member",
        )

    def leave(self, trip_id: TripId, actor_id: UserId) -> AccessResult[Trip]:
        return self._executor.execute(
            trip_id,
            actor_id,
            TripRole.VIEWER,
            lambda trip: trip.leave(actor_id),
            action="leave_trip",
        )
