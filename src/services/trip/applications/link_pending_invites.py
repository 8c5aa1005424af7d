from aws_lambda_powertools import Logger

from services.shared.domain import EmailAddress, UserId
from services.shared.domain.exception import OptimisticLockException
from services.trip.applications.trip_audit import TripAuditRecorder
from services.trip.domain.entity import Trip
from services.trip.domain.repository import TripRepository

logger = Logger(child=True)


class LinkPendingInvitesOnRegistrationService:
    """登録直後のユーザーに、同じメールアドレス宛ての PENDING 招待をひも付ける

    招待は ACCEPTED になり、招待のロールでメンバーシップが作られる。
    登録時に一度だけ実行され、後から再実行されることはない。
    旅行ごとに独立して処理し、1件の競合が他の旅行や登録自体を失敗させない。
    """

    def __init__(
        self,
        repository: TripRepository,
        audit: TripAuditRecorder,
        max_attempts: int = 3,
    ) -> None:
        self._repository = repository
        self._audit = audit
        self._max_attempts = max_attempts

    def link(self, user_id: UserId, email: EmailAddress) -> list[Trip]:
        """ひも付けた旅行を返す"""
        linked = []
        for trip in self._repository.find_by_invite_email(email):
            updated = self._link_trip(trip, user_id, email)
            if updated is not None:
                linked.append(updated)

        logger.info(
            "Pending invites linked",
            extra={"actor_id": str(user_id), "linked_trip_count": len(linked)},
        )
        return linked

    def _link_trip(self, trip: Trip, user_id: UserId, email: EmailAddress) -> Trip | None:
        """楽観ロック競合時は最新の状態を読み直して再試行する"""
        current: Trip | None = trip
        for attempt in range(1, self._max_attempts + 1):
            if current is None or current.pending_invite_for(email) is None:
                return None
            try:
                after = self._repository.save(current.accept_invite(email, user_id))
            except OptimisticLockException:
                if attempt == self._max_attempts:
                    logger.warning(
                        "Invite link abandoned after repeated conflicts",
                        extra={"trip_id": str(trip.id), "attempts": attempt},
                    )
                    return None
                logger.warning(
                    "Invite link conflict, retrying",
                    extra={"trip_id": str(trip.id), "attempt": attempt},
                )
                current = self._repository.find_by_id(trip.id)
                continue

            self._audit.trip_updated(current, after, user_id)
            return after
        return None
