from services.shared.domain import AccessResult, EmailAddress, TripId, UserId
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.user.domain.repository import UserRepository


class InviteCollaboratorService:
    """共同編集者の招待ユースケース（OWNER のみ）"""

    def __init__(
        self, executor: TripCommandExecutor, user_repository: UserRepository
    ) -> None:
        self._executor = executor
        self._user_repository = user_repository

    def invite(
        self, trip_id: TripId, actor_id: UserId, email: str, role: TripRole
    ) -> AccessResult[Trip]:
        """メールアドレス宛てに招待する

        登録済みユーザーがすでにメンバーなら DuplicateResourceException。
        PENDING の招待が残っていればロールを更新して再送扱いにする。
        """
        normalized = EmailAddress(email)

        def mutate(trip: Trip) -> Trip:
            registered = self._user_repository.find_by_email(normalized)
            return trip.invite_collaborator(
                normalized, role, registered_user_id=registered.id if registered else None
            )

        return self._executor.execute(
            trip_id, actor_id, TripRole.OWNER, mutate, action="invite_collaborator"
        )
