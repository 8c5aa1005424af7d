from aws_lambda_powertools import Logger

from services.shared.domain import AccessResult, Forbidden, NotFound, Success, TripId, UserId
from services.trip.applications.trip_audit import TripAuditRecorder
from services.trip.applications.trip_command import TripCommandExecutor
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.trip.domain.repository import TripRepository

logger = Logger(child=True)


class DeleteTripService:
    """旅行削除ユースケース（OWNER のみ）"""

    def __init__(
        self,
        repository: TripRepository,
        executor: TripCommandExecutor,
        audit: TripAuditRecorder,
    ) -> None:
        self._repository = repository
        self._executor = executor
        self._audit = audit

    def delete(self, trip_id: TripId, actor_id: UserId) -> AccessResult[Trip]:
        """削除した旅行（削除前の状態）を返す"""
        result = self._executor.load(trip_id, actor_id, TripRole.OWNER)
        match result:
            case Success(value=trip):
                self._repository.delete(trip.id)
                self._audit.trip_deleted(trip, actor_id)
                logger.info(
                    "Trip deleted",
                    extra={"trip_id": str(trip_id), "actor_id": str(actor_id)},
                )
                return result
            case NotFound() | Forbidden():
                return result
