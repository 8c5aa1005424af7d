from collections.abc import Callable

from aws_lambda_powertools import Logger

from services.shared.domain import AccessResult, Forbidden, NotFound, Success, TripId, UserId
from services.trip.applications.trip_audit import TripAuditRecorder
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripRole
from services.trip.domain.repository import TripRepository
from services.trip.domain.service import authorize

logger = Logger(child=True)


class TripCommandExecutor:
    """旅行に対する変更の共通手順

    読み込み -> アクセス判定 -> 変更（不変条件の再検証） -> 保存 -> 監査記録。
    変更関数は新しい集約を返し、例外を送出した場合は何も保存しない。
    変更関数が同じ集約をそのまま返した場合も、保存・監査記録は行わない。
    """

    def __init__(self, repository: TripRepository, audit: TripAuditRecorder) -> None:
        self._repository = repository
        self._audit = audit

    def load(
        self,
        trip_id: TripId,
        actor_id: UserId | None,
        required_role: TripRole | None,
    ) -> AccessResult[Trip]:
        """アクセス判定済みの旅行を取得する"""
        result = authorize(self._repository.find_by_id(trip_id), actor_id, required_role)
        match result:
            case Success():
                return result
            case NotFound() | Forbidden():
                logger.warning(
                    "Trip access denied",
                    extra={
                        "trip_id": str(trip_id),
                        "actor_id": str(actor_id) if actor_id else None,
                        "required_role": required_role.value if required_role else None,
                        "outcome": type(result).__name__,
                    },
                )
                return result

    def execute(
        self,
        trip_id: TripId,
        actor_id: UserId | None,
        required_role: TripRole,
        mutate: Callable[[Trip], Trip],
        action: str,
    ) -> AccessResult[Trip]:
        result = self.load(trip_id, actor_id, required_role)
        match result:
            case Success(value=before):
                mutated = mutate(before)
                if mutated is before:
                    return result
                after = self._repository.save(mutated)
                self._audit.trip_updated(before, after, actor_id)
                logger.info(
                    "Trip updated",
                    extra={
                        "trip_id": str(trip_id),
                        "actor_id": str(actor_id),
                        "action": action,
                        "version": after.version,
                    },
                )
                return Success(after)
            case NotFound() | Forbidden():
                return result
