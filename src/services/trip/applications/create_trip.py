from aws_lambda_powertools import Logger

from services.shared.domain import UserId
from services.trip.applications.trip_audit import TripAuditRecorder
from services.trip.domain.entity import Trip
from services.trip.domain.factory import TripFactory
from services.trip.domain.factory.trip_factory import TripDetails
from services.trip.domain.repository import TripRepository

logger = Logger(child=True)


class CreateTripService:
    """旅行作成ユースケース"""

    def __init__(
        self,
        repository: TripRepository,
        factory: TripFactory,
        audit: TripAuditRecorder,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._audit = audit

    def create(self, owner_id: UserId, trip_details: TripDetails) -> Trip:
        """作成者を OWNER として旅行を作成する"""
        trip = self._repository.save(self._factory.create(owner_id, trip_details))
        self._audit.trip_created(trip, owner_id)

        logger.info(
            "Trip created",
            extra={"trip_id": str(trip.id), "actor_id": str(owner_id)},
        )
        return trip
