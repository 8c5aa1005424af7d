from services.audit.applications import AuditTrail
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)
from services.trip.applications import TripAuditRecorder, TripCommandExecutor
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository


def build_trip_audit() -> TripAuditRecorder:
    return TripAuditRecorder(AuditTrail(DynamoDBAuditEventRepository()))


def build_trip_executor(
    repository: DynamoDBTripRepository, audit: TripAuditRecorder | None = None
) -> TripCommandExecutor:
    """Lambda コンテナ内で使い回す TripCommandExecutor を組み立てる"""
    return TripCommandExecutor(repository=repository, audit=audit or build_trip_audit())
