import pytest

from services.audit.domain.entity import AuditEvent
from services.audit.domain.value_object import AuditEventId
from services.shared.domain import IsoDateTime, UserId


@pytest.fixture
def create_audit_event():
    """AuditEvent を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        action: str = "TRIP_UPDATED",
        entity_type: str = "TRIP",
        entity_id: str = "trip-1",
        actor_id: UserId | None = None,
        occurred_at: str = "2026-01-02T09:00:00+00:00",
        after_state=None,
    ) -> AuditEvent:
        return AuditEvent(
            id=AuditEventId.generate(),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_id=actor_id,
            occurred_at=IsoDateTime.from_string(occurred_at),
            after_state=after_state,
            metadata={"aggregate": "trip"},
        )

    return _factory
