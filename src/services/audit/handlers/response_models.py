from typing import Any

from pydantic import BaseModel

from services.audit.domain.entity import AuditEvent


class AuditEventData(BaseModel):
    """監査イベントのレスポンスモデル"""

    event_id: str
    action: str
    entity_type: str
    entity_id: str
    actor_id: str | None
    occurred_at: str
    before_state: Any
    after_state: Any
    metadata: dict[str, Any]


class SuccessResponse(BaseModel):
    status: str = "success"
    data: list[AuditEventData]


def to_response(events: list[AuditEvent]) -> dict:
    return SuccessResponse(
        data=[
            AuditEventData(
                event_id=str(event.id),
                action=event.action,
                entity_type=event.entity_type,
                entity_id=event.entity_id,
                actor_id=str(event.actor_id) if event.actor_id else None,
                occurred_at=str(event.occurred_at),
                before_state=event.before_state,
                after_state=event.after_state,
                metadata=event.metadata,
            )
            for event in events
        ]
    ).model_dump()
