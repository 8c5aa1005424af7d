from collections.abc import Mapping

from aws_lambda_powertools import Logger

from services.audit.domain.entity import AuditEvent
from services.audit.domain.repository import AuditEventRepository
from services.audit.domain.value_object import AuditEventId
from services.shared.domain import IsoDateTime, UserId
from services.shared.utils import to_snapshot

logger = Logger(child=True)


class AuditTrail:
    """監査ログの記録

    before / after はドメインオブジェクトのまま受け取り、汎用スナップショットに変換して保存する。
    """

    def __init__(self, repository: AuditEventRepository) -> None:
        self._repository = repository

    def record(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        actor_id: UserId | None,
        before_state: object = None,
        after_state: object = None,
        metadata: Mapping[str, object] | None = None,
    ) -> AuditEvent:
        """監査イベントを1件記録する"""
        event = AuditEvent(
            id=AuditEventId.generate(),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_id=actor_id,
            occurred_at=IsoDateTime.now(),
            before_state=to_snapshot(before_state),
            after_state=to_snapshot(after_state),
            metadata={key: to_snapshot(value) for key, value in (metadata or {}).items()},
        )
        self._repository.save(event)

        logger.info(
            "Audit event recorded",
            extra={
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "actor_id": str(actor_id) if actor_id else None,
            },
        )
        return event
