from collections.abc import Mapping

from services.audit.domain.value_object import AuditEventId
from services.shared.domain import Entity, IsoDateTime, UserId
from services.shared.utils import SnapshotValue


class AuditEvent(Entity[AuditEventId]):
    """監査イベント（追記のみで更新しない）"""

    def __init__(
        self,
        id: AuditEventId,
        action: str,
        entity_type: str,
        entity_id: str,
        actor_id: UserId | None,
        occurred_at: IsoDateTime,
        before_state: SnapshotValue = None,
        after_state: SnapshotValue = None,
        metadata: Mapping[str, SnapshotValue] | None = None,
    ) -> None:
        super().__init__(id)

        if not action:
            raise ValueError("Audit action cannot be blank")
        if not entity_type or not entity_id:
            raise ValueError("Audit entity type and id are required")

        self._action = action
        self._entity_type = entity_type
        self._entity_id = entity_id
        self._actor_id = actor_id
        self._occurred_at = occurred_at
        self._before_state = before_state
        self._after_state = after_state
        self._metadata = dict(metadata or {})

    @property
    def action(self) -> str:
        return self._action

    @property
    def entity_type(self) -> str:
        return self._entity_type

    @property
    def entity_id(self) -> str:
        return self._entity_id

    @property
    def actor_id(self) -> UserId | None:
        return self._actor_id

    @property
    def occurred_at(self) -> IsoDateTime:
        return self._occurred_at

    @property
    def before_state(self) -> SnapshotValue:
        return self._before_state

    @property
    def after_state(self) -> SnapshotValue:
        return self._after_state

    @property
    def metadata(self) -> dict[str, SnapshotValue]:
        return dict(self._metadata)
