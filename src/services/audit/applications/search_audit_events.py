from services.audit.domain.entity import AuditEvent
from services.audit.domain.repository import AuditEventRepository
from services.audit.domain.value_object import AuditSearchCriteria
from services.shared.config import Config
from services.shared.domain import UserId


class SearchAuditEventsService:
    """監査イベント検索ユースケース"""

    def __init__(self, repository: AuditEventRepository, config: Config) -> None:
        self._repository = repository
        self._default_limit = config.audit_search_default_limit
        self._max_limit = config.audit_search_max_limit

    def search(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
        actor_id: UserId | None = None,
        limit: int | None = None,
    ) -> list[AuditEvent]:
        """条件に一致するイベントを新しい順に返す（limit は [1, 上限] に丸める）"""
        criteria = AuditSearchCriteria(
            limit=self.clamp_limit(limit),
            entity_type=entity_type or None,
            entity_id=entity_id or None,
            actor_id=actor_id,
        )
        return self._repository.search(criteria)

    def clamp_limit(self, limit: int | None) -> int:
        if limit is None:
            return self._default_limit
        return max(1, min(limit, self._max_limit))
