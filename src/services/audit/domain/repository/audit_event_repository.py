from abc import ABC, abstractmethod

from services.audit.domain.entity.audit_event import AuditEvent
from services.audit.domain.value_object import AuditSearchCriteria


class AuditEventRepository(ABC):
    """監査イベントリポジトリのインターフェース（追記と検索のみ）"""

    @abstractmethod
    def save(self, event: AuditEvent) -> None:
        """監査イベントを追記する"""
        raise NotImplementedError

    @abstractmethod
    def search(self, criteria: AuditSearchCriteria) -> list[AuditEvent]:
        """条件に一致するイベントを新しい順に最大 criteria.limit 件返す"""
        raise NotImplementedError
