from dataclasses import dataclass

from services.shared.domain import UserId


@dataclass(frozen=True)
class AuditSearchCriteria:
    """監査イベントの検索条件（limit はクランプ済みの値）"""

    limit: int
    entity_type: str | None = None
    entity_id: str | None = None
    actor_id: UserId | None = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.entity_id is not None and self.entity_type is None:
            raise ValueError("entity_type is required when entity_id is given")
