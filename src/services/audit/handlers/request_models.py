from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from services.shared.utils import blank_to_none


class SearchAuditEventsRequest(BaseModel):
    """監査イベント検索のクエリパラメータ

    limit の上限・既定値は設定値で丸めるため、ここでは整数であることだけを検証する。
    """

    entity_type: str | None = Field(default=None, alias="entityType", max_length=50)
    entity_id: str | None = Field(default=None, alias="entityId", max_length=200)
    actor_id: UUID | None = Field(default=None, alias="actorId")
    limit: int | None = None

    model_config = {"populate_by_name": True}

    @field_validator("entity_type", "entity_id", "actor_id", "limit", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator("entity_type")
    @classmethod
    def upper_entity_type(cls, v: str | None) -> str | None:
        return v.upper() if v else v
