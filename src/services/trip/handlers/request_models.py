import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from services.shared.utils import blank_to_none
from services.trip.applications import TripListStatusFilter
from services.trip.domain.enum import TripRole, TripVisibility
from services.trip.domain.factory import ItineraryItemDetails


class CreateTripRequest(BaseModel):
    """旅行作成リクエストスキーマ"""

    name: str = Field(..., min_length=1, max_length=200, description="旅行名")
    start_date: datetime.date = Field(..., description="開始日", examples=["2026-01-02"])
    end_date: datetime.date = Field(..., description="終了日", examples=["2026-01-03"])
    visibility: TripVisibility = Field(default=TripVisibility.PRIVATE)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Kyoto weekend",
                    "start_date": "2026-01-02",
                    "end_date": "2026-01-03",
                    "visibility": "PRIVATE",
                }
            ]
        }
    }


class UpdateTripRequest(BaseModel):
    """旅行更新リクエストスキーマ（指定した項目だけを更新）"""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    visibility: TripVisibility | None = None

    @property
    def has_detail_changes(self) -> bool:
        return any(v is not None for v in (self.name, self.start_date, self.end_date))


class ItineraryItemRequest(BaseModel):
    """旅程アイテムの追加・更新リクエストスキーマ

    date と day_number はどちらか一方（両方なしなら「行きたい場所」）。
    """

    place_name: str = Field(..., min_length=1, max_length=200, description="場所名")
    date: datetime.date | None = Field(default=None, description="訪問日")
    day_number: int | None = Field(default=None, ge=1, description="1始まりの日番号")
    notes: str = Field(default="", max_length=2000)
    latitude: float = Field(default=0.0)
    longitude: float = Field(default=0.0)

    @field_validator("date", "day_number", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        """空文字を None に変換する"""
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_single_schedule(self) -> "ItineraryItemRequest":
        if self.date is not None and self.day_number is not None:
            raise ValueError("Specify either date or day_number, not both")
        return self

    def to_item_details(self) -> ItineraryItemDetails:
        return {
            "place_name": self.place_name,
            "date": self.date,
            "notes": self.notes,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


class MoveItineraryItemRequest(BaseModel):
    """旅程アイテム移動リクエストスキーマ"""

    target_date: datetime.date | None = Field(
        default=None, description="移動先の日付（null で未定に戻す）"
    )
    before_item_id: UUID | None = Field(default=None, description="この直前に挿入する")

    @field_validator("target_date", "before_item_id", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class InviteCollaboratorRequest(BaseModel):
    """招待リクエストスキーマ"""

    email: str = Field(..., min_length=3, max_length=254, examples=["friend@example.com"])
    role: TripRole = Field(default=TripRole.VIEWER)


class RevokeInviteRequest(BaseModel):
    """招待取り消しリクエストスキーマ"""

    email: str = Field(..., min_length=3, max_length=254)


class ChangeMemberRoleRequest(BaseModel):
    """ロール変更リクエストスキーマ"""

    role: TripRole


class ListTripsRequest(BaseModel):
    """旅行一覧のクエリパラメータ（status は大文字小文字を区別しない）"""

    status: TripListStatusFilter = Field(default=TripListStatusFilter.ACTIVE)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        v = blank_to_none(v)
        if v is None:
            return TripListStatusFilter.ACTIVE
        return v.upper() if isinstance(v, str) else v
