from datetime import date
from typing import TypedDict

from services.shared.domain import IsoDateTime, TripId, UserId
from services.trip.domain.entity.membership import Membership
from services.trip.domain.entity.trip import Trip
from services.trip.domain.enum import TripRole, TripVisibility


class TripDetails(TypedDict):
    """旅行作成の入力データ構造（TypedDict）"""

    name: str
    start_date: date
    end_date: date
    visibility: TripVisibility


class TripFactory:
    """旅行ファクトリ"""

    def create(self, owner_id: UserId, trip_details: TripDetails) -> Trip:
        """作成者を OWNER とする新規旅行を生成する"""
        return Trip.build(
            id=TripId.generate(),
            name=trip_details["name"].strip(),
            start_date=trip_details["start_date"],
            end_date=trip_details["end_date"],
            visibility=trip_details["visibility"],
            memberships=[Membership(user_id=owner_id, role=TripRole.OWNER)],
            invites=[],
            items=[],
            created_at=IsoDateTime.now(),
        )
