from __future__ import annotations

from dataclasses import dataclass, replace

from services.shared.domain import UserId
from services.trip.domain.enum import TripRole


@dataclass(frozen=True)
class Membership:
    """ユーザーと旅行の結び付き（1旅行につき1ユーザー1件）"""

    user_id: UserId
    role: TripRole

    def with_role(self, role: TripRole) -> Membership:
        return replace(self, role=role)
