"""旅行へのアクセス判定

ロールの包含関係は OWNER ⊇ EDITOR ⊇ VIEWER。
呼び出し側は NotFound と Forbidden を区別して扱える（公開 API では読み取り時に Forbidden を隠す）。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from services.shared.domain import AccessResult, Forbidden, NotFound, Success, UserId
from services.trip.domain.enum import TripRole, TripVisibility

if TYPE_CHECKING:
    from services.trip.domain.entity.trip import Trip


def authorize(
    trip: Trip | None,
    actor_id: UserId | None,
    required_role: TripRole | None,
) -> AccessResult[Trip]:
    """アクセス可否を判定する

    required_role が None の場合は閲覧（読み取り）扱いで、公開旅行なら誰でも許可する。
    """
    if trip is None:
        return NotFound()
    if required_role is None and trip.visibility is TripVisibility.PUBLIC:
        return Success(trip)

    role = trip.role_of(actor_id)
    if role is None:
        return Forbidden()
    if required_role is None or role.includes(required_role):
        return Success(trip)
    return Forbidden()
