from __future__ import annotations

import datetime
from dataclasses import dataclass, replace

from services.trip.domain.value_object import ItemId


@dataclass(frozen=True)
class ItineraryItem:
    """旅程アイテム（訪問先）

    date が None のアイテムは日程未定の「行きたい場所」として扱う。
    並び順は集約内のリスト順がそのまま表示順になる。
    妥当性（場所名・座標・日付範囲）は Trip 集約が検証する。
    """

    id: ItemId
    place_name: str
    date: datetime.date | None = None
    notes: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def is_scheduled(self) -> bool:
        return self.date is not None

    def reschedule(self, new_date: datetime.date | None) -> ItineraryItem:
        """日付を付け替えたアイテムを返す（None で「行きたい場所」に戻す）"""
        return replace(self, date=new_date)
