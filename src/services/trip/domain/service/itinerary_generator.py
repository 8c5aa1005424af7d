"""旅行日程から表示用の日別旅程を組み立てる"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from services.trip.domain.entity.itinerary_item import ItineraryItem

if TYPE_CHECKING:
    from services.trip.domain.entity.trip import Trip


@dataclass(frozen=True)
class ItineraryDay:
    """旅程の1日分（day_number は1始まり）"""

    day_number: int
    date: date
    items: tuple[ItineraryItem, ...]


def generated_days(trip: Trip) -> list[ItineraryDay]:
    """開始日から終了日まで1日ずつ、日付付きアイテムを元の並び順で割り当てる

    アイテムが無い日も空の ItineraryDay として含める。
    """
    by_date: dict[date, list[ItineraryItem]] = defaultdict(list)
    for item in trip.items:
        if item.is_scheduled:
            by_date[item.date].append(item)

    return [
        ItineraryDay(
            day_number=offset + 1,
            date=day,
            items=tuple(by_date.get(day, ())),
        )
        for offset in range(trip.day_count)
        for day in [trip.start_date + timedelta(days=offset)]
    ]


def places_to_visit_items(trip: Trip) -> list[ItineraryItem]:
    """日付未定のアイテム（行きたい場所リスト）"""
    return [item for item in trip.items if not item.is_scheduled]
