from datetime import date
from typing import TypedDict

from services.trip.domain.entity.itinerary_item import ItineraryItem
from services.trip.domain.value_object import ItemId


class ItineraryItemDetails(TypedDict):
    """旅程アイテムの入力データ構造（TypedDict）"""

    place_name: str
    date: date | None
    notes: str
    latitude: float
    longitude: float


class ItineraryItemFactory:
    """旅程アイテムファクトリ"""

    def create(
        self,
        item_details: ItineraryItemDetails,
        item_id: ItemId | None = None,
    ) -> ItineraryItem:
        """入力を整形してアイテムを生成する（検証は集約側で行う）"""
        return ItineraryItem(
            id=item_id or ItemId.generate(),
            place_name=item_details["place_name"].strip(),
            date=item_details["date"],
            notes=item_details["notes"].strip(),
            latitude=float(item_details["latitude"]),
            longitude=float(item_details["longitude"]),
        )
