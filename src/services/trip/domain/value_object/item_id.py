from dataclasses import dataclass

from services.shared.domain.value_object import UuidIdentifier


@dataclass(frozen=True)
class ItemId(UuidIdentifier):
    """旅程アイテムID"""
