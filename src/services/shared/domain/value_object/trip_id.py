from dataclasses import dataclass

from .identifier import UuidIdentifier


@dataclass(frozen=True)
class TripId(UuidIdentifier):
    """旅行ID（全サービス共通）"""
