from __future__ import annotations

from enum import Enum


class TripRole(str, Enum):
    """旅行内のロール（メンバーシップ・招待で共通）

    VIEWER < EDITOR < OWNER の全順序を持つ。
    """

    VIEWER = "VIEWER"
    EDITOR = "EDITOR"
    OWNER = "OWNER"

    @property
    def rank(self) -> int:
        return list(TripRole).index(self)

    def includes(self, required: TripRole) -> bool:
        """required 以上の権限を持つか"""
        return self.rank >= required.rank

    # str の辞書順比較ではなくロールの順序で比較する
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TripRole):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TripRole):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TripRole):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TripRole):
            return NotImplemented
        return self.rank >= other.rank
