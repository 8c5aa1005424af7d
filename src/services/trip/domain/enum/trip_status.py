from enum import Enum


class TripStatus(str, Enum):
    """旅行の状態（ARCHIVED は一覧の既定表示から外れる）"""

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
