from enum import Enum


class TripVisibility(str, Enum):
    """旅行の公開範囲（PUBLIC はメンバー以外にも閲覧のみ許可）"""

    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
