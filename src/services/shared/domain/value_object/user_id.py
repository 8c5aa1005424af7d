from dataclasses import dataclass

from .identifier import UuidIdentifier


@dataclass(frozen=True)
class UserId(UuidIdentifier):
    """ユーザーID（全サービス共通）"""
