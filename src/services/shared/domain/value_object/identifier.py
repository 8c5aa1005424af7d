from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID, uuid4

_T = TypeVar("_T", bound="UuidIdentifier")


@dataclass(frozen=True)
class UuidIdentifier:
    """128bit ランダム ID の基底 Value Object

    - 同じ値を持つ ID は同一とみなされる（型が異なれば別物）
    - from_string は不正な文字列に対して例外ではなく None を返す
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls: type[_T]) -> _T:
        """新しいランダム ID を生成する"""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls: type[_T], s: str) -> _T | None:
        """文字列表現から復元する"""
        try:
            return cls(value=UUID(s))
        except (AttributeError, TypeError, ValueError):
            return None
