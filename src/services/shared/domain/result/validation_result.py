from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """検証済みの値"""

    value: T


@dataclass(frozen=True)
class Invalid:
    """検証失敗（最初に見つかった違反の理由）"""

    reason: str


ValidationResult = Union[Valid[T], Invalid]
