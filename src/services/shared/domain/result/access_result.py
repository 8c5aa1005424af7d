from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """アクセス可能（値はこのバリアントだけが持つ）"""

    value: T


@dataclass(frozen=True)
class NotFound:
    """対象が存在しない"""


@dataclass(frozen=True)
class Forbidden:
    """対象は存在するが、権限が足りない"""


# 呼び出し側は match で 3 つすべてを明示的に扱うこと（NotFound と Forbidden を混同しない）
AccessResult = Union[Success[T], NotFound, Forbidden]
