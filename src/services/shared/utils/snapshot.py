"""監査ログ用の汎用スナップショット

集約や値オブジェクトを、JSON にそのまま書き出せる入れ子の
dict / list / スカラーに変換する。監査シンク側はこの値を不透明なものとして扱う。
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Union
from uuid import UUID

from services.shared.domain.value_object import Currency, IsoDateTime, UuidIdentifier

SnapshotValue = Union[
    None, bool, int, float, str, list["SnapshotValue"], dict[str, "SnapshotValue"]
]


def to_snapshot(value: object) -> SnapshotValue:
    """任意のドメインオブジェクトをスナップショット値に変換する

    - snapshot() を持つオブジェクト（集約など）はその戻り値を再帰的に変換
    - value フィールドだけを持つ値オブジェクトは中身のスカラーに畳み込む
    - 日付・日時は ISO 8601、Decimal / UUID は文字列
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, Enum):
        return to_snapshot(value.value)
    if isinstance(value, (int, float, str)):
        return value
    if isinstance(value, (UuidIdentifier, Currency, Decimal, UUID)):
        return str(value)
    if isinstance(value, IsoDateTime):
        return value.value.isoformat()
    if isinstance(value, (datetime, date)):
        return value.isoformat()

    snapshot = getattr(value, "snapshot", None)
    if callable(snapshot):
        return to_snapshot(snapshot())

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = dataclasses.fields(value)
        if len(fields) == 1 and fields[0].name == "value":
            return to_snapshot(getattr(value, "value"))
        return {f.name: to_snapshot(getattr(value, f.name)) for f in fields}
    if isinstance(value, Mapping):
        return {str(to_snapshot(k)): to_snapshot(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_snapshot(v) for v in value]

    raise TypeError(f"Cannot snapshot value of type {type(value).__name__}")
