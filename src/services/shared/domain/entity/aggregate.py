from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    - version は楽観ロック用（0 = 未永続化）
    """

    def __init__(self, id: ID, version: int = 0) -> None:
        super().__init__(id)
        self._version = version

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_new(self) -> bool:
        """まだ一度も永続化されていないか"""
        return self._version == 0
