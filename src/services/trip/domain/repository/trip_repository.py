from abc import abstractmethod

from services.shared.domain import EmailAddress, Repository, TripId, UserId
from services.trip.domain.entity.trip import Trip


class TripRepository(Repository[Trip, TripId]):
    """旅行リポジトリのインターフェース"""

    @abstractmethod
    def save(self, trip: Trip) -> Trip:
        """旅行を保存し、バージョンを進めた集約を返す

        保存時のバージョンが一致しない場合は OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """旅行IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Trip]:
        """ユーザーがメンバーになっている旅行を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_invite_email(self, email: EmailAddress) -> list[Trip]:
        """メールアドレス宛ての PENDING 招待を持つ旅行を検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, trip_id: TripId) -> None:
        """旅行を削除する"""
        raise NotImplementedError
