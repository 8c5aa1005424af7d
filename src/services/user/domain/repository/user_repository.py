from abc import abstractmethod

from services.shared.domain import EmailAddress, Repository, UserId
from services.user.domain.entity.user import User


class UserRepository(Repository[User, UserId]):
    """利用者リポジトリのインターフェース"""

    @abstractmethod
    def save(self, user: User) -> User:
        """利用者を保存する（メールアドレスが使用済みなら DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: EmailAddress) -> User | None:
        """正規化済みメールアドレスで検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_email(self, email: EmailAddress) -> bool:
        raise NotImplementedError
