from typing import TypedDict

from services.shared.domain import EmailAddress, IsoDateTime, UserId
from services.shared.domain.exception import BusinessRuleViolationException
from services.user.domain.entity.user import User

MIN_PASSWORD_LENGTH = 8


class UserDetails(TypedDict):
    """利用者登録の入力データ構造（TypedDict）"""

    email: str
    password: str
    display_name: str


class UserFactory:
    """利用者ファクトリ"""

    def create(self, user_details: UserDetails, password_hash: str) -> User:
        """ハッシュ済みパスワードで新規利用者を生成する"""
        display_name = user_details["display_name"].strip()
        if not display_name:
            raise BusinessRuleViolationException("Display name cannot be blank")

        return User(
            id=UserId.generate(),
            email=EmailAddress(user_details["email"]),
            password_hash=password_hash,
            display_name=display_name,
            created_at=IsoDateTime.now(),
        )

    @staticmethod
    def validate_password(password: str) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise BusinessRuleViolationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
