from typing import Any

from services.shared.domain import AggregateRoot, EmailAddress, IsoDateTime, UserId

REDACTED = "[REDACTED]"


class User(AggregateRoot[UserId]):
    """利用者"""

    def __init__(
        self,
        id: UserId,
        email: EmailAddress,
        password_hash: str,
        display_name: str,
        created_at: IsoDateTime,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)

        self._email = email
        self._password_hash = password_hash
        self._display_name = display_name
        self._created_at = created_at

    @property
    def email(self) -> EmailAddress:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    def snapshot(self) -> dict[str, Any]:
        """監査ログ用（パスワードハッシュは伏せる）"""
        return {
            "id": self.id,
            "email": self._email,
            "password_hash": REDACTED,
            "display_name": self._display_name,
            "created_at": self._created_at,
        }
