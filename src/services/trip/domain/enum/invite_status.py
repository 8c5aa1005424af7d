from enum import Enum


class InviteStatus(str, Enum):
    """招待ステータス（ACCEPTED / REVOKED は終端）"""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REVOKED = "REVOKED"

    @property
    def is_terminal(self) -> bool:
        return self is not InviteStatus.PENDING
