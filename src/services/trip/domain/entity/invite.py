from __future__ import annotations

from dataclasses import dataclass, replace

from services.shared.domain import EmailAddress, IsoDateTime
from services.shared.domain.exception import BusinessRuleViolationException
from services.trip.domain.enum import InviteStatus, TripRole
from services.trip.domain.value_object import InviteId


@dataclass(frozen=True)
class Invite:
    """メールアドレス宛ての招待

    状態遷移: PENDING -> ACCEPTED（登録時のひも付け）, PENDING -> REVOKED（取り消し）。
    ACCEPTED / REVOKED からは遷移しない。
    """

    id: InviteId
    email: EmailAddress
    role: TripRole
    status: InviteStatus
    created_at: IsoDateTime

    @classmethod
    def issue(
        cls, email: EmailAddress, role: TripRole, now: IsoDateTime | None = None
    ) -> Invite:
        """新しい PENDING の招待を発行する"""
        return cls(
            id=InviteId.generate(),
            email=email,
            role=role,
            status=InviteStatus.PENDING,
            created_at=now or IsoDateTime.now(),
        )

    @property
    def is_pending(self) -> bool:
        return self.status is InviteStatus.PENDING

    def reissue(self, role: TripRole) -> Invite:
        """再送: PENDING のままロールだけ更新する"""
        self._ensure_pending("reissue")
        return replace(self, role=role)

    def accept(self) -> Invite:
        self._ensure_pending("accept")
        return replace(self, status=InviteStatus.ACCEPTED)

    def revoke(self) -> Invite:
        self._ensure_pending("revoke")
        return replace(self, status=InviteStatus.REVOKED)

    def _ensure_pending(self, operation: str) -> None:
        if self.status.is_terminal:
            raise BusinessRuleViolationException(
                f"Cannot {operation} an invite in {self.status.value} status"
            )
