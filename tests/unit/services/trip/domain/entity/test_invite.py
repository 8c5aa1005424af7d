import pytest

from services.shared.domain import EmailAddress, IsoDateTime
from services.shared.domain.exception import BusinessRuleViolationException
from services.trip.domain.entity import Invite
from services.trip.domain.enum import InviteStatus, TripRole


@pytest.fixture
def pending_invite():
    return Invite.issue(
        EmailAddress("guest@example.com"),
        TripRole.VIEWER,
        now=IsoDateTime.from_string("2026-01-01T00:00:00+00:00"),
    )


class TestInvite:
    def test_issue_is_pending(self, pending_invite):
        assert pending_invite.status is InviteStatus.PENDING
        assert str(pending_invite.created_at).startswith("2026-01-01")

    def test_reissue_keeps_identity(self, pending_invite):
        reissued = pending_invite.reissue(TripRole.EDITOR)
        assert reissued.id == pending_invite.id
        assert reissued.role is TripRole.EDITOR

    @pytest.mark.parametrize("terminal", ["accept", "revoke"])
    @pytest.mark.parametrize("operation", ["accept", "revoke"])
    def test_terminal_states_do_not_transition(self, pending_invite, terminal, operation):
        finished = getattr(pending_invite, terminal)()

        assert finished.status.is_terminal
        with pytest.raises(BusinessRuleViolationException, match="Cannot"):
            getattr(finished, operation)()

    def test_terminal_invite_cannot_be_reissued(self, pending_invite):
        with pytest.raises(BusinessRuleViolationException):
            pending_invite.accept().reissue(TripRole.OWNER)
