import pytest

from services.shared.domain import EmailAddress, TripId, UserId
from services.shared.domain.exception import OptimisticLockException
from services.trip.applications import LinkPendingInvitesOnRegistrationService
from services.trip.domain.enum import InviteStatus, TripRole


@pytest.fixture
def guest_email():
    return EmailAddress("guest@example.com")


@pytest.fixture
def invited_trip(create_trip, guest_email):
    return create_trip().invite_collaborator(guest_email, TripRole.EDITOR)


class TestLinkPendingInvitesOnRegistrationService:
    """LinkPendingInvitesOnRegistrationService のテスト"""

    def test_link_accepts_invite_and_adds_member(
        self, saving_repository, mock_audit, invited_trip, guest_email
    ):
        """PENDING 招待が ACCEPTED になり、招待のロールでメンバーになる"""

        # Arrange
        user_id = UserId.generate()
        saving_repository.find_by_invite_email.return_value = [invited_trip]
        service = LinkPendingInvitesOnRegistrationService(saving_repository, mock_audit)

        # Act
        linked = service.link(user_id, guest_email)

        # Assert
        assert len(linked) == 1
        assert linked[0].role_of(user_id) is TripRole.EDITOR
        assert linked[0].invite_for(guest_email).status is InviteStatus.ACCEPTED
        mock_audit.trip_updated.assert_called_once_with(invited_trip, linked[0], user_id)

    def test_revoked_invite_is_not_linked(
        self, saving_repository, mock_audit, invited_trip, guest_email
    ):
        saving_repository.find_by_invite_email.return_value = [
            invited_trip.revoke_invite(guest_email)
        ]
        service = LinkPendingInvitesOnRegistrationService(saving_repository, mock_audit)

        assert service.link(UserId.generate(), guest_email) == []
        saving_repository.save.assert_not_called()

    def test_retries_after_optimistic_lock_conflict(
        self, saving_repository, mock_audit, invited_trip, guest_email
    ):
        """競合時は最新状態を読み直して再試行する"""
        user_id = UserId.generate()
        latest = invited_trip.with_version(invited_trip.version + 1)
        saving_repository.find_by_invite_email.return_value = [invited_trip]
        saving_repository.find_by_id.return_value = latest
        saving_repository.save.side_effect = [
            OptimisticLockException("Trip was modified concurrently"),
            latest.accept_invite(guest_email, user_id).with_version(latest.version + 1),
        ]
        service = LinkPendingInvitesOnRegistrationService(saving_repository, mock_audit)

        linked = service.link(user_id, guest_email)

        assert linked[0].is_member(user_id)
        assert saving_repository.save.call_count == 2
        saving_repository.find_by_id.assert_called_once_with(invited_trip.id)
        assert mock_audit.trip_updated.call_args[0][0] is latest

    def test_conflicting_trip_does_not_block_other_trips(
        self, saving_repository, mock_audit, create_trip, invited_trip, guest_email
    ):
        """競合し続ける旅行はあきらめ、残りの旅行のひも付けは続ける"""

        # Arrange
        user_id = UserId.generate()
        other_trip = create_trip(name="Osaka day trip", id=TripId.generate())
        other_trip = other_trip.invite_collaborator(guest_email, TripRole.VIEWER)
        saving_repository.find_by_invite_email.return_value = [invited_trip, other_trip]
        saving_repository.find_by_id.return_value = invited_trip

        def _save(trip):
            if trip.id == invited_trip.id:
                raise OptimisticLockException("Trip was modified concurrently")
            return trip.with_version(trip.version + 1)

        saving_repository.save.side_effect = _save
        service = LinkPendingInvitesOnRegistrationService(
            saving_repository, mock_audit, max_attempts=2
        )

        # Act
        linked = service.link(user_id, guest_email)

        # Assert
        assert [trip.id for trip in linked] == [other_trip.id]
        assert linked[0].role_of(user_id) is TripRole.VIEWER
        assert saving_repository.save.call_count == 3
        mock_audit.trip_updated.assert_called_once()

    def test_stops_when_trip_deleted_during_retry(
        self, saving_repository, mock_audit, invited_trip, guest_email
    ):
        saving_repository.find_by_invite_email.return_value = [invited_trip]
        saving_repository.find_by_id.return_value = None
        saving_repository.save.side_effect = OptimisticLockException("conflict")
        service = LinkPendingInvitesOnRegistrationService(saving_repository, mock_audit)

        assert service.link(UserId.generate(), guest_email) == []

    def test_no_matching_invites_links_nothing(self, saving_repository, mock_audit, guest_email):
        saving_repository.find_by_invite_email.return_value = []
        service = LinkPendingInvitesOnRegistrationService(saving_repository, mock_audit)

        assert service.link(UserId.generate(), guest_email) == []
        saving_repository.save.assert_not_called()
