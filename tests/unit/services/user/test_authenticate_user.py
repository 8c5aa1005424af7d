from unittest.mock import MagicMock

import pytest

from services.shared.domain import EmailAddress
from services.shared.domain.exception import AuthenticationException
from services.user.applications import AuthenticateUserService


@pytest.fixture
def password_hasher():
    return MagicMock()


@pytest.fixture
def service(mock_repository, password_hasher):
    return AuthenticateUserService(repository=mock_repository, password_hasher=password_hasher)


class TestAuthenticateUserService:
    """AuthenticateUserService のテスト"""

    def test_valid_credentials_return_user(
        self, service, mock_repository, password_hasher, create_user
    ):
        user = create_user()
        mock_repository.find_by_email.return_value = user
        password_hasher.verify.return_value = True

        assert service.authenticate(" ALICE@example.com ", "secret-pass") is user
        mock_repository.find_by_email.assert_called_once_with(
            EmailAddress("alice@example.com")
        )
        password_hasher.verify.assert_called_once_with("secret-pass", "hashed-password")

    @pytest.mark.parametrize(
        "found, verified",
        [(False, False), (True, False)],
        ids=["unknown_email", "wrong_password"],
    )
    def test_failures_share_one_message(
        self, service, mock_repository, password_hasher, create_user, found, verified
    ):
        mock_repository.find_by_email.return_value = create_user() if found else None
        password_hasher.verify.return_value = verified

        with pytest.raises(AuthenticationException, match="^Invalid email or password$"):
            service.authenticate("alice@example.com", "wrong-pass")

    def test_malformed_email_is_authentication_failure(self, service, mock_repository):
        with pytest.raises(AuthenticationException, match="Invalid email or password"):
            service.authenticate("not-an-email", "whatever")

        mock_repository.find_by_email.assert_not_called()
