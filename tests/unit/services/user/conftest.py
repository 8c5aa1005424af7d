import pytest

from services.shared.domain import EmailAddress, IsoDateTime, UserId
from services.user.domain.entity import User


@pytest.fixture
def create_user():
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        email: str = "alice@example.com",
        password_hash: str = "hashed-password",
        display_name: str = "Alice",
    ) -> User:
        return User(
            id=UserId.generate(),
            email=EmailAddress(email),
            password_hash=password_hash,
            display_name=display_name,
            created_at=IsoDateTime.from_string("2026-01-01T00:00:00+00:00"),
            version=1,
        )

    return _factory


@pytest.fixture
def user_details():
    return {
        "email": "Alice@Example.com",
        "password": "correct horse",
        "display_name": " Alice ",
    }
