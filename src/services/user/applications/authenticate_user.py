from aws_lambda_powertools import Logger

from services.shared.domain import EmailAddress
from services.shared.domain.exception import AuthenticationException
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher

logger = Logger(child=True)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthenticateUserService:
    """認証ユースケース

    メール不在とパスワード不一致は同じメッセージで失敗させ、アカウントの有無を漏らさない。
    """

    def __init__(self, repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._repository = repository
        self._password_hasher = password_hasher

    def authenticate(self, email: str, password: str) -> User:
        try:
            normalized = EmailAddress(email)
        except ValueError as e:
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE) from e

        user = self._repository.find_by_email(normalized)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            logger.warning("Authentication failed")
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE)
        return user
