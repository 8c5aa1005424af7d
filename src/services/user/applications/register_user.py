from aws_lambda_powertools import Logger

from services.audit.applications import AuditTrail
from services.shared.domain import EmailAddress
from services.shared.domain.exception import DuplicateResourceException
from services.trip.applications import LinkPendingInvitesOnRegistrationService
from services.user.domain.entity import User
from services.user.domain.factory import UserFactory
from services.user.domain.factory.user_factory import UserDetails
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher

logger = Logger(child=True)


class RegisterUserService:
    """利用者登録ユースケース

    保存後に同じメールアドレス宛ての PENDING 招待をひも付ける。
    """

    def __init__(
        self,
        repository: UserRepository,
        factory: UserFactory,
        password_hasher: PasswordHasher,
        audit_trail: AuditTrail,
        invite_linker: LinkPendingInvitesOnRegistrationService,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._password_hasher = password_hasher
        self._audit_trail = audit_trail
        self._invite_linker = invite_linker

    def register(self, user_details: UserDetails) -> User:
        email = EmailAddress(user_details["email"])
        if self._repository.exists_by_email(email):
            raise DuplicateResourceException(f"Email already registered: {email}")

        self._factory.validate_password(user_details["password"])
        password_hash = self._password_hasher.hash(user_details["password"])
        user = self._repository.save(self._factory.create(user_details, password_hash))

        self._audit_trail.record(
            action="USER_CREATED",
            entity_type="USER",
            entity_id=str(user.id),
            actor_id=user.id,
            after_state=user,
            metadata={"aggregate": "user"},
        )
        logger.info("User registered", extra={"user_id": str(user.id)})

        self._invite_linker.link(user.id, user.email)
        return user
