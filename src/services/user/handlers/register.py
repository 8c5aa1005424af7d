from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.audit.applications import AuditTrail
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)
from services.shared.config import get_config
from services.shared.utils import api_response, get_logger, handle_errors, request_body
from services.trip.applications import (
    LinkPendingInvitesOnRegistrationService,
    TripAuditRecorder,
)
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository
from services.user.applications import RegisterUserService
from services.user.domain.factory import UserDetails, UserFactory
from services.user.handlers.request_models import RegisterUserRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.bcrypt_password_hasher import BcryptPasswordHasher
from services.user.infrastructure.dynamodb_user_repository import DynamoDBUserRepository

logger = get_logger()

config = get_config()
audit_trail = AuditTrail(DynamoDBAuditEventRepository())
service = RegisterUserService(
    repository=DynamoDBUserRepository(),
    factory=UserFactory(),
    password_hasher=BcryptPasswordHasher(rounds=config.bcrypt_rounds),
    audit_trail=audit_trail,
    invite_linker=LinkPendingInvitesOnRegistrationService(
        repository=DynamoDBTripRepository(),
        audit=TripAuditRecorder(audit_trail),
        max_attempts=config.optimistic_lock_retries,
    ),
)


@logger.inject_lambda_context(log_event=False)
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """利用者登録 Lambda Handler

    登録と同時に、同じメールアドレス宛ての保留中の招待を旅行メンバーシップに変換する。
    """

    request = RegisterUserRequest.model_validate(request_body(event))
    user = service.register(_to_user_details(request))
    return api_response(201, to_response(user))


def _to_user_details(request: RegisterUserRequest) -> UserDetails:
    return {
        "email": request.email,
        "password": request.password,
        "display_name": request.display_name,
    }
