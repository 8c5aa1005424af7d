from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import Forbidden, NotFound, Success, TripId
from services.shared.utils import (
    access_denied_response,
    api_response,
    get_logger,
    handle_errors,
    path_identifier,
    request_body,
    resolve_actor_id,
    unauthorized_response,
)
from services.trip.applications import InviteCollaboratorService
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.request_models import InviteCollaboratorRequest
from services.trip.handlers.response_models import to_collaborators_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository
from services.user.infrastructure.dynamodb_user_repository import DynamoDBUserRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = InviteCollaboratorService(
    executor=build_trip_executor(repository), user_repository=DynamoDBUserRepository()
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """共同編集者の招待 Lambda Handler（OWNER のみ）"""

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    request = InviteCollaboratorRequest.model_validate(request_body(event))

    match service.invite(trip_id, actor_id, request.email, request.role):
        case Success(value=trip):
            return api_response(201, to_collaborators_response(trip))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
