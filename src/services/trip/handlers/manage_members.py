from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import Forbidden, NotFound, Success, TripId, UserId
from services.shared.domain.exception import ResourceNotFoundException
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
from services.trip.applications import ManageTripMembershipService
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.request_models import ChangeMemberRoleRequest
from services.trip.handlers.response_models import to_collaborators_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = ManageTripMembershipService(executor=build_trip_executor(repository))


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """メンバー管理 Lambda Handler

    - PATCH /trips/{trip_id}/members/{user_id}: ロール変更（OWNER のみ）
    - DELETE /trips/{trip_id}/members/{user_id}: メンバー削除（OWNER のみ、自分自身なら脱退）
    """

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())
    target_id = path_identifier(event, "user_id", UserId)
    if target_id is None:
        raise ResourceNotFoundException("Member not found")

    method = event.request_context.http.method.upper()
    if method == "PATCH":
        request = ChangeMemberRoleRequest.model_validate(request_body(event))
        result = service.change_role(trip_id, actor_id, target_id, request.role)
    elif method == "DELETE" and target_id == actor_id:
        result = service.leave(trip_id, actor_id)
    elif method == "DELETE":
        result = service.remove_member(trip_id, actor_id, target_id)
    else:
        return api_response(405, {"message": f"Method not allowed: {method}"})

    match result:
        case Success(value=trip) if trip.is_member(actor_id):
            return api_response(200, to_collaborators_response(trip))
        case Success():
            return api_response(204, None)
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
