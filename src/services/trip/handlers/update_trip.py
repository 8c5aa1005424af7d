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
from services.trip.applications import GetTripService, UpdateTripService
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.request_models import UpdateTripRequest
from services.trip.handlers.response_models import to_trip_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
executor = build_trip_executor(repository)
service = UpdateTripService(executor=executor)
get_service = GetTripService(executor=executor)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行更新 Lambda Handler

    名前・日程は EDITOR 以上、公開範囲は OWNER のみ変更できる。
    """

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    request = UpdateTripRequest.model_validate(request_body(event))

    result = get_service.get(trip_id, actor_id)
    if request.has_detail_changes:
        result = service.update_details(
            trip_id, actor_id, request.name, request.start_date, request.end_date
        )
    if request.visibility is not None and isinstance(result, Success):
        result = service.change_visibility(trip_id, actor_id, request.visibility)

    match result:
        case Success(value=trip):
            role = trip.role_of(actor_id)
            return api_response(200, to_trip_response(trip, role.value if role else None))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
