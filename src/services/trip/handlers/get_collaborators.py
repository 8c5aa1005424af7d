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
    resolve_actor_id,
    unauthorized_response,
)
from services.trip.applications import GetTripService
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.response_models import to_collaborators_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = GetTripService(executor=build_trip_executor(repository))


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """メンバーと招待の一覧取得 Lambda Handler（OWNER のみ）"""

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    match service.get_collaborators(trip_id, actor_id):
        case Success(value=trip):
            return api_response(200, to_collaborators_response(trip))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
