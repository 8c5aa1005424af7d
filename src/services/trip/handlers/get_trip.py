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
)
from services.trip.applications import GetTripService
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.response_models import to_trip_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = GetTripService(executor=build_trip_executor(repository))


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行詳細取得 Lambda Handler

    非公開の旅行は、存在を明かさないよう権限不足でも 404 を返す。
    """

    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    actor_id = resolve_actor_id(event.raw_event)
    logger.info("Fetching trip details", extra={"trip_id": str(trip_id)})

    match service.get(trip_id, actor_id):
        case Success(value=trip):
            role = trip.role_of(actor_id)
            return api_response(200, to_trip_response(trip, role.value if role else None))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied, reveal_forbidden=False)
