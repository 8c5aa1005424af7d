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
from services.trip.applications import AddItineraryItemService, Itinerary
from services.trip.domain.factory import ItineraryItemFactory
from services.trip.handlers.dependencies import build_trip_executor
from services.trip.handlers.request_models import ItineraryItemRequest
from services.trip.handlers.response_models import to_itinerary_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = AddItineraryItemService(
    executor=build_trip_executor(repository), factory=ItineraryItemFactory()
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅程アイテム追加 Lambda Handler（EDITOR 以上）"""

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    request = ItineraryItemRequest.model_validate(request_body(event))
    result = service.add(trip_id, actor_id, request.to_item_details(), request.day_number)

    match result:
        case Success(value=trip):
            return api_response(201, to_itinerary_response(Itinerary.of(trip)))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
