from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils import (
    api_response,
    get_logger,
    handle_errors,
    request_body,
    resolve_actor_id,
    unauthorized_response,
)
from services.trip.applications import CreateTripService
from services.trip.domain.enum import TripRole
from services.trip.domain.factory import TripDetails, TripFactory
from services.trip.handlers.dependencies import build_trip_audit
from services.trip.handlers.request_models import CreateTripRequest
from services.trip.handlers.response_models import to_trip_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = CreateTripService(
    repository=repository, factory=TripFactory(), audit=build_trip_audit()
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行作成 Lambda Handler"""

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()

    request = CreateTripRequest.model_validate(request_body(event))
    trip = service.create(actor_id, _to_trip_details(request))
    return api_response(201, to_trip_response(trip, TripRole.OWNER.value))


def _to_trip_details(request: CreateTripRequest) -> TripDetails:
    """リクエストボディから TripDetails を構築する"""

    return {
        "name": request.name,
        "start_date": request.start_date,
        "end_date": request.end_date,
        "visibility": request.visibility,
    }
