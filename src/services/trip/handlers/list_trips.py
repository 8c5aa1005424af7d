from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils import (
    api_response,
    get_logger,
    handle_errors,
    resolve_actor_id,
    unauthorized_response,
)
from services.trip.applications import ListTripsService
from services.trip.handlers.request_models import ListTripsRequest
from services.trip.handlers.response_models import to_trip_list_response
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

repository = DynamoDBTripRepository()
service = ListTripsService(repository=repository)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """参加している旅行の一覧取得 Lambda Handler

    ?status=ACTIVE|ARCHIVED|ALL で絞り込む（既定は ACTIVE）。
    """

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()

    request = ListTripsRequest.model_validate(event.query_string_parameters or {})
    trips = service.list(actor_id, request.status)
    logger.info(
        "Listing trips",
        extra={"trip_count": len(trips), "status_filter": request.status.value},
    )
    return api_response(200, to_trip_list_response(trips, actor_id))
