from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.expense.applications import ListExpensesService
from services.expense.handlers.response_models import to_list_response
from services.expense.infrastructure.dynamodb_expense_repository import (
    DynamoDBExpenseRepository,
)
from services.shared.domain import Forbidden, NotFound, Success, TripId
from services.shared.utils import (
    access_denied_response,
    api_response,
    get_logger,
    handle_errors,
    path_identifier,
    resolve_actor_id,
)
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

service = ListExpensesService(
    trip_repository=DynamoDBTripRepository(), repository=DynamoDBExpenseRepository()
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """経費一覧 Lambda Handler（メンバー、または公開旅行）"""

    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    match service.list(trip_id, resolve_actor_id(event.raw_event)):
        case Success(value=summary):
            return api_response(200, to_list_response(summary))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied, reveal_forbidden=False)
