from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.audit.applications import AuditTrail
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)
from services.expense.applications import CreateExpenseService
from services.expense.domain.factory import ExpenseDetails, ExpenseFactory
from services.expense.handlers.request_models import CreateExpenseRequest
from services.expense.handlers.response_models import to_response
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
    request_body,
    resolve_actor_id,
    unauthorized_response,
)
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

service = CreateExpenseService(
    trip_repository=DynamoDBTripRepository(),
    repository=DynamoDBExpenseRepository(),
    factory=ExpenseFactory(),
    audit_trail=AuditTrail(DynamoDBAuditEventRepository()),
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """経費登録 Lambda Handler（EDITOR 以上）"""

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    trip_id = path_identifier(event, "trip_id", TripId)
    if trip_id is None:
        return access_denied_response(NotFound())

    request = CreateExpenseRequest.model_validate(request_body(event))

    match service.create(trip_id, actor_id, _to_expense_details(request)):
        case Success(value=expense):
            return api_response(201, to_response(expense))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)


def _to_expense_details(request: CreateExpenseRequest) -> ExpenseDetails:
    """リクエストボディから ExpenseDetails を構築する"""

    return {
        "amount": request.amount,
        "currency_code": request.currency,
        "description": request.description,
        "date": request.date,
    }
