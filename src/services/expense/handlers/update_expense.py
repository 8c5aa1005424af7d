from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.audit.applications import AuditTrail
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)
from services.expense.applications import UpdateExpenseService
from services.expense.domain.value_object import ExpenseId
from services.expense.handlers.request_models import UpdateExpenseRequest
from services.expense.handlers.response_models import to_response
from services.expense.infrastructure.dynamodb_expense_repository import (
    DynamoDBExpenseRepository,
)
from services.shared.domain import Forbidden, NotFound, Success
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
from services.trip.infrastructure.dynamodb_trip_repository import DynamoDBTripRepository

logger = get_logger()

service = UpdateExpenseService(
    trip_repository=DynamoDBTripRepository(),
    repository=DynamoDBExpenseRepository(),
    audit_trail=AuditTrail(DynamoDBAuditEventRepository()),
)


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """経費更新・削除 Lambda Handler（EDITOR 以上）

    - PATCH /expenses/{expense_id}: 指定項目の更新
    - DELETE /expenses/{expense_id}: 削除
    """

    actor_id = resolve_actor_id(event.raw_event)
    if actor_id is None:
        return unauthorized_response()
    expense_id = path_identifier(event, "expense_id", ExpenseId)
    if expense_id is None:
        raise ResourceNotFoundException("Expense not found")

    method = event.request_context.http.method.upper()
    if method == "DELETE":
        result = service.delete(expense_id, actor_id)
    else:
        request = UpdateExpenseRequest.model_validate(request_body(event))
        result = service.update(
            expense_id,
            actor_id,
            amount=request.amount,
            currency_code=request.currency,
            description=request.description,
            expense_date=request.date,
        )

    match result:
        case Success() if method == "DELETE":
            return api_response(204, None)
        case Success(value=expense):
            return api_response(200, to_response(expense))
        case NotFound() | Forbidden() as denied:
            return access_denied_response(denied)
