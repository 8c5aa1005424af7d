from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.audit.applications import SearchAuditEventsService
from services.audit.handlers.request_models import SearchAuditEventsRequest
from services.audit.handlers.response_models import to_response
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)
from services.shared.config import get_config
from services.shared.domain import UserId
from services.shared.utils import (
    api_response,
    get_logger,
    handle_errors,
    resolve_actor_id,
    unauthorized_response,
)

logger = get_logger()

repository = DynamoDBAuditEventRepository()
service = SearchAuditEventsService(repository=repository, config=get_config())


@logger.inject_lambda_context
@handle_errors(logger=logger)
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """監査イベント検索 Lambda Handler（認証済みユーザーのみ）"""

    if resolve_actor_id(event.raw_event) is None:
        return unauthorized_response()

    request = SearchAuditEventsRequest.model_validate(event.query_string_parameters or {})
    events = service.search(
        entity_type=request.entity_type,
        entity_id=request.entity_id,
        actor_id=UserId(request.actor_id) if request.actor_id else None,
        limit=request.limit,
    )
    logger.info("Audit events searched", extra={"result_count": len(events)})
    return api_response(200, to_response(events))
