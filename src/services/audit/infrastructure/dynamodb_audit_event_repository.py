import json

import boto3
from boto3.dynamodb.conditions import Attr, Key

from services.audit.domain.entity import AuditEvent
from services.audit.domain.repository import AuditEventRepository
from services.audit.domain.value_object import AuditEventId, AuditSearchCriteria
from services.shared.config import get_config
from services.shared.domain import IsoDateTime, UserId

ALL_EVENTS_PARTITION = "AUDIT_EVENTS"


class DynamoDBAuditEventRepository(AuditEventRepository):
    """DynamoDB を使用した AuditEventRepository の具象実装

    - PK=AUDIT#<entity_type>#<entity_id>, SK=<occurred_at>#<event_id>
    - GSI1PK=AUDIT_EVENTS で全件を新しい順に走査できる
    - スナップショットとメタデータは JSON 文字列で保存する
    """

    def __init__(self, table_name: str | None = None) -> None:
        config = get_config()
        self.table_name = table_name or config.table_name
        self.dynamodb = boto3.resource(
            "dynamodb",
            region_name=config.aws_region,
            endpoint_url=config.dynamodb_endpoint,
        )
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, event: AuditEvent) -> None:
        sort_key = f"{event.occurred_at}#{event.id}"
        item = {
            "PK": f"AUDIT#{event.entity_type}#{event.entity_id}",
            "SK": sort_key,
            "entity_type": "AUDIT_EVENT",
            "event_id": str(event.id),
            "action": event.action,
            "audited_entity_type": event.entity_type,
            "audited_entity_id": event.entity_id,
            "occurred_at": str(event.occurred_at),
            "before_state": json.dumps(event.before_state),
            "after_state": json.dumps(event.after_state),
            "metadata": json.dumps(event.metadata),
            "GSI1PK": ALL_EVENTS_PARTITION,
            "GSI1SK": sort_key,
        }
        if event.actor_id is not None:
            item["actor_id"] = str(event.actor_id)
        self.table.put_item(Item=item)

    def search(self, criteria: AuditSearchCriteria) -> list[AuditEvent]:
        """条件に一致するイベントを新しい順に返す

        FilterExpression は Limit 適用後に評価されるため、件数が揃うまでページを辿る。
        """
        query: dict = {"ScanIndexForward": False}
        filter_expression = None

        if criteria.entity_type and criteria.entity_id:
            query["KeyConditionExpression"] = Key("PK").eq(
                f"AUDIT#{criteria.entity_type}#{criteria.entity_id}"
            )
        else:
            query["IndexName"] = "GSI1"
            query["KeyConditionExpression"] = Key("GSI1PK").eq(ALL_EVENTS_PARTITION)
            if criteria.entity_type:
                filter_expression = Attr("audited_entity_type").eq(criteria.entity_type)

        if criteria.actor_id is not None:
            actor_filter = Attr("actor_id").eq(str(criteria.actor_id))
            filter_expression = (
                actor_filter if filter_expression is None else filter_expression & actor_filter
            )
        if filter_expression is not None:
            query["FilterExpression"] = filter_expression

        items: list[dict] = []
        while len(items) < criteria.limit:
            query["Limit"] = criteria.limit - len(items)
            response = self.table.query(**query)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query["ExclusiveStartKey"] = last_key

        return [self._to_entity(item) for item in items[: criteria.limit]]

    def _to_entity(self, item: dict) -> AuditEvent:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        actor_id = item.get("actor_id")
        return AuditEvent(
            id=AuditEventId.from_string(item["event_id"]),
            action=item["action"],
            entity_type=item["audited_entity_type"],
            entity_id=item["audited_entity_id"],
            actor_id=UserId.from_string(actor_id) if actor_id else None,
            occurred_at=IsoDateTime.from_string(item["occurred_at"]),
            before_state=json.loads(item["before_state"]),
            after_state=json.loads(item["after_state"]),
            metadata=json.loads(item["metadata"]),
        )
