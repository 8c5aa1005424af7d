import json
from unittest.mock import MagicMock, patch

import pytest

from services.audit.domain.value_object import AuditSearchCriteria
from services.audit.infrastructure.dynamodb_audit_event_repository import (
    DynamoDBAuditEventRepository,
)


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch(
        "services.audit.infrastructure.dynamodb_audit_event_repository.boto3"
    ) as mock_boto3:
        mock_boto3.resource.return_value.Table.return_value = table
        yield DynamoDBAuditEventRepository(table_name="TestTable")


class TestDynamoDBAuditEventRepository:
    def test_save_stores_json_states(self, repository, table, create_audit_event, owner_id):
        event = create_audit_event(actor_id=owner_id, after_state={"name": "Kyoto"})

        repository.save(event)

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "AUDIT#TRIP#trip-1"
        assert item["SK"] == f"2026-01-02T09:00:00+00:00#{event.id}"
        assert item["GSI1PK"] == "AUDIT_EVENTS"
        assert json.loads(item["after_state"]) == {"name": "Kyoto"}
        assert json.loads(item["before_state"]) is None
        assert item["actor_id"] == str(owner_id)

    def test_search_by_entity_queries_partition_newest_first(
        self, repository, table, create_audit_event
    ):
        event = create_audit_event()
        repository.save(event)
        table.query.return_value = {"Items": [table.put_item.call_args.kwargs["Item"]]}

        found = repository.search(
            AuditSearchCriteria(limit=10, entity_type="TRIP", entity_id="trip-1")
        )

        assert [e.id for e in found] == [event.id]
        assert found[0].metadata == {"aggregate": "trip"}
        query = table.query.call_args.kwargs
        assert query["ScanIndexForward"] is False
        assert "IndexName" not in query

    def test_search_without_entity_uses_global_index(self, repository, table):
        table.query.return_value = {"Items": []}

        repository.search(AuditSearchCriteria(limit=5, entity_type="TRIP"))

        query = table.query.call_args.kwargs
        assert query["IndexName"] == "GSI1"
        assert "FilterExpression" in query

    def test_search_pages_until_limit(self, repository, table, create_audit_event):
        saved = []
        for n in range(3):
            repository.save(create_audit_event(entity_id=f"trip-{n}"))
            saved.append(table.put_item.call_args.kwargs["Item"])
        table.query.side_effect = [
            {"Items": saved[:1], "LastEvaluatedKey": {"PK": "a"}},
            {"Items": saved[1:], "LastEvaluatedKey": {"PK": "b"}},
        ]

        found = repository.search(AuditSearchCriteria(limit=2))

        assert [e.entity_id for e in found] == ["trip-0", "trip-1"]
        assert table.query.call_count == 2
        assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {"PK": "a"}
