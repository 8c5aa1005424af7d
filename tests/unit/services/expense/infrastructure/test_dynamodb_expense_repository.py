from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from services.expense.infrastructure.dynamodb_expense_repository import (
    DynamoDBExpenseRepository,
)
from services.shared.domain.exception import OptimisticLockException


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch(
        "services.expense.infrastructure.dynamodb_expense_repository.boto3"
    ) as mock_boto3:
        mock_boto3.resource.return_value.Table.return_value = table
        yield DynamoDBExpenseRepository(table_name="TestTable")


class TestDynamoDBExpenseRepository:
    def test_save_puts_expense_in_trip_partition(self, repository, table, create_expense):
        expense = create_expense(version=0)

        saved = repository.save(expense)

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == f"TRIP#{expense.trip_id}"
        assert item["SK"] == f"EXPENSE#{expense.id}"
        assert item["amount"] == "3500"
        assert saved.version == 1
        assert saved.amount == expense.amount

    def test_conditional_failure_raises_optimistic_lock(
        self, repository, table, create_expense
    ):
        table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": "failed"}},
            "PutItem",
        )

        with pytest.raises(OptimisticLockException):
            repository.save(create_expense(version=2))

    def test_find_by_trip_id_sorts_by_date(self, repository, table, create_expense):
        later = create_expense(description="Later", expense_date=date(2026, 1, 3), version=0)
        earlier = create_expense(description="Earlier", version=0)
        items = []
        for expense in (later, earlier):
            repository.save(expense)
            items.append(table.put_item.call_args.kwargs["Item"])
        table.query.return_value = {"Items": items}

        found = repository.find_by_trip_id(later.trip_id)

        assert [e.description for e in found] == ["Earlier", "Later"]
