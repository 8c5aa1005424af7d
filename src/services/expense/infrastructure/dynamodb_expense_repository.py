from datetime import date
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.expense.domain.entity import Expense
from services.expense.domain.repository import ExpenseRepository
from services.expense.domain.value_object import ExpenseId
from services.shared.config import get_config
from services.shared.domain import Currency, IsoDateTime, Money, TripId, UserId
from services.shared.domain.exception import OptimisticLockException


class DynamoDBExpenseRepository(ExpenseRepository):
    """DynamoDB を使用した ExpenseRepository の具象実装

    旅行と同じパーティション (PK=TRIP#<trip>, SK=EXPENSE#<id>) に置き、
    旅行の削除でまとめて消えるようにする。ID 検索は GSI1 を使う。
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

    def save(self, expense: Expense) -> Expense:
        item = {
            "PK": f"TRIP#{expense.trip_id}",
            "SK": f"EXPENSE#{expense.id}",
            "entity_type": "EXPENSE",
            "expense_id": str(expense.id),
            "trip_id": str(expense.trip_id),
            "created_by": str(expense.created_by),
            "amount": str(expense.amount.amount),
            "currency": str(expense.amount.currency),
            "description": expense.description,
            "date": expense.date.isoformat(),
            "created_at": str(expense.created_at),
            "version": expense.version + 1,
            "GSI1PK": f"EXPENSE#{expense.id}",
            "GSI1SK": f"TRIP#{expense.trip_id}",
        }
        if expense.is_new:
            condition = Attr("PK").not_exists()
        else:
            condition = Attr("version").eq(expense.version)

        try:
            self.table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Expense was modified concurrently: expense_id={expense.id}"
                ) from e
            raise
        return self._to_entity(item)

    def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"EXPENSE#{expense_id}"),
        )
        items = response.get("Items", [])
        if not items:
            return None

        # GSI は結果整合のため本体を読み直す
        response = self.table.get_item(
            Key={"PK": items[0]["PK"], "SK": items[0]["SK"]},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_trip_id(self, trip_id: TripId) -> list[Expense]:
        query: dict = {
            "KeyConditionExpression": Key("PK").eq(f"TRIP#{trip_id}")
            & Key("SK").begins_with("EXPENSE#"),
            "ConsistentRead": True,
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**query)
            items += response.get("Items", [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query["ExclusiveStartKey"] = last_key

        expenses = [self._to_entity(item) for item in items]
        return sorted(expenses, key=lambda e: (e.date, e.created_at.value))

    def delete(self, expense: Expense) -> None:
        self.table.delete_item(
            Key={"PK": f"TRIP#{expense.trip_id}", "SK": f"EXPENSE#{expense.id}"}
        )

    def _to_entity(self, item: dict) -> Expense:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Expense(
            id=ExpenseId.from_string(item["expense_id"]),
            trip_id=TripId.from_string(item["trip_id"]),
            created_by=UserId.from_string(item["created_by"]),
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            description=item.get("description", ""),
            date=date.fromisoformat(item["date"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
            version=int(item["version"]),
        )
