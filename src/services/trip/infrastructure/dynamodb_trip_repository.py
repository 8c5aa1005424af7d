from datetime import date

import boto3
from boto3.dynamodb.conditions import Key
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.shared.config import get_config
from services.shared.domain import EmailAddress, IsoDateTime, TripId, UserId
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    OptimisticLockException,
)
from services.trip.domain.entity import Invite, ItineraryItem, Membership, Trip
from services.trip.domain.enum import InviteStatus, TripRole, TripStatus, TripVisibility
from services.trip.domain.repository import TripRepository
from services.trip.domain.value_object import InviteId, ItemId

TRIP_SK = "TRIP"
# DynamoDB の TransactWriteItems は1回あたり100アクションまで
MAX_TRANSACT_ITEMS = 100
MEMBER_PREFIX = "MEMBER#"
INVITE_PREFIX = "INVITE#"


class DynamoDBTripRepository(TripRepository):
    """DynamoDB を使用した TripRepository の具象実装

    集約本体は PK=TRIP#<id>, SK=TRIP の1アイテムに保存する。
    ユーザー別・招待メール別の検索用に、同じパーティションへ索引行
    (MEMBER#<user> / INVITE#<email>) を置き、本体と同じトランザクションで書き込む。
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
        self.client = self.dynamodb.meta.client
        self.serializer = TypeSerializer()

    def save(self, trip: Trip) -> Trip:
        """集約と索引行をまとめて書き込み、バージョンを1つ進めた集約を返す"""
        saved = trip.with_version(trip.version + 1)
        pk = f"TRIP#{trip.id}"

        trip_put: dict = {
            "TableName": self.table_name,
            "Item": self._serialize(self._to_item(saved)),
        }
        if trip.is_new:
            trip_put["ConditionExpression"] = "attribute_not_exists(PK)"
        else:
            trip_put["ConditionExpression"] = "#version = :expected"
            trip_put["ExpressionAttributeNames"] = {"#version": "version"}
            trip_put["ExpressionAttributeValues"] = {
                ":expected": self.serializer.serialize(trip.version)
            }

        index_items = self._index_items(saved)
        stale_keys = set() if trip.is_new else self._index_sort_keys(pk) - set(index_items)

        transact_items: list[dict] = [{"Put": trip_put}]
        transact_items += [
            {"Put": {"TableName": self.table_name, "Item": self._serialize(item)}}
            for item in index_items.values()
        ]
        transact_items += [
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": self._serialize({"PK": pk, "SK": sort_key}),
                }
            }
            for sort_key in sorted(stale_keys)
        ]
        if len(transact_items) > MAX_TRANSACT_ITEMS:
            raise BusinessRuleViolationException(
                f"Trip has too many members and pending invites to save: "
                f"{len(transact_items)} writes exceed the limit of {MAX_TRANSACT_ITEMS}"
            )

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if _is_condition_failure(e):
                raise OptimisticLockException(
                    f"Trip was modified concurrently: trip_id={trip.id}, "
                    f"expected version {trip.version}"
                ) from e
            raise
        return saved

    def find_by_id(self, trip_id: TripId) -> Trip | None:
        response = self.table.get_item(
            Key={"PK": f"TRIP#{trip_id}", "SK": TRIP_SK},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[Trip]:
        return self._find_by_index(f"USER#{user_id}")

    def find_by_invite_email(self, email: EmailAddress) -> list[Trip]:
        trips = self._find_by_index(f"INVITE#{email}")
        return [trip for trip in trips if trip.pending_invite_for(email) is not None]

    def delete(self, trip_id: TripId) -> None:
        """パーティション内の全アイテム（索引行・経費を含む）を削除する"""
        pk = f"TRIP#{trip_id}"
        with self.table.batch_writer() as batch:
            for key in self._partition_keys(pk):
                batch.delete_item(Key=key)

    def _find_by_index(self, gsi1pk: str) -> list[Trip]:
        """GSI1 で旅行 ID を引き、本体は強い整合性で読み直す"""
        trip_ids: list[str] = []
        query: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(gsi1pk),
        }
        while True:
            response = self.table.query(**query)
            trip_ids += [item["trip_id"] for item in response.get("Items", [])]
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query["ExclusiveStartKey"] = last_key

        trips = []
        for trip_id in dict.fromkeys(trip_ids):
            trip = self.find_by_id(TripId.from_string(trip_id))
            if trip is not None:
                trips.append(trip)
        return trips

    def _partition_keys(self, pk: str) -> list[dict]:
        keys: list[dict] = []
        query: dict = {
            "KeyConditionExpression": Key("PK").eq(pk),
            "ProjectionExpression": "PK, SK",
            "ConsistentRead": True,
        }
        while True:
            response = self.table.query(**query)
            keys += response.get("Items", [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query["ExclusiveStartKey"] = last_key
        return keys

    def _index_sort_keys(self, pk: str) -> set[str]:
        return {
            key["SK"]
            for key in self._partition_keys(pk)
            if key["SK"].startswith((MEMBER_PREFIX, INVITE_PREFIX))
        }

    def _index_items(self, trip: Trip) -> dict[str, dict]:
        pk = f"TRIP#{trip.id}"
        items: dict[str, dict] = {}
        for membership in trip.memberships:
            sort_key = f"{MEMBER_PREFIX}{membership.user_id}"
            items[sort_key] = {
                "PK": pk,
                "SK": sort_key,
                "entity_type": "TRIP_MEMBER",
                "trip_id": str(trip.id),
                "role": membership.role.value,
                "GSI1PK": f"USER#{membership.user_id}",
                "GSI1SK": pk,
            }
        for invite in trip.invites:
            if not invite.is_pending:
                continue
            sort_key = f"{INVITE_PREFIX}{invite.email}"
            items[sort_key] = {
                "PK": pk,
                "SK": sort_key,
                "entity_type": "TRIP_INVITE",
                "trip_id": str(trip.id),
                "role": invite.role.value,
                "GSI1PK": f"INVITE#{invite.email}",
                "GSI1SK": pk,
            }
        return items

    def _serialize(self, item: dict) -> dict:
        """transact_write_items 用に DynamoDB の型付き表現へ変換する"""
        return {key: self.serializer.serialize(value) for key, value in item.items()}

    def _to_item(self, trip: Trip) -> dict:
        return {
            "PK": f"TRIP#{trip.id}",
            "SK": TRIP_SK,
            "entity_type": "TRIP",
            "trip_id": str(trip.id),
            "name": trip.name,
            "start_date": trip.start_date.isoformat(),
            "end_date": trip.end_date.isoformat(),
            "visibility": trip.visibility.value,
            "status": trip.status.value,
            "created_at": str(trip.created_at),
            "version": trip.version,
            "memberships": [
                {"user_id": str(m.user_id), "role": m.role.value} for m in trip.memberships
            ],
            "invites": [
                {
                    "invite_id": str(i.id),
                    "email": str(i.email),
                    "role": i.role.value,
                    "status": i.status.value,
                    "created_at": str(i.created_at),
                }
                for i in trip.invites
            ],
            # 座標は float のまま保存できないため文字列で持つ
            "items": [
                {
                    "item_id": str(i.id),
                    "place_name": i.place_name,
                    "date": i.date.isoformat() if i.date else None,
                    "notes": i.notes,
                    "latitude": str(i.latitude),
                    "longitude": str(i.longitude),
                }
                for i in trip.items
            ],
        }

    def _to_entity(self, item: dict) -> Trip:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Trip.build(
            id=TripId.from_string(item["trip_id"]),
            name=item["name"],
            start_date=date.fromisoformat(item["start_date"]),
            end_date=date.fromisoformat(item["end_date"]),
            visibility=TripVisibility(item["visibility"]),
            status=TripStatus(item.get("status", TripStatus.ACTIVE.value)),
            memberships=[
                Membership(
                    user_id=UserId.from_string(m["user_id"]),
                    role=TripRole(m["role"]),
                )
                for m in item.get("memberships", [])
            ],
            invites=[
                Invite(
                    id=InviteId.from_string(i["invite_id"]),
                    email=EmailAddress(i["email"]),
                    role=TripRole(i["role"]),
                    status=InviteStatus(i["status"]),
                    created_at=IsoDateTime.from_string(i["created_at"]),
                )
                for i in item.get("invites", [])
            ],
            items=[
                ItineraryItem(
                    id=ItemId.from_string(i["item_id"]),
                    place_name=i["place_name"],
                    date=date.fromisoformat(i["date"]) if i.get("date") else None,
                    notes=i.get("notes", ""),
                    latitude=float(i["latitude"]),
                    longitude=float(i["longitude"]),
                )
                for i in item.get("items", [])
            ],
            created_at=IsoDateTime.from_string(item["created_at"]),
            version=int(item["version"]),
        )


def _is_condition_failure(error: ClientError) -> bool:
    code = error.response["Error"]["Code"]
    if code == "ConditionalCheckFailedException":
        return True
    if code != "TransactionCanceledException":
        return False
    reasons = error.response.get("CancellationReasons", [])
    return any(reason.get("Code") == "ConditionalCheckFailed" for reason in reasons)
