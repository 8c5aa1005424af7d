import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.shared.config import get_config
from services.shared.domain import EmailAddress, IsoDateTime, UserId
from services.shared.domain.exception import DuplicateResourceException
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository


class DynamoDBUserRepository(UserRepository):
    """DynamoDB を使用した UserRepository の具象実装

    利用者本体 (PK=USER#<id>) とメールアドレスの一意性行 (PK=EMAIL#<email>) を
    1トランザクションで書き込む。
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

    def save(self, user: User) -> User:
        """新規利用者を保存する（既存メールアドレスなら DuplicateResourceException）"""
        user_item = {
            "PK": f"USER#{user.id}",
            "SK": "USER",
            "entity_type": "USER",
            "user_id": str(user.id),
            "email": str(user.email),
            "password_hash": user.password_hash,
            "display_name": user.display_name,
            "created_at": str(user.created_at),
            "version": user.version + 1,
        }
        email_item = {
            "PK": f"EMAIL#{user.email}",
            "SK": "EMAIL",
            "entity_type": "USER_EMAIL",
            "user_id": str(user.id),
        }
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": self._serialize(user_item),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": self._serialize(email_item),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise DuplicateResourceException(
                    f"Email already registered: {user.email}"
                ) from e
            raise
        return self._to_entity(user_item)

    def find_by_id(self, user_id: UserId) -> User | None:
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "USER"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: EmailAddress) -> User | None:
        response = self.table.get_item(
            Key={"PK": f"EMAIL#{email}", "SK": "EMAIL"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(UserId.from_string(item["user_id"]))

    def exists_by_email(self, email: EmailAddress) -> bool:
        response = self.table.get_item(
            Key={"PK": f"EMAIL#{email}", "SK": "EMAIL"},
            ConsistentRead=True,
        )
        return "Item" in response

    def _serialize(self, item: dict) -> dict:
        """transact_write_items 用に DynamoDB の型付き表現へ変換する"""
        return {key: self.serializer.serialize(value) for key, value in item.items()}

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId.from_string(item["user_id"]),
            email=EmailAddress(item["email"]),
            password_hash=item["password_hash"],
            display_name=item["display_name"],
            created_at=IsoDateTime.from_string(item["created_at"]),
            version=int(item["version"]),
        )
