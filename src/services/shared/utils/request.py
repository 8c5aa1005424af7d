from collections.abc import Mapping
from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2

from services.shared.domain import UserId
from services.shared.domain.value_object import UuidIdentifier

_ID = TypeVar("_ID", bound=UuidIdentifier)


def resolve_actor_id(event: Mapping) -> UserId | None:
    """API Gateway (HTTP API) の JWT オーソライザーのクレームから操作者IDを取り出す

    トークン検証は API Gateway 側の責務。未認証や不正な sub は None。
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = (authorizer.get("jwt") or {}).get("claims") or {}
    subject = claims.get("sub")
    if not subject:
        return None
    return UserId.from_string(subject)


def path_identifier(
    event: APIGatewayProxyEventV2, name: str, id_type: type[_ID]
) -> _ID | None:
    """パスパラメータを ID に変換する（欠落・不正な形式は None）"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        return None
    return id_type.from_string(value)


def request_body(event: APIGatewayProxyEventV2) -> dict:
    """JSON ボディ（空なら空の dict）"""
    if not event.body:
        return {}
    return event.json_body
