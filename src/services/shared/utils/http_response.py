import json

from pydantic import ValidationError

from services.shared.domain.exception import (
    AuthenticationException,
    BusinessRuleViolationException,
    ConflictException,
    ResourceNotFoundException,
)
from services.shared.domain.result import Forbidden, NotFound


def api_response(status_code: int, body: dict | list | None) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    response: dict = {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
    }
    if body is not None:
        response["body"] = json.dumps(body, default=str)
    return response


def error_response(error: Exception) -> dict | None:
    """ドメイン例外を安定した HTTP ステータスに変換する

    想定外の例外は None を返す（呼び出し側で 500 としてログに残す）。
    """
    if isinstance(error, ValidationError):
        return api_response(
            400, {"message": "Invalid request", "errors": error.errors(include_url=False)}
        )
    if isinstance(error, (BusinessRuleViolationException, ValueError)):
        return api_response(400, {"message": str(error) or "Invalid request"})
    if isinstance(error, AuthenticationException):
        return api_response(401, {"message": str(error)})
    if isinstance(error, ResourceNotFoundException):
        return api_response(404, {"message": str(error) or "Not found"})
    if isinstance(error, ConflictException):
        return api_response(409, {"message": str(error) or "Conflict"})
    return None


def access_denied_response(
    result: NotFound | Forbidden, *, reveal_forbidden: bool = True
) -> dict:
    """アクセスゲートの拒否結果を HTTP レスポンスに変換する

    reveal_forbidden=False の場合、非公開の旅行の存在を隠すため Forbidden も 404 にする。
    """
    match result:
        case NotFound():
            return api_response(404, {"message": "Trip not found"})
        case Forbidden():
            if reveal_forbidden:
                return api_response(403, {"message": "Forbidden"})
            return api_response(404, {"message": "Trip not found"})


def unauthorized_response() -> dict:
    return api_response(401, {"message": "Authentication required"})
