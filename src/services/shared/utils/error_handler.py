from collections.abc import Callable

from aws_lambda_powertools import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils.http_response import api_response, error_response


@lambda_handler_decorator
def handle_errors(
    handler: Callable[[dict, LambdaContext], dict],
    event: dict,
    context: LambdaContext,
    logger: Logger | None = None,
) -> dict:
    """ドメイン例外を HTTP レスポンスに変換するミドルウェア

    変換できない例外はスタックトレースを残して 500 を返す。
    """
    logger = logger or Logger()
    try:
        return handler(event, context)
    except Exception as e:
        response = error_response(e)
        if response is None:
            logger.exception("Unhandled error")
            return api_response(500, {"message": "Internal server error"})
        logger.warning(
            "Request rejected",
            extra={"error_type": type(e).__name__, "status_code": response["statusCode"]},
        )
        return response
