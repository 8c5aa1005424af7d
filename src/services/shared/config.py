from os import environ

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """実行時設定（環境変数から生成、不変）"""

    model_config = ConfigDict(frozen=True)

    table_name: str
    aws_region: str
    dynamodb_endpoint: str | None = None
    service_name: str
    log_level: str = "INFO"
    audit_search_default_limit: int = Field(default=100, ge=1)
    audit_search_max_limit: int = Field(default=500, ge=1)
    optimistic_lock_retries: int = Field(default=3, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


_cached_config: Config | None = None


def reset_config() -> None:
    """キャッシュ済みの設定を破棄する（テスト用）"""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        table_name=environ.get("TABLE_NAME", "TripPlannerTable"),
        aws_region=environ.get("AWS_REGION", "ap-northeast-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT") or None,
        service_name=environ.get("SERVICE_NAME", "trip-planner"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        audit_search_default_limit=int(environ.get("AUDIT_SEARCH_DEFAULT_LIMIT", "100")),
        audit_search_max_limit=int(environ.get("AUDIT_SEARCH_MAX_LIMIT", "500")),
        optimistic_lock_retries=int(environ.get("OPTIMISTIC_LOCK_RETRIES", "3")),
        bcrypt_rounds=int(environ.get("BCRYPT_ROUNDS", "12")),
    )
    return _cached_config
