from aws_lambda_powertools import Logger

from services.shared.config import get_config


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名と設定済みログレベルで Logger を生成する"""
    config = get_config()
    return Logger(service=service_name or config.service_name, level=config.log_level)
