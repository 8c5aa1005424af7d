import json
import os
from datetime import date
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "TripPlannerTable")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "trip-planner")

from services.shared.config import reset_config  # noqa: E402
from services.shared.domain import IsoDateTime, TripId, UserId  # noqa: E402
from services.trip.domain.entity import (  # noqa: E402
    Invite,
    ItineraryItem,
    Membership,
    Trip,
)
from services.trip.domain.enum import TripRole, TripStatus, TripVisibility  # noqa: E402
from services.trip.domain.value_object import ItemId  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_config():
    """環境変数を書き換えるテストのために設定キャッシュを毎回破棄する"""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def trip_id():
    """全テスト共通の TripId フィクスチャ"""
    return TripId.generate()


@pytest.fixture
def owner_id():
    return UserId.generate()


@pytest.fixture
def editor_id():
    return UserId.generate()


@pytest.fixture
def viewer_id():
    return UserId.generate()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_item():
    """ItineraryItem を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        place_name: str = "Fushimi Inari",
        item_date: date | None = None,
        notes: str = "",
        latitude: float = 34.9671,
        longitude: float = 135.7727,
    ) -> ItineraryItem:
        return ItineraryItem(
            id=ItemId.generate(),
            place_name=place_name,
            date=item_date,
            notes=notes,
            latitude=latitude,
            longitude=longitude,
        )

    return _factory


@pytest.fixture
def create_trip(trip_id, owner_id):
    """Trip を生成する Factory fixture（Factories as fixtures パターン）

    既定では 2026-01-02..2026-01-03 の非公開旅行で、owner_id が唯一の OWNER。
    """

    def _factory(
        name: str = "Kyoto weekend",
        start_date: date = date(2026, 1, 2),
        end_date: date = date(2026, 1, 3),
        visibility: TripVisibility = TripVisibility.PRIVATE,
        members: dict[UserId, TripRole] | None = None,
        invites: list[Invite] | None = None,
        items: list[ItineraryItem] | None = None,
        version: int = 1,
        id: TripId | None = None,
        status: TripStatus = TripStatus.ACTIVE,
    ) -> Trip:
        roles = {owner_id: TripRole.OWNER, **(members or {})}
        return Trip.build(
            id=id or trip_id,
            name=name,
            start_date=start_date,
            end_date=end_date,
            visibility=visibility,
            memberships=[Membership(user_id=u, role=r) for u, r in roles.items()],
            invites=invites or [],
            items=items or [],
            created_at=IsoDateTime.from_string("2025-12-01T09:00:00+00:00"),
            status=status,
            version=version,
        )

    return _factory


@pytest.fixture
def lambda_context():
    """Logger.inject_lambda_context が参照する LambdaContext のスタブ"""
    context = MagicMock()
    context.function_name = "test-function"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    context.aws_request_id = "test-request-id"
    return context


@pytest.fixture
def api_event():
    """API Gateway (HTTP API) のイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        actor_id: UserId | None = None,
        path_parameters: dict | None = None,
        query_parameters: dict | None = None,
        body: dict | None = None,
    ) -> dict:
        request_context: dict = {"http": {"method": method, "path": "/"}}
        if actor_id is not None:
            request_context["authorizer"] = {"jwt": {"claims": {"sub": str(actor_id)}}}
        event: dict = {
            "version": "2.0",
            "rawPath": "/",
            "requestContext": request_context,
            "pathParameters": path_parameters or {},
        }
        if query_parameters is not None:
            event["queryStringParameters"] = query_parameters
        if body is not None:
            event["body"] = json.dumps(body)
        return event

    return _factory
