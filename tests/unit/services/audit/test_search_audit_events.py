import pytest

from services.audit.applications import SearchAuditEventsService
from services.shared.config import Config


@pytest.fixture
def config():
    return Config(
        table_name="TestTable",
        aws_region="ap-northeast-1",
        service_name="trip-planner",
        audit_search_default_limit=100,
        audit_search_max_limit=500,
    )


@pytest.fixture
def service(mock_repository, config):
    mock_repository.search.return_value = []
    return SearchAuditEventsService(repository=mock_repository, config=config)


class TestSearchAuditEventsService:
    """SearchAuditEventsService のテスト"""

    @pytest.mark.parametrize(
        "requested, expected",
        [(None, 100), (0, 1), (-5, 1), (50, 50), (500, 500), (10_000, 500)],
    )
    def test_limit_is_clamped(self, service, mock_repository, requested, expected):
        service.search(limit=requested)

        criteria = mock_repository.search.call_args[0][0]
        assert criteria.limit == expected

    def test_filters_are_passed_through(self, service, mock_repository, owner_id):
        service.search(entity_type="TRIP", entity_id="trip-1", actor_id=owner_id, limit=10)

        criteria = mock_repository.search.call_args[0][0]
        assert criteria.entity_type == "TRIP"
        assert criteria.entity_id == "trip-1"
        assert criteria.actor_id == owner_id

    def test_blank_filters_become_none(self, service, mock_repository):
        service.search(entity_type="", entity_id="")

        criteria = mock_repository.search.call_args[0][0]
        assert criteria.entity_type is None
        assert criteria.entity_id is None

    def test_entity_id_requires_entity_type(self, service, mock_repository):
        with pytest.raises(ValueError, match="entity_type is required"):
            service.search(entity_id="trip-1")

        mock_repository.search.assert_not_called()
