from unittest.mock import MagicMock

import pytest

from services.trip.applications import TripAuditRecorder, TripCommandExecutor


@pytest.fixture
def saving_repository(mock_repository):
    """save で version を1つ進めた集約を返すリポジトリのモック"""
    mock_repository.save.side_effect = lambda trip: trip.with_version(trip.version + 1)
    return mock_repository


@pytest.fixture
def mock_audit():
    return MagicMock(spec=TripAuditRecorder)


@pytest.fixture
def executor(saving_repository, mock_audit):
    return TripCommandExecutor(repository=saving_repository, audit=mock_audit)


@pytest.fixture
def item_details():
    def _factory(place_name="Kiyomizu-dera", item_date=None, notes=""):
        return {
            "place_name": place_name,
            "date": item_date,
            "notes": notes,
            "latitude": 34.9949,
            "longitude": 135.785,
        }

    return _factory
