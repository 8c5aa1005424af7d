import json

import pytest
from pydantic import BaseModel, ValidationError

from services.shared.domain import Forbidden, NotFound
from services.shared.domain.exception import (
    AuthenticationException,
    BusinessRuleViolationException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils import access_denied_response, api_response, error_response


class _Payload(BaseModel):
    count: int


class TestErrorResponse:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (BusinessRuleViolationException("End date cannot be before start date"), 400),
            (ValueError("Invalid email address: x"), 400),
            (AuthenticationException("Invalid email or password"), 401),
            (ResourceNotFoundException("Itinerary item not found"), 404),
            (DuplicateResourceException("already a member"), 409),
            (OptimisticLockException("modified concurrently"), 409),
        ],
    )
    def test_domain_errors_map_to_stable_status(self, error, status_code):
        response = error_response(error)
        assert response["statusCode"] == status_code
        assert json.loads(response["body"])["message"] == str(error)

    def test_pydantic_validation_error_is_bad_request(self):
        with pytest.raises(ValidationError) as exc_info:
            _Payload.model_validate({"count": "many"})

        response = error_response(exc_info.value)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["errors"][0]["loc"] == ["count"]

    def test_unexpected_error_is_not_mapped(self):
        assert error_response(RuntimeError("boom")) is None


class TestAccessDeniedResponse:
    def test_not_found(self):
        assert access_denied_response(NotFound())["statusCode"] == 404

    def test_forbidden_revealed_for_writes(self):
        assert access_denied_response(Forbidden())["statusCode"] == 403

    def test_forbidden_hidden_for_reads(self):
        response = access_denied_response(Forbidden(), reveal_forbidden=False)
        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"message": "Trip not found"}


class TestApiResponse:
    def test_no_body(self):
        assert "body" not in api_response(204, None)
