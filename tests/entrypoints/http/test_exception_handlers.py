"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient
from pydantic import BaseModel

from emi_lite.domain.errors import DomainError, InternalError, OutOfRangeError, ValidationError
from emi_lite.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "principal", "message": "Must be a number: abc", "code": "INVALID_NUMBER"},
                {"field": "months", "message": "Must be a number: x", "code": "INVALID_NUMBER"},
            ]
        )

    @test_app.get("/domain-error")
    def raise_domain_error() -> None:
        raise DomainError("Generic domain failure")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Calculator view has not been rendered")

    @test_app.get("/out-of-range")
    def raise_out_of_range() -> None:
        raise OutOfRangeError("EMI exceeds the representable range", fields=["emi"])

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


class TestDomainErrorHandler:
    """Tests for the domain error handler."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "Validation failed", "code": "VALIDATION_ERROR"}

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert [error["field"] for error in data["errors"]] == ["principal", "months"]
        assert data["errors"][0]["code"] == "INVALID_NUMBER"

    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/domain-error")

        assert response.status_code == 400
        assert response.json() == {"detail": "Generic domain failure", "code": "DOMAIN_ERROR"}

    def test_out_of_range_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/out-of-range")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "EMI exceeds the representable range",
            "code": "OUT_OF_RANGE",
        }

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Calculator view has not been rendered",
            "code": "INTERNAL_ERROR",
        }

    def test_client_error_is_logged_at_info(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="emi_lite.entrypoints.http.exception_handlers"):
            response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        records = [r for r in caplog.records if r.message == "Client error"]
        assert len(records) == 1
        assert records[0].error_code == "VALIDATION_ERROR"
        assert records[0].path == "/validation-error-with-fields"


class TestUnexpectedErrorHandler:
    def test_unexpected_error_returns_generic_500(self, client: TestClient) -> None:
        """The exception message is logged, not returned."""
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}


class TestPydanticValidationErrors:
    """Tests for Pydantic/FastAPI validation error handling."""

    def test_query_constraint_violation_returns_422(self) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test")
        def test_route(months: int = Query(default=60, ge=1)) -> dict:
            return {"months": months}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/test?months=0")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "months"

    def test_missing_body_field_returns_422(self) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            principal: float

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"principal": body.principal}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/test", json={})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "principal"
        assert data["errors"][0]["code"] == "missing"


class TestErrorResponseFormat:
    def test_all_errors_have_detail_and_code(self, client: TestClient) -> None:
        for endpoint in [
            "/validation-error",
            "/domain-error",
            "/internal-error",
            "/out-of-range",
            "/unexpected-error",
        ]:
            data = client.get(endpoint).json()

            assert isinstance(data["detail"], str), f"{endpoint} missing 'detail'"
            assert isinstance(data["code"], str), f"{endpoint} missing 'code'"
