"""Integration tests for request correlation IDs.

Covers:
- ``X-Request-ID`` echo and generation on product endpoints.
- Correlation ID bound into structured log records.
"""

import logging
import uuid

import pytest

pytestmark = pytest.mark.integration

REQUEST_ID = "catalog-request-7f3a"


class TestCorrelationIdMiddleware:
    def test_client_request_id_is_echoed(self, api_client):
        response = api_client.get("/products", HTTP_X_REQUEST_ID=REQUEST_ID)
        assert response.status_code == 200
        assert response["X-Request-ID"] == REQUEST_ID

    def test_missing_request_id_gets_uuid4(self, api_client):
        response = api_client.get("/products")
        generated = response["X-Request-ID"]
        assert uuid.UUID(generated).version == 4

    def test_each_request_gets_its_own_id(self, api_client):
        first = api_client.get("/products")["X-Request-ID"]
        second = api_client.get("/products")["X-Request-ID"]
        assert first != second

    def test_error_responses_carry_request_id(self, api_client):
        response = api_client.get("/products/999999", HTTP_X_REQUEST_ID=REQUEST_ID)
        assert response.status_code == 404
        assert response["X-Request-ID"] == REQUEST_ID

    def test_request_id_bound_into_service_logs(self, api_client, make_product, caplog):
        product = make_product()
        with caplog.at_level(logging.INFO):
            api_client.get(f"/products/{product.id}", HTTP_X_REQUEST_ID=REQUEST_ID)

        retrieved = [
            record.getMessage()
            for record in caplog.records
            if "product.retrieved" in record.getMessage()
        ]
        assert retrieved, [r.getMessage() for r in caplog.records]
        assert REQUEST_ID in retrieved[0]
