"""Integration tests for the generated OpenAPI document.

Covers:
- Schema endpoint and Swagger UI availability.
- Documented status codes per product operation.
"""

import json

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture()
def schema(api_client):
    response = api_client.get("/api/schema/", {"format": "json"})
    assert response.status_code == 200
    return json.loads(response.content)


def _status_codes(schema, path, method):
    return set(schema["paths"][path][method]["responses"])


class TestOpenApiSchema:
    def test_documents_product_paths(self, schema):
        assert "/products" in schema["paths"]
        assert "/products/{id}" in schema["paths"]

    def test_collection_operations(self, schema):
        assert _status_codes(schema, "/products", "get") == {"200"}
        assert _status_codes(schema, "/products", "post") == {"201", "400"}

    def test_item_operations(self, schema):
        assert _status_codes(schema, "/products/{id}", "get") == {"200", "404"}
        assert _status_codes(schema, "/products/{id}", "put") == {"204", "400", "404"}
        assert _status_codes(schema, "/products/{id}", "delete") == {"204", "404"}

    def test_patch_is_not_documented(self, schema):
        assert "patch" not in schema["paths"]["/products/{id}"]

    def test_swagger_ui_served(self, api_client):
        response = api_client.get("/api/docs/")
        assert response.status_code == 200
