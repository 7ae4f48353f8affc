import json

import pytest
from fastapi.exceptions import RequestValidationError

from pantry_recipes.app.main import validation_exception_handler


@pytest.mark.asyncio
async def test_validation_handler_formats_errors():
    exc = RequestValidationError(
        errors=[
            {"loc": ("body", "name"), "msg": "field required"},
            {"loc": ("query", "ingredient_ids", 0), "msg": "value is not a valid integer"},
        ]
    )
    response = await validation_exception_handler(None, exc)
    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["error_code"] == "validation_error"
    assert body["message"] == "Invalid request payload."
    assert "request_id" in body and body["request_id"]
    assert {"field": "body.name", "message": "field required"} in body["details"]
    assert {"field": "query.ingredient_ids.0", "message": "value is not a valid integer"} in body["details"]


def test_invalid_query_param_uses_handler(client):
    response = client.get("/api/recipes/can-make", params={"ingredient_ids": "abc"})
    assert response.status_code == 422
    body = response.json()
    assert body["error_code"] == "validation_error"
    assert body["details"][0]["field"].startswith("query.ingredient_ids")
