"""Global error handlers — every failure becomes {"message": ...} with the mapped status.

Uses a throwaway FastAPI app so failures can be raised on demand.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from storefront.api.error_handlers import (
    format_validation_errors, register_error_handlers,
)
from storefront.core.errors import ConflictError, ResourceNotFoundError


class Payload(BaseModel):
    name: str


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise ResourceNotFoundError("Widget", "42")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("name taken")

    @app.get("/unique")
    async def unique():
        raise IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed: widgets.name"),
        )

    @app.get("/no-result")
    async def no_result():
        raise NoResultFound("No row was found")

    @app.get("/operational")
    async def operational():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return app


@pytest.fixture
async def error_client():
    async with AsyncClient(
        transport=ASGITransport(app=_build_app(), raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.mark.parametrize("path, status", [
    ("/not-found", 404),
    ("/conflict", 400),
    ("/unique", 400),
    ("/no-result", 404),
    ("/operational", 500),
    ("/boom", 500),
])
async def test_status_mapping(error_client, path, status):
    res = await error_client.get(path)
    assert res.status_code == status
    assert set(res.json()) == {"message"}


async def test_not_found_message_names_the_resource(error_client):
    res = await error_client.get("/not-found")
    assert res.json()["message"] == "Widget '42' not found"


async def test_unclassified_error_exposes_message_only(error_client):
    res = await error_client.get("/boom")
    assert res.json() == {"message": "kaboom"}


async def test_validation_error_is_400(error_client):
    res = await error_client.post("/payload", json={})
    assert res.status_code == 400
    assert res.json()["message"].startswith("body.name:")


async def test_malformed_json_is_400(error_client):
    res = await error_client.post(
        "/payload", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400


def test_format_validation_errors_joins_locations():
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
    ]
    assert format_validation_errors(errors) == (
        "body.name: Field required; query.limit: Input should be a valid integer"
    )


def test_format_validation_errors_without_details():
    assert format_validation_errors([]) == "Invalid request data"


async def test_unknown_route_uses_message_body(error_client):
    res = await error_client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_wrong_method_uses_message_body(error_client):
    res = await error_client.put("/boom")
    assert res.status_code == 405
    assert res.json() == {"message": "Method Not Allowed"}
    assert "GET" in res.headers["allow"]
