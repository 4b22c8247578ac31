"""
Tests for the pizza lookup routes.

Key behaviors:
- Exact response bodies and content type for every outcome
- Malformed bodies fail hard unless normalization is switched on
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import Settings, get_catalog, get_settings
from src.api.main import create_app
from src.components.pizza import PizzaEntry

# --- Test Fixtures ---


class OneEntryCatalog:
    def list_entries(self) -> list[PizzaEntry]:
        return [PizzaEntry(name="calzone", price=14)]


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def _post(client: TestClient, content: str | None, path: str = "/") -> tuple[int, str, str]:
    headers = {"content-type": "application/json"}
    response = client.post(path, content=content, headers=headers)
    return response.status_code, response.headers["content-type"], response.text


# --- Lookup Tests ---


class TestLookupPizza:
    """Tests for POST / and POST /pizza."""

    def test_veggie(self, client: TestClient) -> None:
        status, content_type, body = _post(client, '{"pizza":"veggie"}')

        assert status == 200
        assert content_type == "application/json"
        assert body == '{"name":"veggie","price":10}'

    @pytest.mark.parametrize(
        ("name", "price"),
        [("hawaiian", 12), ("pepperoni", 11)],
    )
    def test_pizza_path(self, client: TestClient, name: str, price: int) -> None:
        status, _, body = _post(client, f'{{"pizza":"{name}"}}', path="/pizza")

        assert status == 200
        assert body == f'{{"name":"{name}","price":{price}}}'

    def test_invalid_pizza(self, client: TestClient) -> None:
        status, content_type, body = _post(client, '{"pizza":"invalid"}')

        assert status == 400
        assert content_type == "application/json"
        assert body == '{"error":"Pizza not found"}'

    def test_no_pizza_field(self, client: TestClient) -> None:
        status, _, body = _post(client, '{"topping":"cheese"}')

        assert status == 400
        assert body == '{"error":"No pizza name provided"}'

    def test_no_payload(self, client: TestClient) -> None:
        status, _, body = _post(client, None)

        assert status == 400
        assert body == '{"error":"No payload provided"}'

    def test_repeated_requests_identical(self, client: TestClient) -> None:
        first = _post(client, '{"pizza":"pepperoni"}')
        second = _post(client, '{"pizza":"pepperoni"}')
        assert first == second

    def test_catalog_dependency_override(self, app: FastAPI) -> None:
        app.dependency_overrides[get_catalog] = OneEntryCatalog
        client = TestClient(app)

        status, _, body = _post(client, '{"pizza":"calzone"}')
        assert status == 200
        assert body == '{"name":"calzone","price":14}'

        status, _, body = _post(client, '{"pizza":"veggie"}')
        assert status == 400
        assert body == '{"error":"Pizza not found"}'


# --- Malformed Payload Tests ---


class TestMalformedPayload:
    """Tests for the malformed body policy."""

    def test_malformed_fails_hard_by_default(self, app: FastAPI) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        status, _, _ = _post(client, "{not json")
        assert status == 500

    def test_malformed_as_bad_request(
        self, app: FastAPI, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PIZZA_MALFORMED_AS_BAD_REQUEST", "true")
        settings = Settings()
        app.dependency_overrides[get_settings] = lambda: settings
        client = TestClient(app)

        status, _, body = _post(client, "{not json")
        assert status == 400
        assert body == '{"error":"Malformed payload"}'


# --- Settings Tests ---


class TestSettings:
    """Tests for environment configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in (
            "PIZZA_LOG_LEVEL",
            "PIZZA_MALFORMED_AS_BAD_REQUEST",
            "PIZZA_HOST",
            "PIZZA_PORT",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.malformed_as_bad_request is False
        assert settings.host == "127.0.0.1"
        assert settings.port == 8000

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIZZA_LOG_LEVEL", "debug")
        monkeypatch.setenv("PIZZA_MALFORMED_AS_BAD_REQUEST", "1")
        monkeypatch.setenv("PIZZA_PORT", "9000")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.malformed_as_bad_request is True
        assert settings.port == 9000


# --- Content Type Tests ---


class TestContentType:
    """Tests for content type negotiation on the request body."""

    def test_plain_text_is_no_payload(self, client: TestClient) -> None:
        response = client.post("/", content="veggie", headers={"content-type": "text/plain"})

        assert response.status_code == 400
        assert response.text == '{"error":"No payload provided"}'

    def test_missing_content_type_is_no_payload(self, client: TestClient) -> None:
        response = client.post("/", content='{"pizza":"veggie"}')

        assert response.status_code == 400
        assert response.text == '{"error":"No payload provided"}'

    def test_form_body(self, client: TestClient) -> None:
        response = client.post(
            "/pizza",
            content="pizza=veggie",
            headers={"content-type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.text == '{"name":"veggie","price":10}'

    def test_json_with_charset(self, client: TestClient) -> None:
        response = client.post(
            "/",
            content='{"pizza":"hawaiian"}',
            headers={"content-type": "application/json; charset=utf-8"},
        )

        assert response.status_code == 200
        assert response.text == '{"name":"hawaiian","price":12}'
