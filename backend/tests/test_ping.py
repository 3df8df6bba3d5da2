import logging

from flask.testing import FlaskClient

from backend.app import create_app
from backend.app.config import Settings


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "service": "growth-simulator-test"}


def test_cors_header_echoes_configured_origin(client: FlaskClient):
    response = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_cors_header_is_absent_for_unknown_origin(client: FlaskClient):
    response = client.get("/api/ping", headers={"Origin": "http://evil.example"})

    assert response.status_code == 200
    assert "Access-Control-Allow-Origin" not in response.headers


def test_create_app_applies_log_level_after_logging_is_configured():
    root = logging.getLogger()
    previous = root.level
    try:
        create_app(Settings(LOG_LEVEL="DEBUG"))
        create_app(Settings(LOG_LEVEL="warning"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
