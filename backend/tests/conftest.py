from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.app.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(SERVICE_NAME="growth-simulator-test", LOG_LEVEL="DEBUG"))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
