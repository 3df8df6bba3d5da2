"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from backend.core.form_input import RATE_PRESETS, params_from_form
from backend.core.simulation import simulate
from backend.schemas.form import SimulationForm
from backend.schemas.ping import PingResponse
from backend.schemas.simulation import SimulationParams

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s %s: %d validation error(s)", request.method, request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Report unreadable request bodies as JSON instead of HTML."""
    logger.warning("rejected %s %s: %s", request.method, request.path, exc.description)
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object.")
    return payload


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", service=current_app.config["SERVICE_NAME"])
    return jsonify(response.model_dump())


@api_bp.get("/presets")
def presets() -> Any:
    """Annual rate shortcuts offered next to the rate input."""
    return jsonify([preset.model_dump() for preset in RATE_PRESETS])


@api_bp.post("/simulate")
def simulation() -> Any:
    """Run the simulation for already-numeric parameters."""
    params = SimulationParams.model_validate(_json_body())
    result = simulate(params)
    return jsonify(result.model_dump())


@api_bp.post("/simulate/form")
def simulation_from_form() -> Any:
    """Run the simulation for raw form text; unreadable entries count as 0."""
    form = SimulationForm.model_validate(_json_body())
    result = simulate(params_from_form(form))
    return jsonify(result.model_dump())
