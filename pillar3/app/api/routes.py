"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from pillar3.config import get_settings
from pillar3.core.health import get_health
from pillar3.core.projection import project
from pillar3.domain.presets import list_presets
from pillar3.domain.wizard import WizardError, previous_step, submit_step
from pillar3.models import SimulationRequest
from pillar3.schemas.health import HealthResponse
from pillar3.schemas.presets import PresetsResponse
from pillar3.schemas.projection import ProjectionResponse
from pillar3.schemas.wizard import (
    WizardAdvanceRequest,
    WizardBackRequest,
    WizardStateResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload on %s: %d error(s)", request.path, exc.error_count())
    # ctx may hold the raised ValueError, which is not JSON serialisable
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(WizardError)
def _handle_wizard_error(exc: WizardError):
    return jsonify({"detail": str(exc)}), HTTPStatus.CONFLICT


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = HealthResponse.model_validate(get_health())
    return jsonify(response.model_dump())


@api_bp.get("/presets")
def presets() -> Any:
    """Lifestyle targets and investment profiles, optionally sized to ?annualIncome=."""
    annual_income = request.args.get("annualIncome", default=0.0, type=float)
    response = PresetsResponse(
        **list_presets(max(annual_income, 0.0)),
        pillar3aAnnualCap=get_settings().pillar_3a_annual_cap,
    )
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Run the accumulation/decumulation projection for a validated input."""
    payload = SimulationRequest.model_validate(_json_body())
    result = project(payload.to_simulation_input(), current_year=payload.currentYear)

    logger.info(
        "projection %d-%d-%d: capital at retirement %.2f, gap %.2f",
        payload.currentAge,
        payload.retirementAge,
        payload.lifeExpectancy,
        result.summary.capitalAtRetirement,
        result.summary.incomeGap,
    )
    response = ProjectionResponse.model_validate(result.model_dump())
    return jsonify(response.model_dump())


@api_bp.post("/wizard/next")
def wizard_next() -> Any:
    """Validate the current step's form and advance."""
    payload = WizardAdvanceRequest.model_validate(_json_body())
    state = submit_step(payload.state, payload.form)
    return jsonify(WizardStateResponse.from_state(state).model_dump(mode="json"))


@api_bp.post("/wizard/back")
def wizard_back() -> Any:
    payload = WizardBackRequest.model_validate(_json_body())
    state = previous_step(payload.state)
    return jsonify(WizardStateResponse.from_state(state).model_dump(mode="json"))
