"""
LEI Validator — FastAPI Server
==============================

RESTful API for validating single Legal Entity Identifiers.

Endpoints:
    POST /validate          Validate one LEI (format + checksum)
    GET  /lei/{lei}/parts   Split an LEI into LOU prefix, entity part, check digits
    POST /check-digits      Compute check digits for an 18-character partial LEI
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from lei_validator import __version__
from lei_validator.config import configure_logging
from lei_validator.exceptions import PartialLEIError
from lei_validator.models import LEIParts
from lei_validator.validator import LEIValidator

configure_logging()
logger = logging.getLogger(__name__)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="LEI Validator API",
    description=(
        "ISO 17442 Legal Entity Identifier validation: positional format "
        "checks, ISO 7064 MOD 97-10 checksum verification and check-digit "
        "generation. No registry lookups."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    lei: str = Field(
        ...,
        description="The LEI to validate (case-insensitive).",
        json_schema_extra={"example": "213800D1L3R2MWV39G88"},
    )


class ValidateResponse(BaseModel):
    """Validation verdict plus the positional components of the input."""

    lei: str
    is_valid: bool
    errors: list[str]
    parts: LEIParts

    model_config = {"json_schema_extra": {"example": {
        "lei": "213800D1L3R2MWV39G89",
        "is_valid": False,
        "errors": ["Invalid check digits"],
        "parts": {
            "louPrefix": "2138",
            "entityPart": "00D1L3R2MWV39G",
            "checkDigits": "89",
        },
    }}}


class CheckDigitsRequest(BaseModel):
    """Request body for the /check-digits endpoint."""

    partial_lei: str = Field(
        ...,
        description="The first 18 characters of an LEI.",
        json_schema_extra={"example": "213800D1L3R2MWV39G"},
    )


class CheckDigitsResponse(BaseModel):
    partial_lei: str
    check_digits: str
    lei: str = Field(description="The partial LEI completed with its check digits")


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/validate",
    summary="Validate a Legal Entity Identifier",
    tags=["Validation"],
)
def validate_lei(request: ValidateRequest) -> ValidateResponse:
    """Run the format and checksum checks on one LEI.

    Returns a structured verdict with:
    - **is_valid**: `true` if the LEI passes every check
    - **errors**: validation messages in the order the checks ran
    - **parts**: the LOU prefix, entity part and check digits (unvalidated slices)
    """
    validator = LEIValidator(request.lei)
    result = validator.validate()
    return ValidateResponse(
        lei=result.lei,
        is_valid=result.is_valid,
        errors=result.errors,
        parts=validator.get_parts(),
    )


@app.get(
    "/lei/{lei}/parts",
    summary="Split an LEI into its components",
    tags=["Validation"],
)
def lei_parts(lei: str) -> LEIParts:
    """Slice the LEI at its fixed offsets. No validation is performed."""
    return LEIValidator(lei).get_parts()


@app.post(
    "/check-digits",
    summary="Generate check digits for a partial LEI",
    tags=["Generation"],
    responses={422: {"description": "Partial LEI is not 18 alphanumeric characters"}},
)
def check_digits(request: CheckDigitsRequest) -> CheckDigitsResponse:
    """Compute the MOD 97-10 check digits for the first 18 characters of an LEI."""
    try:
        digits = LEIValidator.generate_check_digits(request.partial_lei)
    except PartialLEIError as exc:
        logger.info("Rejected partial LEI %r: %s", request.partial_lei, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    partial = request.partial_lei.upper()
    return CheckDigitsResponse(
        partial_lei=partial,
        check_digits=digits,
        lei=partial + digits,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
