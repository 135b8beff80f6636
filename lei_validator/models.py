"""
Pydantic models for LEI results: typed output at the library boundary.

The validator itself works on plain strings; these models are what callers
(and the HTTP API) receive.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ─── Validation Result ──────────────────────────────────────────────


class ValidationResult(BaseModel):
    """Outcome of a single validate() call."""

    lei: str  # Canonical (uppercased) value that was checked
    is_valid: bool
    errors: list[str] = Field(default_factory=list)  # In check order


# ─── LEI Components ─────────────────────────────────────────────────


class LEIParts(BaseModel):
    """The three fixed-offset components of an LEI.

    Built by plain slicing: on malformed input the fields simply hold
    whatever characters exist at those positions (possibly empty).
    """

    model_config = ConfigDict(populate_by_name=True)

    lou_prefix: str = Field(alias="louPrefix")  # Characters 1-4
    entity_part: str = Field(alias="entityPart")  # Characters 5-18
    check_digits: str = Field(alias="checkDigits")  # Characters 19-20
