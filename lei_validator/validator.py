"""
Deterministic LEI validation engine.

LEIValidator wraps one candidate value and runs the ISO 17442 checks in a
fixed order:

  1. Length:         exactly 20 characters
  2. Character set:  [A-Z0-9] only
  3. LOU prefix:     characters 1-4
  4. Entity part:    characters 5-18
  5. Check digits:   characters 19-20, numeric
  6. Checksum:       MOD 97-10 remainder of the whole LEI equals 1

The first failing format check stops the sequence, so exactly one format
error is reported. The checksum only runs on a well-formed value.
"""

from __future__ import annotations

import logging
import re

from .checksum import (
    CHECK_DIGIT_PLACEHOLDER,
    calculate_check_digits,
    has_valid_check_digits,
)
from .exceptions import LEITypeError, PartialLEIError
from .models import LEIParts, ValidationResult

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

LEI_LENGTH = 20
PARTIAL_LEI_LENGTH = 18

_LEI_RE = re.compile(r"[A-Z0-9]{20}")
_LOU_PREFIX_RE = re.compile(r"[A-Z0-9]{4}")
_ENTITY_PART_RE = re.compile(r"[A-Z0-9]{14}")
_CHECK_DIGITS_RE = re.compile(r"[0-9]{2}")

ERR_LENGTH = "LEI must be exactly 20 characters long"
ERR_CHARSET = "LEI must contain only uppercase alphanumeric characters"
ERR_LOU_PREFIX = "Invalid LOU prefix format"
ERR_ENTITY_PART = "Invalid entity-specific part format"
ERR_CHECK_DIGITS_FORMAT = "Check digits must be numeric"
ERR_CHECKSUM = "Invalid check digits"


# ─── Validator ───────────────────────────────────────────────────────


class LEIValidator:
    """Validates a single Legal Entity Identifier.

    Usage:
        validator = LEIValidator("213800D1L3R2MWV39G88")
        result = validator.validate()
        if not result.is_valid:
            for error in result.errors:
                print(error)
    """

    def __init__(self, lei: str):
        if not isinstance(lei, str):
            raise LEITypeError(details={"received_type": type(lei).__name__})
        self.lei = lei.upper()
        self.errors: list[str] = []

    def __repr__(self) -> str:
        return f"LEIValidator({self.lei!r})"

    # ─── Public API ──────────────────────────────────────────────────

    def validate(self) -> ValidationResult:
        """Run every check and return the verdict with errors in check order."""
        self.errors = []
        format_valid = self._validate_format()
        checksum_valid = self._validate_checksum() if format_valid else False

        logger.debug(
            "Validated %s: format=%s checksum=%s", self.lei, format_valid, checksum_valid
        )
        return ValidationResult(
            lei=self.lei,
            is_valid=format_valid and checksum_valid,
            errors=list(self.errors),
        )

    def is_valid(self) -> bool:
        return self.validate().is_valid

    def get_parts(self) -> LEIParts:
        """Split the canonical value at the fixed LEI offsets.

        No validation is performed. Short input yields short or empty
        components rather than an error.
        """
        return LEIParts(
            lou_prefix=self.lei[0:4],
            entity_part=self.lei[4:18],
            check_digits=self.lei[18:],
        )

    @staticmethod
    def generate_check_digits(partial_lei: str) -> str:
        """Return the two check digits completing an 18-character partial LEI.

        Only the digits are returned, not the full 20-character LEI.

        Raises:
            PartialLEIError: if partial_lei is not an 18-character string, or
                contains characters outside [A-Z0-9].
        """
        if not isinstance(partial_lei, str) or len(partial_lei) != PARTIAL_LEI_LENGTH:
            raise PartialLEIError(details={"partial_lei": repr(partial_lei)})

        validator = LEIValidator(partial_lei + CHECK_DIGIT_PLACEHOLDER)
        try:
            return validator._calculate_check_digits()
        except ValueError as exc:
            raise PartialLEIError(
                f"Partial LEI contains invalid characters: {exc}",
                details={"partial_lei": partial_lei},
            ) from exc

    # ─── Format Checks ───────────────────────────────────────────────

    def _validate_format(self) -> bool:
        if len(self.lei) != LEI_LENGTH:
            self.errors.append(ERR_LENGTH)
            return False

        if not _LEI_RE.fullmatch(self.lei):
            self.errors.append(ERR_CHARSET)
            return False

        if not _LOU_PREFIX_RE.fullmatch(self.lei[0:4]):
            self.errors.append(ERR_LOU_PREFIX)
            return False

        if not _ENTITY_PART_RE.fullmatch(self.lei[4:18]):
            self.errors.append(ERR_ENTITY_PART)
            return False

        if not _CHECK_DIGITS_RE.fullmatch(self.lei[18:]):
            self.errors.append(ERR_CHECK_DIGITS_FORMAT)
            return False

        return True

    # ─── Checksum ────────────────────────────────────────────────────

    def _validate_checksum(self) -> bool:
        if not has_valid_check_digits(self.lei):
            self.errors.append(ERR_CHECKSUM)
            return False
        return True

    def _calculate_check_digits(self) -> str:
        return calculate_check_digits(self.lei[:PARTIAL_LEI_LENGTH])


# ─── Convenience Functions ──────────────────────────────────────────


def validate_lei(lei: str) -> ValidationResult:
    """Shortcut for LEIValidator(lei).validate()."""
    return LEIValidator(lei).validate()


def is_valid_lei(lei: str) -> bool:
    """Shortcut for LEIValidator(lei).is_valid()."""
    return LEIValidator(lei).is_valid()


def generate_check_digits(partial_lei: str) -> str:
    """Shortcut for LEIValidator.generate_check_digits(partial_lei)."""
    return LEIValidator.generate_check_digits(partial_lei)
