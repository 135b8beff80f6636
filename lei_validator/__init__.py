"""
LEI Validator — ISO 17442 structure and ISO 7064 MOD 97-10 checksum checks.

Architecture: Canonicalise → Format checks → Checksum → Result
Philosophy:  Report every validation problem. Raise only on bad arguments.
"""

from .exceptions import LEIError, LEITypeError, PartialLEIError
from .models import LEIParts, ValidationResult
from .validator import (
    LEIValidator,
    generate_check_digits,
    is_valid_lei,
    validate_lei,
)

__version__ = "1.0.0"

__all__ = [
    "LEIError",
    "LEIParts",
    "LEITypeError",
    "LEIValidator",
    "PartialLEIError",
    "ValidationResult",
    "generate_check_digits",
    "is_valid_lei",
    "validate_lei",
]
