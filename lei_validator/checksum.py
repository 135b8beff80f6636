"""
ISO 7064 MOD 97-10 arithmetic for LEIs.

Every character is transliterated to a decimal string (digits unchanged,
A=10 ... Z=35) and the concatenation is read as one large numeral. That
numeral never fits a machine word, so the remainder is taken digit by digit
instead of building the integer.
"""

from __future__ import annotations

import string

# ─── Constants ───────────────────────────────────────────────────────

MODULUS = 97
VALID_REMAINDER = 1
CHECK_DIGIT_PLACEHOLDER = "00"

_LETTER_OFFSET = 55  # ord("A") - 10


# ─── Transliteration ────────────────────────────────────────────────


def transliterate(value: str) -> str:
    """Map an alphanumeric string to its decimal numeral.

    Raises:
        ValueError: if a character is not in [0-9A-Z].
    """
    parts: list[str] = []
    for char in value:
        if char in string.digits:
            parts.append(char)
        elif char in string.ascii_uppercase:
            parts.append(str(ord(char) - _LETTER_OFFSET))
        else:
            raise ValueError(f"Cannot transliterate character {char!r}")
    return "".join(parts)


def mod97(numeral: str) -> int:
    """Remainder of a decimal numeral of any length divided by 97."""
    remainder = 0
    for digit in numeral:
        remainder = (remainder * 10 + int(digit)) % MODULUS
    return remainder


# ─── Check Digits ───────────────────────────────────────────────────


def calculate_check_digits(base: str) -> str:
    """Compute the two check digits for the first 18 characters of an LEI.

    The result is 98 - (N mod 97) where N is the numeral of base + "00",
    always in 02..98 and zero-padded to two characters.
    """
    remainder = mod97(transliterate(base + CHECK_DIGIT_PLACEHOLDER))
    return f"{98 - remainder:02d}"


def has_valid_check_digits(lei: str) -> bool:
    """True if the full 20-character numeral leaves remainder 1 mod 97."""
    return mod97(transliterate(lei)) == VALID_REMAINDER
