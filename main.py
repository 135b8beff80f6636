#!/usr/bin/env python3
"""
LEI Validator — Entry Point
===========================

Validates one Legal Entity Identifier, or completes a partial one.

Usage:
    python main.py 213800D1L3R2MWV39G88           # Validate an LEI
    python main.py --generate 213800D1L3R2MWV39G  # Compute check digits
    LEI_VALIDATOR_LOG_LEVEL=DEBUG python main.py ...
"""

from __future__ import annotations

import argparse
import sys

from lei_validator.config import configure_logging
from lei_validator.exceptions import PartialLEIError
from lei_validator.models import ValidationResult
from lei_validator.validator import LEIValidator

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(result: ValidationResult, validator: LEIValidator) -> int:
    """Pretty-print the validation result with ANSI color codes.

    Returns:
        0 if the LEI is valid, 1 otherwise.
    """
    parts = validator.get_parts()

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  LEI VALIDATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  LEI:           {_BOLD}{result.lei}{_RESET}")
    print(f"  LOU prefix:    {parts.lou_prefix or _DIM + '(empty)' + _RESET}")
    print(f"  Entity part:   {parts.entity_part or _DIM + '(empty)' + _RESET}")
    print(f"  Check digits:  {parts.check_digits or _DIM + '(empty)' + _RESET}")
    print(f"{'─' * _WIDTH}")

    if result.errors:
        print(f"\n  {_RED}{_BOLD}ERRORS ({len(result.errors)}){_RESET}")
        for error in result.errors:
            print(f"    {_RED}- {error}{_RESET}")
        print()

    print(f"{'=' * _WIDTH}")
    if result.is_valid:
        print(f"  {_GREEN}{_BOLD}LEI PASSED ALL CHECKS{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}LEI REJECTED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if result.is_valid else 1


def print_check_digits(partial_lei: str) -> int:
    """Print the check digits for a partial LEI. Returns 2 on bad input."""
    try:
        digits = LEIValidator.generate_check_digits(partial_lei)
    except PartialLEIError as exc:
        print(f"  {_RED}{exc}{_RESET}", file=sys.stderr)
        return 2

    print(f"  Check digits:  {_BOLD}{digits}{_RESET}")
    print(f"  Full LEI:      {partial_lei.upper()}{_BOLD}{digits}{_RESET}")
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lei-validator",
        description="Validate ISO 17442 Legal Entity Identifiers.",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("lei", nargs="?", help="LEI to validate")
    group.add_argument(
        "-g",
        "--generate",
        metavar="PARTIAL_LEI",
        help="compute check digits for the first 18 characters of an LEI",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the requested operation and return an exit code."""
    configure_logging()
    args = build_parser().parse_args(argv)

    if args.generate is not None:
        return print_check_digits(args.generate)

    validator = LEIValidator(args.lei)
    return print_report(validator.validate(), validator)


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
