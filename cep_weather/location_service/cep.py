"""Postal code (CEP) normalization and validation."""

import re

_NON_DIGITS = re.compile(r"[^0-9]")
CEP_LENGTH = 8


def normalize_cep(cep: str) -> str:
    """Strip every non-digit character from a postal code.

    Args:
        cep: Raw postal code string, e.g. ``"01310-100"``.

    Returns:
        The digits of the postal code, e.g. ``"01310100"``.
    """
    return _NON_DIGITS.sub("", cep)


def is_valid_cep(cep: str) -> bool:
    """Return True when the postal code normalizes to exactly 8 digits."""
    return len(normalize_cep(cep)) == CEP_LENGTH
