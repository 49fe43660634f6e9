"""CNPJ (Brazilian legal-entity tax id) checksum validation and normalisation.

A CNPJ is 14 digits: a 12-digit base followed by two mod-11 check digits.
Everything here is pure and shared by the API boundary and the form tier.
"""

import re

CNPJ_LENGTH = 14

_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# Punctuation users type around digit-only fields: "11.222.333/0001-81", "(11) 9999-0000"
_FORMATTING_CHARS = re.compile(r"[\s.\-/()+]")
_NON_DIGITS = re.compile(r"[^0-9]")


def strip_formatting(value: str) -> str:
    """Remove formatting punctuation, leaving any other character in place."""
    return _FORMATTING_CHARS.sub("", value)


def is_digits(value: str) -> bool:
    """True for a non-empty string of ASCII digits ``0-9`` only."""
    return value.isascii() and value.isdigit()


def only_digits(value: str | None) -> str:
    """Drop every character outside ``0-9``. ``None`` becomes an empty string."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str, weights: tuple[int, ...]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def check_digits(base: str) -> str:
    """Compute the two check digits for a 12-digit CNPJ base."""
    if len(base) != 12 or not is_digits(base):
        raise ValueError(f"CNPJ base must be 12 digits, got {base!r}")
    first = _check_digit(base, _FIRST_WEIGHTS)
    second = _check_digit(base + str(first), _SECOND_WEIGHTS)
    return f"{first}{second}"


def is_valid_cnpj(candidate: str) -> bool:
    """Return True when *candidate* is 14 digits with matching check digits.

    Rejects wrong lengths, non-digit characters and the repeated-digit
    sequences (``00000000000000``, ``11111111111111``, ...) that happen to
    satisfy the checksum.
    """
    if len(candidate) != CNPJ_LENGTH:
        return False
    if not is_digits(candidate):
        return False
    if candidate == candidate[0] * CNPJ_LENGTH:
        return False
    return candidate[12:] == check_digits(candidate[:12])


def format_cnpj(value: str) -> str:
    """Render a CNPJ as ``XX.XXX.XXX/XXXX-XX``; returns the input unchanged if not 14 digits."""
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH:
        return value
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
