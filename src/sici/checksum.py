"""Check characters for SICI strings (Z39.56 mod-37) and ISSNs (mod-11)."""
from __future__ import annotations

import re
from typing import List

CHECK_CHARACTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ#"

# Z39.56 character set minus the contribution and control delimiters
# (":", ";", "<", ">"). Shared by title codes, locations and local numbers.
TITLE_CODE_CHARS = r"A-Z0-9#$%&'()*+,\-./=?"
TITLE_CODE_PATTERN = re.compile(rf"^[{TITLE_CODE_CHARS}]+\Z")

ISSN_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{3}[0-9X]\Z")

_MODULUS = 37
_OTHER_VALUE = 36


def char_value(char: str) -> int:
    """Return the numeric value the standard assigns to a single character.

    Digits map to 0-9 and uppercase letters to 10-35; every other character
    (punctuation and separators) counts as 36.
    """

    index = CHECK_CHARACTERS.find(char)
    if 0 <= index < _OTHER_VALUE:
        return index
    return _OTHER_VALUE


def calculate_check_char(prefix: str) -> str:
    """Compute the check character for everything preceding it.

    ``prefix`` is the serialized SICI up to and including the ``-`` that
    separates the control segment from the check character. Weights
    alternate 3, 1, 3, ... starting from the rightmost character.
    """

    total = 0
    for position, char in enumerate(reversed(prefix)):
        weight = 3 if position % 2 == 0 else 1
        total += char_value(char) * weight
    return CHECK_CHARACTERS[(_MODULUS - total % _MODULUS) % _MODULUS]


def verify_check_char(sici_string: str) -> bool:
    """Return True if the last character of a full SICI string is its check character."""

    if len(sici_string) < 2:
        return False
    return calculate_check_char(sici_string[:-1]) == sici_string[-1]


def calculate_issn_check_digit(digits: str) -> str:
    """Return the ISSN check digit for the first seven digits (mod 11, weights 8..2)."""

    if len(digits) != 7 or not (digits.isascii() and digits.isdecimal()):
        raise ValueError(f"seven digits required, got {digits!r}")
    total = sum(int(digit) * weight for digit, weight in zip(digits, range(8, 1, -1)))
    check = (11 - total % 11) % 11
    return "X" if check == 10 else str(check)


def issn_problems(issn: str) -> List[str]:
    """Return the problems with an ``NNNN-NNNC`` ISSN, empty if it is well formed."""

    issn = str(issn)
    if not ISSN_PATTERN.match(issn):
        return ["not in ISSN format (NNNN-NNNC)"]
    expected = calculate_issn_check_digit(issn[:4] + issn[5:8])
    if issn[8] != expected:
        return [f"check digit mismatch (expected {expected})"]
    return []
