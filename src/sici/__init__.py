"""Parsing, validation and serialisation of Serial Item and Contribution Identifiers."""

from .identifier import Sici
from .item_segment import ItemSegment
from .contribution_segment import ContributionSegment
from .control_segment import ControlSegment
from .validation import ValidationTracker
from .checksum import calculate_check_char, verify_check_char
from .errors import InvalidModeError, InvalidSiciError, SiciParseError, UnsupportedVersionError
from .models import Mode, ValidationIssue

__all__ = [
    "Sici",
    "ItemSegment",
    "ContributionSegment",
    "ControlSegment",
    "ValidationTracker",
    "calculate_check_char",
    "verify_check_char",
    "InvalidModeError",
    "InvalidSiciError",
    "SiciParseError",
    "UnsupportedVersionError",
    "Mode",
    "ValidationIssue",
]
