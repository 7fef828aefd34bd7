"""Errors raised by the SICI engine."""
from __future__ import annotations

from typing import Dict, List, Optional


class InvalidModeError(ValueError):
    """Raised when a Sici is constructed with a mode other than strict or lax."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Unknown mode {mode!r}; expected 'strict' or 'lax'")


class SiciParseError(ValueError):
    """Raised by strict-mode parsing when no valid SICI can be derived."""

    def __init__(self, message: str, raw: Optional[str] = None) -> None:
        self.raw = raw
        super().__init__(message)


class UnsupportedVersionError(SiciParseError):
    """Raised when the version marker of the input is not a supported version.

    Attributes:
        version: The version digit found in the input
    """

    def __init__(self, version: str, raw: Optional[str] = None) -> None:
        self.version = version
        super().__init__(f"Unhandled SICI version {version!r}", raw=raw)


class InvalidSiciError(SiciParseError):
    """Raised when the parsed SICI carries recorded problems.

    Attributes:
        problems: Problems by segment and attribute, as listed by the Sici
    """

    def __init__(
        self, problems: Dict[str, Dict[str, List[str]]], raw: Optional[str] = None
    ) -> None:
        self.problems = problems
        attrs = ", ".join(
            f"{segment}.{attr}"
            for segment, by_attr in problems.items()
            for attr in by_attr
        )
        super().__init__(f"Parsing failed: invalid SICI ({attrs})", raw=raw)
