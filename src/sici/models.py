"""Data models for SICI validation reporting."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class Mode:
    STRICT = "strict"
    LAX = "lax"

    ALL = (STRICT, LAX)


@dataclass
class ValidationIssue:
    """Represents a recorded problem on one segment attribute."""

    code: str
    message: str
    context: Optional[str] = None
    severity: str = "error"
