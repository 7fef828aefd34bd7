"""Validation reporting utilities."""
from __future__ import annotations

from typing import List, Optional

from .checksum import verify_check_char
from .identifier import Sici


def _yes_no(value: Optional[bool]) -> str:
    if value is None:
        return "n/a"
    return "yes" if value else "no"


def render_report(sici: Sici, round_trip: Optional[bool] = None) -> str:
    """Return a human-readable report summarizing the state of ``sici``."""

    lines: List[str] = ["SICI Validation Report", f"Mode: {sici.mode}"]
    if sici.parsed_string is not None:
        lines.append(f"Input: {sici.parsed_string}")
    lines.append(f"Canonical: {sici.to_string()}")
    lines.append(f"Valid: {_yes_no(sici.is_valid())}")
    if sici.parsed_string is not None:
        lines.append(f"Round trip: {_yes_no(round_trip)}")
        if verify_check_char(sici.parsed_string):
            lines.append("Check character: ok")
        else:
            lines.append(f"Check character: mismatch (expected {sici.checkchar()})")

    issues = sici.issues()
    if not issues:
        lines.append("No problems detected.")
        return "\n".join(lines)

    lines.append("Problems:")
    for issue in issues:
        line = f"[{issue.severity.upper()}] {issue.code}: {issue.message}"
        if issue.context:
            line += f" -> {issue.context}"
        lines.append(line)
    return "\n".join(lines)
