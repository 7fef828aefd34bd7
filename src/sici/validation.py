"""Per-attribute problem bookkeeping shared by the SICI segments."""
from __future__ import annotations

from typing import Dict, List


class ValidationTracker:
    """Records the conformance problems found when attributes are written.

    Each attribute maps to the list of messages produced by its most recent
    write. A missing key means no problem is known for that attribute.
    """

    def __init__(self) -> None:
        self._problems: Dict[str, List[str]] = {}

    def record(self, attr: str, messages: List[str]) -> None:
        """Store ``messages`` for ``attr``, replacing any earlier entry."""
        if not attr or not messages:
            return
        self._problems[attr] = list(messages)

    def clear(self, attr: str) -> None:
        self._problems.pop(attr, None)

    def list(self) -> Dict[str, List[str]]:
        """Return a snapshot copy of all recorded problems."""
        return {attr: list(messages) for attr, messages in self._problems.items()}

    def is_clean(self) -> bool:
        return not any(self._problems.values())
