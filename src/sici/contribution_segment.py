"""The contribution segment of a SICI."""
from __future__ import annotations

from typing import List, Optional

from .checksum import TITLE_CODE_PATTERN
from .segment import Segment

TITLE_CODE_MAX_LENGTH = 6


def _character_problems(value: str) -> List[str]:
    if not TITLE_CODE_PATTERN.match(str(value)):
        return ["contains invalid characters"]
    return []


class ContributionSegment(Segment):
    """Describes a contribution to the item, e.g. an article in an issue.

    A SICI does not have to describe a contribution, so every attribute is
    optional and an empty segment is valid. Resetting this segment also
    resets the ``csi`` of the control segment, whose default is derived
    from the values held here.
    """

    name = "contribution"
    ATTRIBUTES = ("location", "title_code", "local_number")

    @property
    def location(self) -> Optional[str]:
        """Location within the item, typically the first page."""
        return self._get("location")

    @location.setter
    def location(self, value: str) -> None:
        self._set("location", value, _character_problems(value))

    @property
    def title_code(self) -> Optional[str]:
        """Code of at most six characters derived from the contribution title."""
        return self._get("title_code")

    @title_code.setter
    def title_code(self, value: str) -> None:
        problems: List[str] = []
        if len(str(value)) > TITLE_CODE_MAX_LENGTH:
            problems.append(f"contains more than {TITLE_CODE_MAX_LENGTH} characters")
        problems.extend(_character_problems(value))
        self._set("title_code", value, problems)

    @property
    def local_number(self) -> Optional[str]:
        return self._get("local_number")

    @local_number.setter
    def local_number(self, value: str) -> None:
        self._set("local_number", value, _character_problems(value))

    def is_empty(self) -> bool:
        return not any(self.has(attr) for attr in self.ATTRIBUTES)

    def to_string(self) -> str:
        text = ""
        if self.has("location"):
            text += str(self.location)
        if self.has("title_code"):
            text += f":{self.title_code}"
        if self.has("local_number"):
            if self.has("location") or self.has("title_code"):
                text += f":{self.local_number}"
            else:
                text += f"::{self.local_number}"
        return text

    def reset(self) -> None:
        super().reset()
        self.sici.control.invalidate_csi()
