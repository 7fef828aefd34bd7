"""The item segment of a SICI."""
from __future__ import annotations

from typing import Optional

from .checksum import issn_problems
from .segment import Segment


class ItemSegment(Segment):
    """Describes the serial item: ISSN, chronology and enumeration.

    The enumeration is kept either as a raw string or decomposed into
    volume, issue and an optional supplement/index marker. Only the ISSN is
    checked: it must be hyphenated and carry a matching check digit.
    """

    name = "item"
    ATTRIBUTES = ("issn", "chronology", "enumeration", "volume", "issue", "suppl_or_idx")

    @property
    def issn(self) -> Optional[str]:
        return self._get("issn")

    @issn.setter
    def issn(self, value: str) -> None:
        self._set("issn", value, issn_problems(value))

    @property
    def chronology(self) -> Optional[str]:
        """Date of publication, e.g. ``1990`` or ``199502/03``."""
        return self._get("chronology")

    @chronology.setter
    def chronology(self, value: str) -> None:
        self._set("chronology", value)

    @property
    def enumeration(self) -> Optional[str]:
        return self._get("enumeration")

    @enumeration.setter
    def enumeration(self, value: str) -> None:
        self._set("enumeration", value)

    @property
    def volume(self) -> Optional[str]:
        return self._get("volume")

    @volume.setter
    def volume(self, value: str) -> None:
        self._set("volume", value)

    @property
    def issue(self) -> Optional[str]:
        return self._get("issue")

    @issue.setter
    def issue(self, value: str) -> None:
        self._set("issue", value)

    @property
    def suppl_or_idx(self) -> Optional[str]:
        """``+`` for a supplement, ``*`` for an index."""
        return self._get("suppl_or_idx")

    @suppl_or_idx.setter
    def suppl_or_idx(self, value: str) -> None:
        self._set("suppl_or_idx", value)

    def to_string(self) -> str:
        text = ""
        if self.has("issn"):
            text += str(self.issn)
        if self.has("chronology"):
            text += f"({self.chronology})"
        if self.has("volume") and self.has("issue"):
            text += f"{self.volume}:{self.issue}"
            if self.has("suppl_or_idx"):
                text += f":{self.suppl_or_idx}"
        elif self.has("enumeration"):
            text += str(self.enumeration)
        return text
