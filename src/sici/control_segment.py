"""The control segment of a SICI."""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from .segment import Segment

if TYPE_CHECKING:  # pragma: no cover
    from .identifier import Sici

logger = logging.getLogger(__name__)

MFI_PATTERN = re.compile(r"^(?:C[DFOT]|H[DE]|SC|T[BHLSX]|VX|Z[NUZ])\Z")

MEDIUM_FORMATS = {
    "CD": "Computer-readable optical media (CD-ROM)",
    "CF": "Computer-readable magnetic disk media",
    "CO": "Online (remote)",
    "CT": "Computer-readable magnetic tape media",
    "HD": "Microfilm",
    "HE": "Microfiche",
    "SC": "Sound recording",
    "TB": "Braille",
    "TH": "Printed text, hardbound",
    "TL": "Printed text, looseleaf",
    "TS": "Printed text, softcover",
    "TX": "Printed text",
    "VX": "Video recording",
    "ZN": "Multiple physical forms",
    "ZU": "Physical form unknown",
    "ZZ": "Other physical form",
}

SUPPORTED_VERSION = 2
DEFAULT_DPI = 0
DEFAULT_MFI = "ZU"

Numeric = Union[int, str]


class CsiState(Enum):
    UNSET = "unset"
    DEFAULT = "default"
    EXPLICIT = "explicit"


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdecimal():
            return int(value)
    return None


class ControlSegment(Segment):
    """Meta-information about the described thing and about the SICI itself.

    Every attribute has a value at all times. ``dpi``, ``mfi`` and
    ``version`` fall back to fixed defaults. ``csi`` is derived from the
    contribution segment the first time it is read and that value is kept
    until ``csi`` is set, cleared or invalidated.

    Code structure identifiers (``csi``):

      1 => SICI for a serial item
      2 => SICI for a serial contribution
      3 => SICI for a serial contribution with obscure numbering

    Derivative part identifiers (``dpi``):

      0 => the serial item or contribution itself
      1 => its table of contents
      2 => its index
      3 => its abstract
    """

    name = "control"
    ATTRIBUTES = ("csi", "dpi", "mfi", "version")

    def __init__(self, sici: "Sici") -> None:
        super().__init__(sici)
        self._csi_state = CsiState.UNSET

    @property
    def csi_state(self) -> CsiState:
        return self._csi_state

    @property
    def csi(self) -> Numeric:
        if self._csi_state is CsiState.UNSET:
            self._values["csi"] = self._derive_csi()
            self._csi_state = CsiState.DEFAULT
        return self._values["csi"]

    @csi.setter
    def csi(self, value: Numeric) -> None:
        problems = []
        if _as_int(value) not in (1, 2, 3):
            problems.append("value not in allowed range (1|2|3)")
        self._set("csi", value, problems)
        self._csi_state = CsiState.EXPLICIT

    def _derive_csi(self) -> int:
        contribution = self.sici.contribution
        if contribution.has("local_number"):
            return 3
        if contribution.has("location") or contribution.has("title_code"):
            return 2
        return 1

    def invalidate_csi(self) -> None:
        """Forget the current csi so the next read derives it again."""
        if self._csi_state is not CsiState.UNSET:
            logger.debug("Dropping %s csi value %r", self._csi_state.value, self._values.get("csi"))
        self.clear("csi")

    @property
    def dpi(self) -> Numeric:
        return self._values.get("dpi", DEFAULT_DPI)

    @dpi.setter
    def dpi(self, value: Numeric) -> None:
        problems = []
        if _as_int(value) not in (0, 1, 2, 3):
            problems.append("value not in allowed range (0|1|2|3)")
        self._set("dpi", value, problems)

    @property
    def mfi(self) -> str:
        """Medium / format identifier, one of the codes in ``MEDIUM_FORMATS``."""
        return self._values.get("mfi", DEFAULT_MFI)

    @mfi.setter
    def mfi(self, value: str) -> None:
        problems = []
        if not isinstance(value, str) or not MFI_PATTERN.match(value):
            problems.append("unknown identifier")
        self._set("mfi", value, problems)

    @property
    def version(self) -> Numeric:
        """Version of the standard; 2 means Z39.56-1996."""
        return self._values.get("version", SUPPORTED_VERSION)

    @version.setter
    def version(self, value: Numeric) -> None:
        problems = []
        if _as_int(value) != SUPPORTED_VERSION:
            problems.append(f'unsupported version number (i.e. not "{SUPPORTED_VERSION}")')
        self._set("version", value, problems)

    def clear(self, attr: str) -> None:
        super().clear(attr)
        if attr == "csi":
            self._csi_state = CsiState.UNSET

    def to_dict(self) -> Dict[str, Any]:
        return {
            "csi": self.csi,
            "dpi": self.dpi,
            "mfi": self.mfi,
            "version": self.version,
        }

    def to_string(self) -> str:
        return f"{self.csi}.{self.dpi}.{self.mfi};{self.version}"
