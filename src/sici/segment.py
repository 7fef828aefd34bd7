"""Common behaviour of the three SICI segments."""
from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from .validation import ValidationTracker

if TYPE_CHECKING:  # pragma: no cover
    from .identifier import Sici


class Segment:
    """Base class holding attribute values, their problems and the parent link.

    Subclasses list their attribute names in ``ATTRIBUTES`` and expose them
    as properties that go through ``_set`` so the tracker is updated on every
    write. Segments keep only a weak reference to the owning Sici.
    """

    name: str = "segment"
    ATTRIBUTES: Tuple[str, ...] = ()

    def __init__(self, sici: "Sici"):
        self._sici_ref = weakref.ref(sici)
        self._values: Dict[str, Any] = {}
        self.problems = ValidationTracker()

    @property
    def sici(self) -> "Sici":
        sici = self._sici_ref()
        if sici is None:
            raise ReferenceError(f"{self.name} segment outlived its SICI")
        return sici

    def has(self, attr: str) -> bool:
        """Return True if a value is present for ``attr``."""
        self._check_attr(attr)
        return attr in self._values

    def clear(self, attr: str) -> None:
        """Drop the value of ``attr`` together with its recorded problems."""
        self._check_attr(attr)
        self._values.pop(attr, None)
        self.problems.clear(attr)

    def reset(self) -> None:
        for attr in self.ATTRIBUTES:
            self.clear(attr)

    def is_valid(self) -> bool:
        return self.problems.is_clean()

    def list_problems(self) -> Dict[str, List[str]]:
        return self.problems.list()

    def to_dict(self) -> Dict[str, Any]:
        """Return the present attribute values keyed by attribute name."""
        return {attr: self._values[attr] for attr in self.ATTRIBUTES if attr in self._values}

    def to_string(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def _get(self, attr: str) -> Any:
        return self._values.get(attr)

    def _set(self, attr: str, value: Any, problems: List[str] | None = None) -> None:
        self._values[attr] = value
        if problems:
            self.problems.record(attr, problems)
        else:
            self.problems.clear(attr)

    def _check_attr(self, attr: str) -> None:
        if attr not in self.ATTRIBUTES:
            raise AttributeError(f"{self.name} segment has no attribute {attr!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"
