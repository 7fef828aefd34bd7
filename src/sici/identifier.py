"""Parsing, assembling and serialising Serial Item and Contribution Identifiers."""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from .checksum import calculate_check_char
from .contribution_segment import ContributionSegment
from .control_segment import ControlSegment, SUPPORTED_VERSION
from .errors import InvalidModeError, InvalidSiciError, SiciParseError, UnsupportedVersionError
from .item_segment import ItemSegment
from .models import Mode, ValidationIssue

logger = logging.getLogger(__name__)

ParseResult = Tuple[bool, Optional[bool]]


def normalize_mode(mode: Any) -> str:
    """Lower-case ``mode`` and strip all whitespace; reject unknown modes."""

    if not isinstance(mode, str):
        raise InvalidModeError(mode)
    normalized = "".join(mode.lower().split())
    if normalized not in Mode.ALL:
        raise InvalidModeError(mode)
    return normalized


class _Cursor:
    """Forward-only reader over the characters of a SICI string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def remaining(self) -> int:
        return len(self.text) - self.pos

    def take(self, count: int = 1) -> str:
        chunk = self.text[self.pos : self.pos + count]
        self.pos += len(chunk)
        return chunk

    def skip_if(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]


class Sici:
    """A Serial Item and Contribution Identifier (ANSI/NISO Z39.56).

    ``strict`` mode makes ``parse()`` raise when no valid SICI can be
    derived from the input. ``lax`` mode accepts anything and reports the
    outcome; use ``is_valid()`` and ``list_problems()`` to inspect the
    state. Attribute writes never fail in either mode: invalid values are
    stored and the problem is recorded on the segment.
    """

    ISSN_CHARS = frozenset("0123456789X-")
    CHRONOLOGY_CHARS = frozenset("0123456789/")
    VOLUME_ISSUE_PATTERN = re.compile(r"^([A-Z0-9/]+):([A-Z0-9/]+)(?::([+*]))?\Z")
    LOCAL_NUMBER_ONLY_PATTERN = re.compile(r"^::(.+)\Z")
    TITLE_CODE_FIRST_PATTERN = re.compile(r"^:([^:]+)(?::(.+))?\Z")
    LOCATION_FIRST_PATTERN = re.compile(r"^([^:]+):([^:]+)(?::(.+))?\Z")
    VERSION_MARKER_PATTERN = re.compile(r";([0-9])-[0-9A-Z#]\Z")

    def __init__(self, mode: str = Mode.LAX):
        self._mode = normalize_mode(mode)
        self._parsed_string: Optional[str] = None
        self._item: Optional[ItemSegment] = None
        self._contribution: Optional[ContributionSegment] = None
        self._control: Optional[ControlSegment] = None

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def strict(self) -> bool:
        return self._mode == Mode.STRICT

    @property
    def parsed_string(self) -> Optional[str]:
        """The string last passed to ``parse()``, or None."""
        return self._parsed_string

    @property
    def item(self) -> ItemSegment:
        if self._item is None:
            self._item = ItemSegment(self)
        return self._item

    @property
    def contribution(self) -> ContributionSegment:
        if self._contribution is None:
            self._contribution = ContributionSegment(self)
        return self._contribution

    @property
    def control(self) -> ControlSegment:
        if self._control is None:
            self._control = ControlSegment(self)
        return self._control

    def parse(self, string: str) -> ParseResult:
        """Disassemble ``string`` into the three segments.

        Returns ``(valid, round_trip)``: whether the resulting SICI carries
        no recorded problems and whether ``to_string()`` reproduces the
        input exactly. ``round_trip`` is None when the input was rejected
        before tokenization. In strict mode the rejections raise instead.
        """

        if not string:
            return self._abandon(SiciParseError("No string to parse", raw=string))

        marker = self.VERSION_MARKER_PATTERN.search(string)
        if marker and marker.group(1) != str(SUPPORTED_VERSION):
            return self._abandon(UnsupportedVersionError(marker.group(1), raw=string))

        self._parsed_string = string
        cursor = _Cursor(string)
        self._parse_item(cursor)
        self._parse_contribution(cursor)
        self._parse_control(cursor)

        is_valid = self.is_valid()
        if self.strict and not is_valid:
            error = InvalidSiciError(self.list_problems() or {}, raw=string)
            logger.info("%s", error)
            raise error

        round_trip = self._parsed_string == self.to_string()
        logger.debug("Parsed %r: valid=%s round_trip=%s", string, is_valid, round_trip)
        return is_valid, round_trip

    def _abandon(self, error: SiciParseError) -> ParseResult:
        if self.strict:
            logger.info("%s", error)
            raise error
        logger.debug("Not parsing %r: %s", error.raw, error)
        return False, None

    def _parse_item(self, cursor: _Cursor) -> None:
        issn = cursor.take_while(lambda char: char in self.ISSN_CHARS)
        if issn:
            self.item.issn = issn

        if cursor.skip_if("("):
            self.item.chronology = cursor.take_while(lambda char: char in self.CHRONOLOGY_CHARS)
        cursor.skip_if(")")

        enumeration = cursor.take_while(lambda char: char != "<")
        match = self.VOLUME_ISSUE_PATTERN.match(enumeration)
        if match:
            logger.debug("Enumeration %r split into volume and issue", enumeration)
            self.item.volume = match.group(1)
            self.item.issue = match.group(2)
            if match.group(3):
                self.item.suppl_or_idx = match.group(3)
        elif enumeration:
            self.item.enumeration = enumeration

    def _parse_contribution(self, cursor: _Cursor) -> None:
        cursor.skip_if("<")
        text = cursor.take_while(lambda char: char != ">")
        cursor.skip_if(">")
        if not text:
            return

        contribution = self.contribution
        match = self.LOCAL_NUMBER_ONLY_PATTERN.match(text)
        if match:
            contribution.local_number = match.group(1)
            return

        match = self.TITLE_CODE_FIRST_PATTERN.match(text)
        if match:
            contribution.title_code = match.group(1)
            if match.group(2):
                contribution.local_number = match.group(2)
            return

        match = self.LOCATION_FIRST_PATTERN.match(text)
        if match:
            contribution.location = match.group(1)
            contribution.title_code = match.group(2)
            if match.group(3):
                contribution.local_number = match.group(3)
            return

        logger.debug("Contribution %r kept as location", text)
        contribution.location = text

    def _parse_control(self, cursor: _Cursor) -> None:
        control = self.control
        if cursor.remaining():
            control.csi = cursor.take()
        cursor.take()  # "."
        if cursor.remaining():
            control.dpi = cursor.take()
        cursor.take()  # "."
        if cursor.remaining() >= 2:
            control.mfi = cursor.take(2)
        cursor.take()  # ";"
        if cursor.remaining():
            control.version = cursor.take()

    def to_string(self) -> str:
        """Serialise the SICI and append its check character.

        The result is not guaranteed to be a valid SICI.
        """

        prefix = self._to_string()
        return prefix + calculate_check_char(prefix)

    def _to_string(self) -> str:
        return "{}<{}>{}-".format(
            self.item.to_string(),
            self.contribution.to_string(),
            self.control.to_string(),
        )

    def checkchar(self) -> str:
        """Return the check character for the current attribute values."""
        return calculate_check_char(self._to_string())

    def reset(self) -> None:
        """Clear every attribute; the mode is kept."""
        self.item.reset()
        self.contribution.reset()
        self.control.reset()

    def segments(self) -> Dict[str, Any]:
        return {
            "item": self.item,
            "contribution": self.contribution,
            "control": self.control,
        }

    def is_valid(self) -> bool:
        return all(segment.is_valid() for segment in self.segments().values())

    def list_problems(self) -> Optional[Dict[str, Dict[str, List[str]]]]:
        """Return problems by segment and attribute, or None if there are none.

        {
            "contribution": {
                "title_code": ["contains more than 6 characters"],
            },
        }
        """

        problems = {
            name: segment.list_problems()
            for name, segment in self.segments().items()
            if not segment.is_valid()
        }
        return problems or None

    def issues(self) -> List[ValidationIssue]:
        """Flatten recorded problems into one issue per message."""

        issues: List[ValidationIssue] = []
        for name, segment in self.segments().items():
            values = segment.to_dict()
            for attr, messages in segment.list_problems().items():
                context = values.get(attr)
                for message in messages:
                    issues.append(
                        ValidationIssue(
                            code=f"{name}-{attr.replace('_', '-')}",
                            message=message,
                            context=None if context is None else str(context),
                        )
                    )
        return issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "parsed_string": self.parsed_string,
            "sici": self.to_string(),
            "valid": self.is_valid(),
            "segments": {name: segment.to_dict() for name, segment in self.segments().items()},
            "problems": self.list_problems() or {},
        }

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Sici({self.to_string()!r}, mode={self.mode!r})"
