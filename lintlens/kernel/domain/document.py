"""Documents, positions and violated-rule anchors."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from lintlens.kernel.exceptions import ValidationError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character position in a document."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValidationError("line", "must be non-negative", self.line)
        if self.character < 0:
            raise ValidationError("character", "must be non-negative", self.character)


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open range between two positions."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError("end", "must not precede start", self.end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @classmethod
    def line_end(cls, line: int, length: int) -> TextRange:
        """Zero-width range at the end of ``line`` (``length`` characters long)."""
        position = Position(line, length)
        return cls(position, position)


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable snapshot of a document's content.

    Lines are split on CRLF, CR and LF only, the way editors number them; a
    trailing newline starts a final empty line.
    """

    uri: str
    text: str
    _lines: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", tuple(_LINE_BREAK.split(self.text)))

    @classmethod
    def from_path(cls, path: str | Path) -> TextDocument:
        path = Path(path)
        return cls(uri=path.resolve().as_uri(), text=path.read_text(encoding="utf-8"))

    @property
    def file_name(self) -> str:
        return self.uri.rstrip("/").rsplit("/", 1)[-1]

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        if not 0 <= line < len(self._lines):
            raise ValidationError("line", f"must be in [0, {len(self._lines)})", line)
        return self._lines[line]

    def line_ending_range(self, line: int) -> TextRange:
        """Anchor for trailing inline content on ``line``."""
        return TextRange.line_end(line, len(self.line_at(line)))


@dataclass(frozen=True, slots=True)
class ViolatedRule:
    """A lint rule name and the end-of-line anchor where it was reported."""

    name: str
    line_ending_range: TextRange

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("name", "cannot be empty")
