"""Tests for documents, positions and rule anchors."""

from __future__ import annotations

import pytest

from lintlens.kernel.domain import Position, TextDocument, TextRange, ViolatedRule
from lintlens.kernel.exceptions import ValidationError


class TestPosition:
    def test_ordering(self) -> None:
        assert Position(0, 5) < Position(1, 0)
        assert Position(2, 1) < Position(2, 3)

    @pytest.mark.parametrize(("line", "character"), [(-1, 0), (0, -1)])
    def test_negative_values_rejected(self, line: int, character: int) -> None:
        with pytest.raises(ValidationError):
            Position(line, character)


class TestTextRange:
    def test_line_end_is_empty(self) -> None:
        anchor = TextRange.line_end(4, 10)
        assert anchor.start == anchor.end == Position(4, 10)
        assert anchor.is_empty

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TextRange(Position(3, 0), Position(2, 9))


class TestTextDocument:
    def test_lines(self) -> None:
        document = TextDocument("file:///a.js", "one\ntwo\r\nthree")
        assert document.line_count == 3
        assert document.line_at(1) == "two"

    def test_empty_document_has_one_line(self) -> None:
        document = TextDocument("file:///empty.js", "")
        assert document.line_count == 1
        assert document.line_at(0) == ""

    def test_only_editor_line_breaks_split(self) -> None:
        document = TextDocument("file:///a.js", "a\x0cb\u2028c\x85d\ne\r\nf\rg")
        assert document.line_count == 4
        assert document.line_at(0) == "a\x0cb\u2028c\x85d"
        assert document.line_ending_range(0) == TextRange.line_end(0, 7)
        assert document.line_at(3) == "g"

    def test_trailing_newline_starts_empty_line(self) -> None:
        document = TextDocument("file:///a.js", "x\n")
        assert document.line_count == 2
        assert document.line_at(1) == ""

    def test_line_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            TextDocument("file:///a.js", "x").line_at(1)

    def test_line_ending_range(self) -> None:
        document = TextDocument("file:///a.js", "let a = 1;\nfoo()\n")
        assert document.line_ending_range(0) == TextRange.line_end(0, 10)
        assert document.line_ending_range(1) == TextRange.line_end(1, 5)

    def test_file_name(self) -> None:
        assert TextDocument("file:///project/src/.eslintrc.json", "").file_name == ".eslintrc.json"

    def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "index.js"
        path.write_text("alert(1)\n", encoding="utf-8")

        document = TextDocument.from_path(path)

        assert document.uri.startswith("file://")
        assert document.file_name == "index.js"
        assert document.line_at(0) == "alert(1)"


class TestViolatedRule:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ViolatedRule("", TextRange.line_end(0, 0))
