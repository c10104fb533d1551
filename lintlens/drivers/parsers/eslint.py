"""Find the ESLint rules a document refers to.

Two document kinds are understood:

- source files, where rules appear in directive comments such as
  ``// eslint-disable-line no-console`` or ``/* eslint curly: "error" */``
- eslintrc configuration files (JSON, JavaScript or YAML), where rules are
  the keys of the ``rules`` block

Every rule is anchored at the end of the line it appears on.
"""

from __future__ import annotations

import re

from lintlens.kernel.domain import TextDocument, ViolatedRule
from lintlens.kernel.ports import RuleParser

_RULE_NAME = r"@?[\w-][\w@/.-]*"
_RULE_NAME_PATTERN = re.compile(rf"^{_RULE_NAME}$")
_DIRECTIVE_PATTERN = re.compile(
    r"(?://|/\*)\s*"
    r"(?P<directive>eslint-disable-next-line|eslint-disable-line|eslint-disable|eslint-enable)"
    r"(?=\s|\*/|$)(?P<body>.*?)(?:\*/|$)"
)
_CONFIG_COMMENT_PATTERN = re.compile(r"/\*\s*eslint\s+(?P<body>.*?)(?:\*/|$)")
_CONFIG_KEY_PATTERN = re.compile(rf"(?:^|,)\s*[\"']?(?P<name>{_RULE_NAME})[\"']?\s*:")
_RULES_KEY_JSON = re.compile(r"[\"']?rules[\"']?\s*:\s*\{")
_RULES_KEY_YAML = re.compile(r"^(?P<indent>\s*)rules\s*:\s*(?:#.*)?$")
_OBJECT_KEY = re.compile(rf"^\s*[\"']?(?P<name>{_RULE_NAME})[\"']?\s*:")
_STRING_LITERAL = re.compile(r"\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'")
_KEY_SUFFIX = re.compile(r"\s*:")
_YAML_SUFFIXES = (".yaml", ".yml")
_OBJECT_SUFFIXES = (".json", ".js", ".cjs", ".mjs", ".ts")


def _anchor(document: TextDocument, line: int, names: list[str]) -> list[ViolatedRule]:
    anchor = document.line_ending_range(line)
    return [ViolatedRule(name, anchor) for name in dict.fromkeys(names)]


def parse_directive_comments(document: TextDocument) -> list[ViolatedRule]:
    """Rules named in ``eslint-disable``/``eslint-enable`` and ``/* eslint */`` comments."""
    rules: list[ViolatedRule] = []
    for line_number in range(document.line_count):
        line = document.line_at(line_number)
        names: list[str] = []

        for match in _DIRECTIVE_PATTERN.finditer(line):
            body = match["body"].split("--", 1)[0]
            names += [
                name
                for name in (part.strip() for part in body.split(","))
                if _RULE_NAME_PATTERN.match(name)
            ]

        for match in _CONFIG_COMMENT_PATTERN.finditer(line):
            body = _STRING_LITERAL.sub('""', match["body"])
            names += [key["name"] for key in _CONFIG_KEY_PATTERN.finditer(body)]

        if names:
            rules += _anchor(document, line_number, names)
    return rules


def parse_eslintrc_rules(document: TextDocument) -> list[ViolatedRule]:
    """Rules configured in an eslintrc file (JSON, JavaScript or YAML)."""
    name = document.file_name
    if name.endswith(_YAML_SUFFIXES):
        return _parse_yaml_rules(document)
    if name.endswith(_OBJECT_SUFFIXES) or document.text.lstrip().startswith(("{", "//", "/*")):
        return _parse_object_rules(document)
    return _parse_yaml_rules(document)


def _nesting_delta(text: str) -> int:
    text = _STRING_LITERAL.sub('""', text)
    return text.count("{") + text.count("[") - text.count("}") - text.count("]")


def _inline_keys(text: str) -> list[str]:
    """Keys at the top level of the object body in ``text``, up to its closing brace."""
    text = _STRING_LITERAL.sub(
        lambda literal: literal[0] if _KEY_SUFFIX.match(text, literal.end()) else '""', text
    )
    top: list[str] = []
    depth = 0
    for ch in text:
        if ch in "{[":
            depth += 1
        elif ch in "}]":
            if depth == 0:
                break
            depth -= 1
        elif depth == 0:
            top.append(ch)
    return [key["name"] for key in _CONFIG_KEY_PATTERN.finditer("".join(top))]


def _parse_object_rules(document: TextDocument) -> list[ViolatedRule]:
    rules: list[ViolatedRule] = []
    depth = 0
    for line_number in range(document.line_count):
        line = document.line_at(line_number)
        if depth == 0:
            match = _RULES_KEY_JSON.search(line)
            if match is None:
                continue
            depth = 1
            line = line[match.end() :]
        if depth == 1 and (names := _inline_keys(line)):
            rules += _anchor(document, line_number, names)
        depth = max(depth + _nesting_delta(line), 0)
    return rules


def _parse_yaml_rules(document: TextDocument) -> list[ViolatedRule]:
    rules: list[ViolatedRule] = []
    base_indent: int | None = None
    child_indent: int | None = None
    for line_number in range(document.line_count):
        line = document.line_at(line_number)
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        indent = len(line) - len(line.lstrip())

        if base_indent is None:
            if match := _RULES_KEY_YAML.match(line):
                base_indent = len(match["indent"])
                child_indent = None
            continue

        if indent <= base_indent:
            base_indent = None
            child_indent = None
            if match := _RULES_KEY_YAML.match(line):
                base_indent = len(match["indent"])
            continue

        if child_indent is None:
            child_indent = indent
        if indent == child_indent and (key := _OBJECT_KEY.match(line)):
            rules += _anchor(document, line_number, [key["name"]])
    return rules


def select_parser(document: TextDocument) -> RuleParser:
    """Pick the parser for ``document`` by its file name."""
    name = document.file_name
    if name.startswith(".eslintrc") or name.startswith("eslint.config"):
        return parse_eslintrc_rules
    return parse_directive_comments
