"""Summary and hover text for a single rule.

The inline summary is plain text shown after the end of the line. The hover
is Markdown shown when the user points at the summary. Both follow the same
three-way split over the rule state: plugin missing, rule not found, resolved.
"""

from __future__ import annotations

import re
from typing import assert_never

from lintlens.kernel.annotations.command_link import DEFAULT_COMMAND, encode_command_link
from lintlens.kernel.domain import (
    MarkdownContent,
    PluginMissing,
    ResolvedRule,
    RuleInfo,
    RuleNotFound,
)
from lintlens.kernel.glyphs import Glyph

NOT_FOUND_SUMMARY = f"{Glyph.NOT_FOUND} Rule not found"
MORE_INFO_LABEL = f"Click for more information [{Glyph.LINK}]"
MORE_INFO_TOOLTIP = "Click for more information"

_NBSP = "&nbsp;"
_HARD_BREAK = "  \n"
_QUOTE_PAD_WIDTH = 70
_BACKTICK_RUNS = re.compile(r"`+")
_CODE_SPAN = re.compile(r"(?<!`)(`+)(?!`).+?(?<!`)\1(?!`)")
_INLINE_SPECIALS = frozenset("\\`*_[]<>")


def compose_summary(info: RuleInfo) -> str:
    """Short text appended after the line that references the rule.

    Flags are rendered as glyphs in the order recommended, deprecated, fixable.
    """
    match info:
        case PluginMissing():
            package = info.plugin_package_name or info.plugin_name or info.rule_name
            return f"{Glyph.MISSING} Missing: {package}"
        case RuleNotFound():
            return NOT_FOUND_SUMMARY
        case ResolvedRule():
            text = ""
            if info.is_recommended:
                text += f"{Glyph.RECOMMENDED} "
            if info.is_deprecated:
                text += f"{Glyph.DEPRECATED} "
            if info.is_fixable:
                text += f"{Glyph.FIXABLE} "
            if info.category:
                text += f"[{info.category}]:  "
            text += info.description or f"eslint rule: {info.rule_name}"
            return text
        case _:
            assert_never(info)


def compose_hover(
    info: RuleInfo,
    extension_name: str = "LintLens",
    command: str = DEFAULT_COMMAND,
) -> MarkdownContent:
    """Markdown hover document for a rule.

    Flag lines are rendered in the order recommended, fixable, deprecated.
    Every line ends in a hard break and the content is trusted so the trailing
    "more information" command link can run.

    Args
    ----
        info: Resolved rule metadata
        extension_name: Suffix of the documentation page title
        command: Command id the "more information" link targets
    """
    page_title = f"{info.info_page_title or info.rule_name} - {extension_name}"
    link = encode_command_link(
        MORE_INFO_LABEL, info.info_url, page_title, MORE_INFO_TOOLTIP, command=command
    )

    match info:
        case PluginMissing():
            plugin = info.plugin_name or info.plugin_package_name or info.rule_name
            lines = [f"**Missing plugin**: {_code(plugin)}"]
        case RuleNotFound():
            lines = [f"**Rule not found**: {_code(info.rule_name)}"]
        case ResolvedRule():
            lines = _resolved_lines(info)
        case _:
            assert_never(info)

    lines += ["", link]
    return MarkdownContent(_HARD_BREAK.join(lines), is_trusted=True)


def _resolved_lines(info: ResolvedRule) -> list[str]:
    header = f"**{_escape_inline(info.rule_name)}**"
    if info.category:
        header += f"{_NBSP * 3}\\[{_code(info.category)}\\]"
    lines = [header]

    for enabled, glyph, label in (
        (info.is_recommended, Glyph.RECOMMENDED, "recommended"),
        (info.is_fixable, Glyph.FIXABLE, "fixable"),
        (info.is_deprecated, Glyph.DEPRECATED, "deprecated"),
    ):
        if enabled:
            lines.append(f"{_NBSP * 2}{glyph}{_NBSP * 2}{label}")

    if info.replaced_by:
        lines.append(f"{_NBSP * 2}replaced by {_code(info.replaced_by)}")

    if info.description:
        lines += ["", "---"]
        lines += [f"> {line}" for line in _sanitize_description(info.description).splitlines()]
        lines += [f"> {_NBSP * _QUOTE_PAD_WIDTH}", "", "---"]

    return lines


def _code(text: str) -> str:
    """Inline code span whose fence is longer than any backtick run in ``text``."""
    longest = max((len(run) for run in _BACKTICK_RUNS.findall(text)), default=0)
    fence = "`" * (longest + 1)
    pad = " " if text.startswith("`") or text.endswith("`") else ""
    return f"{fence}{pad}{text}{pad}{fence}"


def _escape_inline(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _INLINE_SPECIALS else ch for ch in text)


def _sanitize_description(text: str) -> str:
    """Neutralise raw HTML and link syntax in third-party descriptions.

    Code spans are copied verbatim: Markdown shows their content literally.
    """
    parts: list[str] = []
    last = 0
    for span in _CODE_SPAN.finditer(text):
        parts += [_escape_markup(text[last : span.start()]), span.group(0)]
        last = span.end()
    parts.append(_escape_markup(text[last:]))
    return "".join(parts)


def _escape_markup(text: str) -> str:
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return text.replace("[", "\\[").replace("]", "\\]")
