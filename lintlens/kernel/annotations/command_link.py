"""Markdown links that invoke the documentation viewer command.

A command link looks like::

    [label](command:lintlens.openWebView?%7B%22url%22%3A...%7D "tooltip")

The query is the percent-encoded JSON object ``{"url": ..., "pageTitle": ...}``.
Every reserved character (including parentheses and quotes) is encoded, so
arbitrary URLs and titles cannot break out of the surrounding Markdown.
"""

from __future__ import annotations

import json
import re
from urllib.parse import quote, unquote

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from lintlens.kernel.exceptions import CommandLinkError

COMMAND_SCHEME = "command:"
DEFAULT_COMMAND = "lintlens.openWebView"
DEFAULT_TOOLTIP = "Click here"

_LINK_PATTERN = re.compile(
    r'^\[(?P<label>(?:\\.|[^\]\\])*)\]'
    r'\((?P<target>\S+?)(?:\s+"(?P<tooltip>(?:\\.|[^"\\])*)")?\)$',
    re.DOTALL,
)
_LABEL_SPECIALS = "\\[]"
_TOOLTIP_SPECIALS = "\\\""


class CommandLinkPayload(BaseModel):
    """Decoded arguments of a documentation command link."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command: str
    url: str | None = None
    page_title: str | None = Field(default=None, alias="pageTitle")


def _escape(text: str, specials: str) -> str:
    return "".join(f"\\{ch}" if ch in specials else ch for ch in text)


def encode_command_uri(
    url: str | None, page_title: str | None, command: str = DEFAULT_COMMAND
) -> str:
    """Build ``command:<id>?<encoded args>`` for the documentation viewer."""
    args = json.dumps({"url": url, "pageTitle": page_title}, ensure_ascii=False)
    return f"{COMMAND_SCHEME}{command}?{quote(args, safe='')}"


def encode_command_link(
    label: str,
    url: str | None,
    page_title: str | None,
    tooltip: str = "",
    command: str = DEFAULT_COMMAND,
) -> str:
    """Build a Markdown link that opens ``url`` in the documentation viewer.

    Args
    ----
        label: Link text; brackets are escaped
        url: Page to fetch and display
        page_title: Title for the viewer panel
        tooltip: Hover text for the link, defaults to "Click here"
        command: Command id the link targets

    Returns
    -------
    str
        Markdown link text, only executable when the content is trusted
    """
    target = encode_command_uri(url, page_title, command)
    title = _escape(tooltip or DEFAULT_TOOLTIP, _TOOLTIP_SPECIALS)
    return f'[{_escape(label, _LABEL_SPECIALS)}]({target} "{title}")'


def decode_command_uri(uri: str) -> CommandLinkPayload:
    """Reverse :func:`encode_command_uri`.

    Raises
    ------
    CommandLinkError
        If ``uri`` is not a command URI or its arguments are malformed
    """
    if not uri.startswith(COMMAND_SCHEME):
        raise CommandLinkError(f"Not a command URI: {uri!r}")
    command, sep, query = uri[len(COMMAND_SCHEME) :].partition("?")
    if not command:
        raise CommandLinkError(f"Command URI has no command id: {uri!r}")
    if not sep:
        return CommandLinkPayload(command=command)

    try:
        args = json.loads(unquote(query, errors="strict"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CommandLinkError(f"Malformed command arguments: {e}") from e
    if not isinstance(args, dict):
        raise CommandLinkError("Command arguments must be a JSON object")

    try:
        return CommandLinkPayload.model_validate({**args, "command": command})
    except PydanticValidationError as e:
        raise CommandLinkError(f"Invalid command arguments: {e}") from e


def decode_command_link(link: str) -> CommandLinkPayload:
    """Extract and decode the command URI from a Markdown command link."""
    match = _LINK_PATTERN.match(link.strip())
    if match is None:
        raise CommandLinkError(f"Not a Markdown link: {link!r}")
    return decode_command_uri(match["target"])

