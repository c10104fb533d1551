"""Inline annotation pipeline: composition, command links, decorations, refresh."""

from lintlens.kernel.annotations.command_link import (
    CommandLinkPayload,
    decode_command_link,
    decode_command_uri,
    encode_command_link,
    encode_command_uri,
)
from lintlens.kernel.annotations.composer import compose_hover, compose_summary
from lintlens.kernel.annotations.controller import AnnotationController
from lintlens.kernel.annotations.decoration import build_decoration, build_decoration_style

__all__ = [
    "AnnotationController",
    "CommandLinkPayload",
    "build_decoration",
    "build_decoration_style",
    "compose_hover",
    "compose_summary",
    "decode_command_link",
    "decode_command_uri",
    "encode_command_link",
    "encode_command_uri",
]
