"""Icon glyphs shared by inline summaries and hover documents."""

from enum import StrEnum


class Glyph(StrEnum):
    """Small markers used consistently across all rendered annotation text."""

    RECOMMENDED = "⭐"
    DEPRECATED = "⛔"
    FIXABLE = "🔧"
    MISSING = "❗"
    NOT_FOUND = "🔍"
    LINK = "↗"
