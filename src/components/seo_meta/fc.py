"""
SEO meta functional core: escaping and title formatting.

No I/O operations - all functions are pure and deterministic.
"""

from __future__ import annotations

import re
from html.entities import html5

from .models import DEFAULT_TITLE_SEPARATOR, MAX_TITLE_LENGTH

# Characters stripped by trim() when no explicit set is given
_TRIM_CHARS = " \t\n\r\0\x0b"

_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f\v]+")
_SURROGATES = re.compile("[\ud800-\udfff]")
_ENTITY = re.compile(
    r"&(?:(?P<name>[a-zA-Z][a-zA-Z0-9]*)|#(?P<dec>[0-9]+)|#[xX](?P<hex>[0-9a-fA-F]+));"
)

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}
_ESCAPE_RE = re.compile("[&<>\"']")


def _to_text(s: str | bytes) -> str:
    """Decode to valid text, substituting U+FFFD for invalid sequences."""
    if isinstance(s, bytes):
        return s.decode("utf-8", errors="replace")
    return _SURROGATES.sub("\ufffd", s)


def _is_allowed_code_point(cp: int) -> bool:
    """Code points an HTML5 numeric character reference may name."""
    return (
        0x20 <= cp <= 0x7E
        or (0x09 <= cp <= 0x0D and cp != 0x0B)
        or 0xA0 <= cp <= 0xD7FF
        or (
            0xE000 <= cp <= 0x10FFFF
            and (cp & 0xFFFF) < 0xFFFE
            and not 0xFDD0 <= cp <= 0xFDEF
        )
    )


def _is_valid_entity(match: re.Match[str]) -> bool:
    name = match.group("name")
    if name is not None:
        return f"{name};" in html5
    digits = match.group("dec")
    cp = int(digits) if digits is not None else int(match.group("hex"), 16)
    return _is_allowed_code_point(cp)


def _escape(s: str, double: bool = True) -> str:
    if double:
        return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], s)

    def replace(m: re.Match[str]) -> str:
        char = m.group(0)
        if char == "&":
            entity = _ENTITY.match(s, m.start())
            # Entity bodies hold no escapable characters, keeping "&" keeps the entity
            if entity is not None and _is_valid_entity(entity):
                return char
        return _ESCAPES[char]

    return _ESCAPE_RE.sub(replace, s)


def escape_html(s: str | bytes) -> str:
    """Escape string for use everywhere inside HTML (except for comments)."""
    return _escape(_to_text(s))


def escape_html_attr(s: str | bytes, double: bool = True) -> str:
    """
    Escape string for use inside an HTML attribute value.

    A value containing a backtick but no space, quote or angle bracket gets a
    trailing space, otherwise innerHTML serialization in some browsers emits it
    unquoted (mXSS).

    Args:
        s: Raw attribute value
        double: Also encode existing HTML entities

    Returns:
        Escaped value, safe inside a double-quoted attribute.
    """
    text = _to_text(s)
    if "`" in text and not any(c in text for c in " <>\"'"):
        text += " "
    return _escape(text, double)


def format_title(
    format: str,
    title: str,
    separator: str | None = None,
    suffix: str | None = None,
) -> str:
    """
    Format meta title by mask. If suffix is empty, remove it with separator.

    Titles longer than 70 characters after formatting fall back to the bare
    title.
    """
    separator = (separator if separator is not None else DEFAULT_TITLE_SEPARATOR).strip(
        _TRIM_CHARS
    )
    result = (
        format.replace("{{ title }}", title)
        .replace("{{ separator }}", separator)
        .replace("{{ suffix }}", suffix or "")
        .strip(_TRIM_CHARS)
    )
    if separator:
        result = result.strip(separator)
    result = _WHITESPACE_RUN.sub(" ", result.strip(_TRIM_CHARS))

    return title if len(result) > MAX_TITLE_LENGTH else result
