from __future__ import annotations

import logging
import re

logger = logging.getLogger("solid.headers")

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def _sanitize_value(value: str) -> str:
    """
    Strip CR, LF and null bytes from a raw header value.
    Folded (obs-fold) or injected header lines otherwise leak into parsing.
    """
    return value.replace("\r", "").replace("\n", "").replace("\x00", "")


def _split_top_level(value: str, sep: str) -> list[str]:
    """
    Split ``value`` on ``sep`` while ignoring separators that appear inside
    ``<...>`` URI references or double-quoted strings (with backslash escapes).

    A ``<`` opens a URI reference only at the start of a part. A separator
    inside a reference that is never closed, or that runs into another
    ``<`` before its ``>``, still splits so the broken part stays apart.
    """
    parts: list[str] = []
    current: list[str] = []
    in_uri = False
    in_quotes = False
    escaped = False
    for i, ch in enumerate(value):
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if in_quotes:
            if ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
            current.append(ch)
            continue
        if in_uri:
            if ch == ">":
                in_uri = False
            elif ch == sep:
                close = value.find(">", i + 1)
                opener = value.find("<", i + 1)
                if close == -1 or -1 < opener < close:
                    in_uri = False
                    parts.append("".join(current))
                    current = []
                    continue
            current.append(ch)
            continue
        if ch == '"':
            in_quotes = True
        elif ch == "<" and not "".join(current).strip():
            in_uri = True
        elif ch == sep:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
        value = re.sub(r"\\(.)", r"\1", value)
    return value


def _parse_link_entry(entry: str) -> tuple[str, str] | None:
    """Return ``(target, rel)`` for one Link entry, or None if malformed."""
    segments = _split_top_level(entry, ";")
    target = segments[0].strip()
    if not (target.startswith("<") and target.endswith(">")):
        return None
    target = target[1:-1].strip()

    rel = None
    for param in segments[1:]:
        name, eq, raw = param.partition("=")
        if not eq:
            continue
        if name.strip().lower() == "rel":
            rel = _unquote(raw)
            break
    if not rel:
        return None
    return target, rel


def parse_link_header(value: str | None) -> dict[str, str]:
    """
    Parse a ``Link`` header into a relation -> target mapping.

    Entries are split on top-level commas only, so commas inside URIs or
    quoted parameters are kept. Each entry is keyed on its whole ``rel``
    value exactly as sent. When a relation repeats, the last entry wins.

    Args:
        value: Raw ``Link`` header value, or None when the header is absent.

    Returns:
        Mapping of relation name to target URI. Malformed entries (no
        ``<uri>`` or no ``rel`` parameter) are skipped.
    """
    links: dict[str, str] = {}
    if not value:
        return links
    value = _sanitize_value(value)
    for entry in _split_top_level(value, ","):
        if not entry.strip():
            continue
        parsed = _parse_link_entry(entry)
        if parsed is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Skipping malformed Link entry: %r", entry.strip())
            continue
        target, rel = parsed
        links[rel] = target
    return links


def parse_allowed_methods(
    allow: str | None,
    accept_patch: str | None,
) -> dict[str, bool]:
    """
    Build the verb -> allowed mapping advertised by ``Allow``/``Accept-Patch``.

    Only verbs the server lists are present; a missing verb means unknown,
    not denied. A non-empty ``Accept-Patch`` implies ``patch``.
    """
    methods: dict[str, bool] = {}
    if allow:
        for token in _TOKEN_SPLIT.split(_sanitize_value(allow)):
            if token:
                methods[token.lower()] = True
    if accept_patch and accept_patch.strip():
        methods["patch"] = True
    return methods
