import json
import re
from collections.abc import Iterator
from typing import Any

PLACEHOLDER_IDEA = "Kunne ikke hente forslag – prøv igjen, eller juster prompt."

_MARKER_RE = re.compile(r"^\s*(?:(?:[-*•]|\d+[.)])\s*)+")
_OPEN_RE = re.compile(r"[\[{]")


def normalize_ideas(raw: str | None, count: int) -> list[str]:
    """Turn a model reply into at most ``count`` idea strings.

    A JSON block carrying the ideas is preferred, wherever it sits in the
    reply. Otherwise the text outside any JSON block goes through the line
    parser. An empty result becomes a single placeholder entry.
    """
    limit = max(int(count), 1)
    text = raw if isinstance(raw, str) else ""
    ideas = parse_structured(text, limit)
    if ideas is None:
        ideas = parse_lines(_without_json_blocks(text), limit)
    return ideas or [PLACEHOLDER_IDEA]


def parse_structured(text: str, limit: int) -> list[str] | None:
    """Return ideas from the first ``{"ideas": [...]}`` block, or None if the reply has none."""
    for start, _end, payload in _json_blocks(text):
        items = _idea_items(payload) if _standalone(text, start, payload) else None
        if items is None:
            continue
        cleaned = [_clean(item) for item in items]
        return [item for item in cleaned if item][:limit]
    return None


def parse_lines(text: str, limit: int) -> list[str]:
    ideas: list[str] = []
    for line in text.splitlines():
        if line.strip().startswith("```"):
            continue
        cleaned = _clean(line)
        if not cleaned:
            continue
        ideas.append(cleaned)
        if len(ideas) >= limit:
            break
    return ideas


def _json_blocks(text: str) -> Iterator[tuple[int, int, Any]]:
    decoder = json.JSONDecoder()
    match = _OPEN_RE.search(text)
    while match:
        try:
            payload, end = decoder.raw_decode(text, match.start())
        except (ValueError, RecursionError):
            match = _OPEN_RE.search(text, match.start() + 1)
            continue
        yield match.start(), end, payload
        match = _OPEN_RE.search(text, end)


def _standalone(text: str, start: int, payload: Any) -> bool:
    # Objects count anywhere; a list only when it opens its own line.
    if isinstance(payload, dict):
        return True
    line_start = text.rfind("\n", 0, start) + 1
    return not text[line_start:start].strip()


def _without_json_blocks(text: str) -> str:
    pieces: list[str] = []
    cursor = 0
    for start, end, payload in _json_blocks(text):
        if not _standalone(text, start, payload):
            continue
        pieces.append(text[cursor:start])
        pieces.append("\n")
        cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def _idea_items(payload: Any) -> list[str] | None:
    items = payload.get("ideas") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        return None
    if not all(isinstance(item, str) for item in items):
        return None
    return items


def _clean(line: str) -> str:
    return _MARKER_RE.sub("", line, count=1).strip()
