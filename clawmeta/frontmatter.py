"""Frontmatter block splitting for SKILL.md / HOOK.md content.

The block is the ``---`` delimited header at the top of a unit definition.
Values are flattened to strings so downstream resolvers see the same shape
whether the author wrote YAML scalars, YAML collections, or inline JSON.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

import yaml  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

ParsedFrontmatter = Mapping[str, Any]

_FRONTMATTER_PATTERN = re.compile(r"^---[ \t]*\n(.*?)\n---[ \t]*(?:\n(.*))?$", re.DOTALL)
_LINE_KEY_PATTERN = re.compile(r"^([A-Za-z0-9_.-]+)\s*:(.*)$")


def _normalize_newlines(content: str) -> str:
    return content.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def _coerce_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict | list):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def _parse_lines(block: str) -> dict[str, str]:
    """Fallback for blocks YAML rejects (e.g. inline JSON5 with comments)."""
    result: dict[str, str] = {}
    current_key: str | None = None
    current_lines: list[str] = []

    def _flush() -> None:
        if current_key is None:
            return
        if len(current_lines) == 1:
            value = _strip_quotes(current_lines[0].strip())
        else:
            value = "\n".join(current_lines).strip()
        if value:
            result[current_key] = value
        else:
            result.pop(current_key, None)

    for line in block.split("\n"):
        match = _LINE_KEY_PATTERN.match(line)
        if match and not line[:1].isspace():
            _flush()
            current_key = match.group(1)
            current_lines = [match.group(2).strip()]
            continue
        if current_key is None:
            continue
        if line.strip():
            current_lines.append(line)
        elif len(current_lines) > 1:
            current_lines.append("")
    _flush()
    return result


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Return ``(block, body)``; block is None when no frontmatter is present."""
    if not isinstance(content, str):
        return None, ""
    normalized = _normalize_newlines(content)
    match = _FRONTMATTER_PATTERN.match(normalized)
    if match is None:
        return None, normalized
    block, body = match.groups()
    return block, (body or "")


def parse_frontmatter_block(content: str) -> dict[str, Any]:
    """Parse the frontmatter block of ``content`` into a flat string mapping.

    Missing or unreadable blocks yield an empty mapping.
    """
    block, _body = split_frontmatter(content)
    if block is None:
        return {}

    try:
        parsed = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as exc:
        # ValueError: timestamp-looking scalars that are not real dates (2024-02-30).
        logger.debug("frontmatter YAML parse failed, using line parser: %s", exc)
        return _parse_lines(block)

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        logger.debug("frontmatter is not a mapping (%s), using line parser", type(parsed).__name__)
        return _parse_lines(block)

    result: dict[str, Any] = {}
    for raw_key, raw_value in parsed.items():
        if raw_key is None:
            continue
        value = _coerce_value(raw_value)
        if value is None:
            continue
        result[str(raw_key)] = value
    return result
