"""Relaxed-JSON parsing of the embedded metadata payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import json5


@dataclass(frozen=True)
class PayloadParsed:
    """The payload parsed successfully."""

    value: Any


@dataclass(frozen=True)
class PayloadRejected:
    """The payload is not valid relaxed JSON."""

    reason: str


PayloadOutcome = PayloadParsed | PayloadRejected


def parse_payload(raw: str) -> PayloadOutcome:
    """Parse ``raw`` as JSON5 (comments, trailing commas, unquoted keys)."""
    try:
        return PayloadParsed(json5.loads(raw))
    except (ValueError, TypeError, RecursionError) as exc:
        return PayloadRejected(str(exc) or type(exc).__name__)
