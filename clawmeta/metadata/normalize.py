"""Field-level normalization for metadata payloads.

Every extractor here is fallible per field: it returns the accepted value
(or None) together with an optional FieldError, so one malformed field never
voids the surrounding object.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Literal, NamedTuple

from clawmeta.metadata.models import FieldError, InstallSpec

FieldKind = Literal["string", "boolean", "number"]


class TypedField(NamedTuple):
    """A scalar payload field: wire key, attribute name and expected type."""

    key: str
    attr: str
    kind: FieldKind


def _stringify(value: Any) -> str:
    # JSON text form, so ["true", true] and [1, 1.0] normalize alike.
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_string_list(value: Any) -> tuple[str, ...]:
    """Normalize a list-shaped field to trimmed, non-empty strings.

    Arrays are stringified element-wise; strings are split on commas. Order
    and duplicates are preserved. Any other input yields an empty tuple.
    """
    if isinstance(value, str):
        parts: Iterable[str] = value.split(",")
    elif isinstance(value, list | tuple):
        parts = (_stringify(item) for item in value)
    else:
        return ()
    return tuple(part.strip() for part in parts if part.strip())


def optional_list(value: Any) -> tuple[str, ...] | None:
    """normalize_string_list, with an empty result reported as not specified."""
    normalized = normalize_string_list(value)
    return normalized or None


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _matches(value: Any, kind: FieldKind) -> bool:
    if kind == "string":
        return isinstance(value, str)
    if kind == "boolean":
        return isinstance(value, bool)
    return isinstance(value, int | float) and not isinstance(value, bool)


def extract_field(
    raw: Mapping[str, Any],
    spec: TypedField,
    path: str = "",
) -> tuple[Any, FieldError | None]:
    """Return the field value when its runtime type is exactly the expected one.

    A missing key is not an error. A present key with the wrong type yields
    ``(None, FieldError)``; no coercion is attempted.
    """
    if spec.key not in raw:
        return None, None
    value = raw[spec.key]
    if _matches(value, spec.kind):
        return value, None
    location = f"{path}.{spec.key}" if path else spec.key
    return None, FieldError(location, f"expected {spec.kind}, got {type_name(value)}")


def resolve_install_kind(raw: Mapping[str, Any]) -> str:
    """Read the strategy tag from ``kind``, else ``type``; trimmed and lower-cased."""
    tag = raw.get("kind")
    if not isinstance(tag, str):
        tag = raw.get("type")
    if not isinstance(tag, str):
        return ""
    return tag.strip().lower()


def parse_install_spec(
    raw: Any,
    *,
    kinds: frozenset[str],
    factory: type[InstallSpec],
    extra_fields: tuple[TypedField, ...],
    path: str = "install",
) -> tuple[InstallSpec | None, list[FieldError]]:
    """Validate one install entry against a closed set of strategies.

    An entry that is not an object or whose kind is outside ``kinds`` is
    rejected as a whole. Optional scalars with the wrong type are omitted
    individually. No cross-field validation is performed.
    """
    if not isinstance(raw, Mapping):
        return None, [FieldError(path, f"expected object, got {type_name(raw)}")]

    kind = resolve_install_kind(raw)
    if kind not in kinds:
        label = kind or "<missing>"
        return None, [FieldError(path, f"unsupported install kind {label!r}")]

    errors: list[FieldError] = []
    values: dict[str, Any] = {"kind": kind}
    common = (TypedField("id", "id", "string"), TypedField("label", "label", "string"))
    for spec in common + extra_fields:
        value, error = extract_field(raw, spec, path)
        if error is not None:
            errors.append(error)
        elif value is not None:
            values[spec.attr] = value

    values["bins"] = optional_list(raw.get("bins"))
    values["os"] = optional_list(raw.get("os"))
    return factory(**values), errors
