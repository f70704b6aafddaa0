"""Generic metadata, invocation-policy and key resolution.

The skills and hooks pipelines share this module; a DomainProfile supplies
the vocabulary that differs between them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from clawmeta.booleans import parse_boolean_value
from clawmeta.config.models import BooleanConfig, MetadataConfig
from clawmeta.metadata.models import (
    FieldError,
    HookEntry,
    HookInvocationPolicy,
    HookMetadata,
    MetadataResolution,
    RequirementSet,
    SkillEntry,
    SkillInvocationPolicy,
    SkillMetadata,
)
from clawmeta.metadata.normalize import (
    extract_field,
    normalize_string_list,
    optional_list,
    parse_install_spec,
    type_name,
)
from clawmeta.metadata.payload import PayloadRejected, parse_payload
from clawmeta.metadata.profiles import DomainProfile

logger = logging.getLogger(__name__)

_DEFAULT_METADATA_CONFIG = MetadataConfig()
_DEFAULT_BOOLEAN_CONFIG = BooleanConfig()


def frontmatter_string(frontmatter: Mapping[str, Any], key: str) -> str | None:
    """Return the frontmatter value for ``key`` only when it is a string."""
    raw = frontmatter.get(key)
    return raw if isinstance(raw, str) else None


def _resolve_requires(raw: Any) -> RequirementSet | None:
    if not isinstance(raw, Mapping):
        return None
    return RequirementSet(
        bins=normalize_string_list(raw.get("bins")),
        any_bins=normalize_string_list(raw.get("anyBins")),
        env=normalize_string_list(raw.get("env")),
        config=normalize_string_list(raw.get("config")),
    )


def _resolve_install(raw: Any, profile: DomainProfile, errors: list[FieldError]) -> tuple[Any, ...] | None:
    if not isinstance(raw, list):
        return None
    specs = []
    for index, entry in enumerate(raw):
        spec, entry_errors = parse_install_spec(
            entry,
            kinds=profile.install_kinds,
            factory=profile.install_factory,
            extra_fields=profile.install_fields,
            path=f"install[{index}]",
        )
        errors.extend(entry_errors)
        if spec is not None:
            specs.append(spec)
    return tuple(specs) or None


def _build_metadata(
    manifest: Mapping[str, Any],
    profile: DomainProfile,
    errors: list[FieldError],
) -> SkillMetadata | HookMetadata:
    values: dict[str, Any] = {}
    for spec in profile.scalar_fields:
        value, error = extract_field(manifest, spec)
        if error is not None:
            errors.append(error)
        elif value is not None:
            values[spec.attr] = value

    requires_raw = manifest.get("requires")
    if requires_raw is not None and not isinstance(requires_raw, Mapping):
        errors.append(FieldError("requires", f"expected object, got {type_name(requires_raw)}"))
    values["requires"] = _resolve_requires(requires_raw)

    install_raw = manifest.get("install")
    if install_raw is not None and not isinstance(install_raw, list):
        errors.append(FieldError("install", f"expected array, got {type_name(install_raw)}"))
    values["install"] = _resolve_install(install_raw, profile, errors)

    values["os"] = optional_list(manifest.get("os"))
    if profile.carries_events:
        values["events"] = normalize_string_list(manifest.get("events"))

    return profile.metadata_factory(**values)


def inspect_metadata(
    frontmatter: Mapping[str, Any],
    profile: DomainProfile,
    config: MetadataConfig | None = None,
) -> MetadataResolution:
    """Resolve the embedded metadata payload and report dropped fields.

    Never raises: a missing or malformed payload yields ``metadata=None``.
    """
    cfg = config or _DEFAULT_METADATA_CONFIG
    raw = frontmatter_string(frontmatter, cfg.frontmatter_field)
    if not raw:
        return MetadataResolution(None)

    outcome = parse_payload(raw)
    if isinstance(outcome, PayloadRejected):
        logger.debug("%s metadata payload is not valid JSON5: %s", profile.name, outcome.reason)
        return MetadataResolution(None, (FieldError(cfg.frontmatter_field, outcome.reason),))

    parsed = outcome.value
    if not isinstance(parsed, Mapping):
        error = FieldError(cfg.frontmatter_field, f"expected object, got {type_name(parsed)}")
        return MetadataResolution(None, (error,))
    manifest = parsed.get(cfg.manifest_key)
    if not isinstance(manifest, Mapping):
        if manifest is None:
            return MetadataResolution(None)
        error = FieldError(cfg.manifest_key, f"expected object, got {type_name(manifest)}")
        return MetadataResolution(None, (error,))

    errors: list[FieldError] = []
    metadata = _build_metadata(manifest, profile, errors)
    for error in errors:
        logger.debug("%s metadata field dropped: %s", profile.name, error)
    return MetadataResolution(metadata, tuple(errors))


def resolve_metadata(
    frontmatter: Mapping[str, Any],
    profile: DomainProfile,
    config: MetadataConfig | None = None,
) -> SkillMetadata | HookMetadata | None:
    return inspect_metadata(frontmatter, profile, config).metadata


def resolve_invocation_policy(
    frontmatter: Mapping[str, Any],
    profile: DomainProfile,
    config: BooleanConfig | None = None,
) -> SkillInvocationPolicy | HookInvocationPolicy:
    """Derive the invocation flags, substituting defaults for absent or unparseable values."""
    cfg = config or _DEFAULT_BOOLEAN_CONFIG
    values: dict[str, bool] = {}
    for flag in profile.invocation_flags:
        parsed = parse_boolean_value(
            frontmatter_string(frontmatter, flag.key),
            truthy=cfg.truthy,
            falsy=cfg.falsy,
        )
        values[flag.attr] = flag.default if parsed is None else parsed
    return profile.invocation_factory(**values)


def resolve_key(natural_name: str, entry: SkillEntry | HookEntry | None = None) -> str:
    """Prefer the metadata key override when non-empty, else the natural name."""
    metadata = entry.metadata if entry is not None else None
    override = metadata.key_override if metadata is not None else None
    return override if override else natural_name
