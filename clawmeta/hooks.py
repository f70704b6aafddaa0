"""Hook frontmatter: metadata, invocation policy and key resolution for HOOK.md."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from clawmeta.config.models import ClawmetaConfig
from clawmeta.frontmatter import ParsedFrontmatter, parse_frontmatter_block
from clawmeta.metadata.models import (
    HookEntry,
    HookInvocationPolicy,
    HookMetadata,
    MetadataResolution,
)
from clawmeta.metadata.profiles import HOOK_PROFILE
from clawmeta.metadata.resolver import (
    inspect_metadata,
    resolve_invocation_policy,
    resolve_key,
)


def parse_frontmatter(content: str) -> ParsedFrontmatter:
    return parse_frontmatter_block(content)


def inspect_openclaw_metadata(
    frontmatter: Mapping[str, Any],
    config: ClawmetaConfig | None = None,
) -> MetadataResolution:
    """Resolve hook metadata and report every field that was dropped."""
    return inspect_metadata(frontmatter, HOOK_PROFILE, config.metadata if config else None)


def resolve_openclaw_metadata(
    frontmatter: Mapping[str, Any],
    config: ClawmetaConfig | None = None,
) -> HookMetadata | None:
    """Return the hook's ``openclaw`` metadata, or None when absent or malformed.

    When metadata resolves, ``events`` is always a tuple (possibly empty).
    """
    metadata = inspect_openclaw_metadata(frontmatter, config).metadata
    return metadata if isinstance(metadata, HookMetadata) else None


def resolve_hook_invocation_policy(
    frontmatter: Mapping[str, Any],
    config: ClawmetaConfig | None = None,
) -> HookInvocationPolicy:
    booleans = config.booleans if config else None
    return cast(HookInvocationPolicy, resolve_invocation_policy(frontmatter, HOOK_PROFILE, booleans))


def resolve_hook_key(hook_name: str, entry: HookEntry | None = None) -> str:
    return resolve_key(hook_name, entry)


def load_hook_entry(name: str, content: str, config: ClawmetaConfig | None = None) -> HookEntry:
    """Build the registry entry for a hook from its HOOK.md content."""
    frontmatter = parse_frontmatter(content)
    return HookEntry(
        name=name,
        frontmatter=frontmatter,
        metadata=resolve_openclaw_metadata(frontmatter, config),
        invocation=resolve_hook_invocation_policy(frontmatter, config),
    )
