"""Skill frontmatter: metadata, invocation policy and key resolution for SKILL.md."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from clawmeta.config.models import ClawmetaConfig
from clawmeta.frontmatter import ParsedFrontmatter, parse_frontmatter_block
from clawmeta.metadata.models import (
    MetadataResolution,
    SkillEntry,
    SkillInvocationPolicy,
    SkillMetadata,
)
from clawmeta.metadata.profiles import SKILL_PROFILE
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
    """Resolve skill metadata and report every field that was dropped."""
    return inspect_metadata(frontmatter, SKILL_PROFILE, config.metadata if config else None)


def resolve_openclaw_metadata(
    frontmatter: Mapping[str, Any],
    config: ClawmetaConfig | None = None,
) -> SkillMetadata | None:
    """Return the skill's ``openclaw`` metadata, or None when absent or malformed."""
    metadata = inspect_openclaw_metadata(frontmatter, config).metadata
    return metadata if isinstance(metadata, SkillMetadata) else None


def resolve_skill_invocation_policy(
    frontmatter: Mapping[str, Any],
    config: ClawmetaConfig | None = None,
) -> SkillInvocationPolicy:
    booleans = config.booleans if config else None
    return cast(SkillInvocationPolicy, resolve_invocation_policy(frontmatter, SKILL_PROFILE, booleans))


def resolve_skill_key(skill_name: str, entry: SkillEntry | None = None) -> str:
    return resolve_key(skill_name, entry)


def load_skill_entry(name: str, content: str, config: ClawmetaConfig | None = None) -> SkillEntry:
    """Build the registry entry for a skill from its SKILL.md content."""
    frontmatter = parse_frontmatter(content)
    return SkillEntry(
        name=name,
        frontmatter=frontmatter,
        metadata=resolve_openclaw_metadata(frontmatter, config),
        invocation=resolve_skill_invocation_policy(frontmatter, config),
    )
