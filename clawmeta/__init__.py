"""clawmeta: frontmatter metadata normalization for skills and hooks.

Turns the loosely-typed frontmatter of SKILL.md / HOOK.md files into typed
descriptors: requirements, install specs, invocation policy and identity key.
"""

from clawmeta.booleans import parse_boolean_value
from clawmeta.frontmatter import parse_frontmatter_block
from clawmeta.metadata import (
    FieldError,
    HookEntry,
    HookInstallSpec,
    HookInvocationPolicy,
    HookMetadata,
    MetadataResolution,
    RequirementSet,
    SkillEntry,
    SkillInstallSpec,
    SkillInvocationPolicy,
    SkillMetadata,
    normalize_string_list,
)

__all__ = [
    "FieldError",
    "HookEntry",
    "HookInstallSpec",
    "HookInvocationPolicy",
    "HookMetadata",
    "MetadataResolution",
    "RequirementSet",
    "SkillEntry",
    "SkillInstallSpec",
    "SkillInvocationPolicy",
    "SkillMetadata",
    "normalize_string_list",
    "parse_boolean_value",
    "parse_frontmatter_block",
]
