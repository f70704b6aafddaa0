"""Normalization of embedded unit metadata into typed descriptors."""

from clawmeta.metadata.models import (
    FieldError,
    HookEntry,
    HookInstallSpec,
    HookInvocationPolicy,
    HookMetadata,
    InstallSpec,
    MetadataResolution,
    RequirementSet,
    SkillEntry,
    SkillInstallSpec,
    SkillInvocationPolicy,
    SkillMetadata,
)
from clawmeta.metadata.normalize import normalize_string_list, parse_install_spec
from clawmeta.metadata.profiles import HOOK_PROFILE, SKILL_PROFILE, DomainProfile

__all__ = [
    "DomainProfile",
    "FieldError",
    "HOOK_PROFILE",
    "HookEntry",
    "HookInstallSpec",
    "HookInvocationPolicy",
    "HookMetadata",
    "InstallSpec",
    "MetadataResolution",
    "RequirementSet",
    "SKILL_PROFILE",
    "SkillEntry",
    "SkillInstallSpec",
    "SkillInvocationPolicy",
    "SkillMetadata",
    "normalize_string_list",
    "parse_install_spec",
]
