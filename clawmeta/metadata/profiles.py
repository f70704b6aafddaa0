"""Domain vocabularies for the skills and hooks pipelines."""

from __future__ import annotations

from dataclasses import dataclass

from clawmeta.metadata.models import (
    HookInstallSpec,
    HookInvocationPolicy,
    HookMetadata,
    InstallSpec,
    SkillInstallSpec,
    SkillInvocationPolicy,
    SkillMetadata,
)
from clawmeta.metadata.normalize import TypedField


@dataclass(frozen=True)
class InvocationFlag:
    """A boolean frontmatter field and the policy attribute it populates."""

    key: str
    attr: str
    default: bool


@dataclass(frozen=True)
class DomainProfile:
    """Everything that differs between the skills and hooks pipelines."""

    name: str
    install_kinds: frozenset[str]
    install_factory: type[InstallSpec]
    install_fields: tuple[TypedField, ...]
    metadata_factory: type[SkillMetadata] | type[HookMetadata]
    scalar_fields: tuple[TypedField, ...]
    invocation_factory: type[SkillInvocationPolicy] | type[HookInvocationPolicy]
    invocation_flags: tuple[InvocationFlag, ...]
    carries_events: bool = False


_COMMON_SCALARS = (
    TypedField("always", "always", "boolean"),
    TypedField("emoji", "emoji", "string"),
    TypedField("homepage", "homepage", "string"),
)

SKILL_PROFILE = DomainProfile(
    name="skill",
    install_kinds=frozenset({"brew", "node", "go", "uv", "download"}),
    install_factory=SkillInstallSpec,
    install_fields=(
        TypedField("formula", "formula", "string"),
        TypedField("package", "package", "string"),
        TypedField("module", "module", "string"),
        TypedField("url", "url", "string"),
        TypedField("archive", "archive", "string"),
        TypedField("extract", "extract", "boolean"),
        TypedField("stripComponents", "strip_components", "number"),
        TypedField("targetDir", "target_dir", "string"),
    ),
    metadata_factory=SkillMetadata,
    scalar_fields=_COMMON_SCALARS
    + (
        TypedField("skillKey", "skill_key", "string"),
        TypedField("primaryEnv", "primary_env", "string"),
    ),
    invocation_factory=SkillInvocationPolicy,
    invocation_flags=(
        InvocationFlag("user-invocable", "user_invocable", True),
        InvocationFlag("disable-model-invocation", "disable_model_invocation", False),
    ),
)

HOOK_PROFILE = DomainProfile(
    name="hook",
    install_kinds=frozenset({"bundled", "npm", "git"}),
    install_factory=HookInstallSpec,
    install_fields=(
        TypedField("package", "package", "string"),
        TypedField("repository", "repository", "string"),
    ),
    metadata_factory=HookMetadata,
    scalar_fields=_COMMON_SCALARS
    + (
        TypedField("hookKey", "hook_key", "string"),
        TypedField("export", "export", "string"),
    ),
    invocation_factory=HookInvocationPolicy,
    invocation_flags=(InvocationFlag("enabled", "enabled", True),),
    carries_events=True,
)
