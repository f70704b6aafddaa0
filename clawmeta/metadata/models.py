"""Descriptors produced by metadata resolution.

All descriptors are frozen; sequences are tuples. ``None`` means a field was
not specified, which is distinct from an empty tuple.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Literal

SkillInstallKind = Literal["brew", "node", "go", "uv", "download"]
HookInstallKind = Literal["bundled", "npm", "git"]


def _wire(name: str) -> dict[str, str]:
    return {"wire": name}


def to_wire(value: Any) -> Any:
    """Convert descriptors to the camelCase JSON shape, omitting absent fields."""
    if is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for item in fields(value):
            raw = getattr(value, item.name)
            if raw is None:
                continue
            out[item.metadata.get("wire", item.name)] = to_wire(raw)
        return out
    if isinstance(value, tuple | list):
        return [to_wire(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): to_wire(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class RequirementSet:
    """Prerequisites a unit declares."""

    bins: tuple[str, ...] = ()
    any_bins: tuple[str, ...] = field(default=(), metadata=_wire("anyBins"))
    env: tuple[str, ...] = ()
    config: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class InstallSpec:
    """Fields shared by every install strategy."""

    kind: str
    id: str | None = None
    label: str | None = None
    bins: tuple[str, ...] | None = None
    os: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class SkillInstallSpec(InstallSpec):
    """Install instruction for a skill dependency.

    ``formula`` is used by brew, ``package`` by node/uv, ``module`` by go and
    ``url``/``archive``/``extract``/``strip_components``/``target_dir`` by
    download. Fields are kept whatever the kind; completeness is checked by
    the installer.
    """

    kind: SkillInstallKind = "brew"
    formula: str | None = None
    package: str | None = None
    module: str | None = None
    url: str | None = None
    archive: str | None = None
    extract: bool | None = None
    strip_components: int | float | None = field(default=None, metadata=_wire("stripComponents"))
    target_dir: str | None = field(default=None, metadata=_wire("targetDir"))


@dataclass(frozen=True)
class HookInstallSpec(InstallSpec):
    """Install instruction for a hook (bundled, npm package or git repository)."""

    kind: HookInstallKind = "bundled"
    package: str | None = None
    repository: str | None = None


@dataclass(frozen=True)
class SkillMetadata:
    """The ``openclaw`` block of a SKILL.md metadata payload."""

    always: bool | None = None
    emoji: str | None = None
    homepage: str | None = None
    skill_key: str | None = field(default=None, metadata=_wire("skillKey"))
    primary_env: str | None = field(default=None, metadata=_wire("primaryEnv"))
    os: tuple[str, ...] | None = None
    requires: RequirementSet | None = None
    install: tuple[SkillInstallSpec, ...] | None = None

    @property
    def key_override(self) -> str | None:
        return self.skill_key

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class HookMetadata:
    """The ``openclaw`` block of a HOOK.md metadata payload.

    ``events`` is always a tuple: an empty tuple means no events were
    configured, never "not specified".
    """

    always: bool | None = None
    emoji: str | None = None
    homepage: str | None = None
    hook_key: str | None = field(default=None, metadata=_wire("hookKey"))
    export: str | None = None
    os: tuple[str, ...] | None = None
    events: tuple[str, ...] = ()
    requires: RequirementSet | None = None
    install: tuple[HookInstallSpec, ...] | None = None

    @property
    def key_override(self) -> str | None:
        return self.hook_key

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


# Names used by the host runtime.
OpenclawSkillMetadata = SkillMetadata
OpenclawHookMetadata = HookMetadata


@dataclass(frozen=True)
class SkillInvocationPolicy:
    user_invocable: bool = field(default=True, metadata=_wire("userInvocable"))
    disable_model_invocation: bool = field(default=False, metadata=_wire("disableModelInvocation"))

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class HookInvocationPolicy:
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class FieldError:
    """A field dropped during resolution, identified by its path in the payload."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class MetadataResolution:
    """Resolved metadata together with the fields that were dropped."""

    metadata: SkillMetadata | HookMetadata | None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.metadata is not None and not self.errors


@dataclass(frozen=True)
class SkillEntry:
    """A skill as seen by the registry: name, raw frontmatter and derived descriptors."""

    name: str
    frontmatter: Mapping[str, Any] = field(default_factory=dict)
    metadata: SkillMetadata | None = None
    invocation: SkillInvocationPolicy | None = None

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass(frozen=True)
class HookEntry:
    """A hook as seen by the registry: name, raw frontmatter and derived descriptors."""

    name: str
    frontmatter: Mapping[str, Any] = field(default_factory=dict)
    metadata: HookMetadata | None = None
    invocation: HookInvocationPolicy | None = None

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)
