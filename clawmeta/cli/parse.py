"""clawmeta parse: resolve a SKILL.md / HOOK.md and show its descriptors."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import typer

from clawmeta import hooks, skills
from clawmeta.config import ClawmetaConfig, YAMLConfigLoader, load_config
from clawmeta.errors import ClawmetaError
from clawmeta.metadata.models import HookEntry, SkillEntry

logger = logging.getLogger(__name__)

_UNIT_FILES = {"skill": "SKILL.md", "hook": "HOOK.md"}


def _resolve_target(path: Path, kind: str) -> tuple[Path, str]:
    """Pick the unit file and its kind; a directory means the SKILL.md/HOOK.md inside it."""
    if path.is_dir():
        candidates = [kind] if kind in _UNIT_FILES else ["skill", "hook"]
        for candidate in candidates:
            target = path / _UNIT_FILES[candidate]
            if target.is_file():
                return target, candidate
        return path / _UNIT_FILES[candidates[0]], candidates[0]
    if kind in _UNIT_FILES:
        return path, kind
    return path, "hook" if path.name.upper() == "HOOK.MD" else "skill"


def _unit_name(frontmatter: Mapping[str, Any], target: Path) -> str:
    raw = frontmatter.get("name")
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return target.parent.name


def build_payload(content: str, target: Path, kind: str, config: ClawmetaConfig | None = None) -> dict[str, Any]:
    """Resolve ``content`` as a unit of ``kind`` and return the JSON-ready descriptor."""
    module = hooks if kind == "hook" else skills
    frontmatter = module.parse_frontmatter(content)
    name = _unit_name(frontmatter, target)
    resolution = module.inspect_openclaw_metadata(frontmatter, config)
    if kind == "hook":
        hook_policy = hooks.resolve_hook_invocation_policy(frontmatter, config)
        hook_entry = HookEntry(name, frontmatter, resolution.metadata, hook_policy)  # type: ignore[arg-type]
        key = hooks.resolve_hook_key(name, hook_entry)
        invocation = hook_policy.to_dict()
    else:
        skill_policy = skills.resolve_skill_invocation_policy(frontmatter, config)
        skill_entry = SkillEntry(name, frontmatter, resolution.metadata, skill_policy)  # type: ignore[arg-type]
        key = skills.resolve_skill_key(name, skill_entry)
        invocation = skill_policy.to_dict()
    return {
        "file_path": str(target),
        "kind": kind,
        "name": name,
        "key": key,
        "metadata": resolution.metadata.to_dict() if resolution.metadata is not None else None,
        "invocation": invocation,
        "errors": [str(error) for error in resolution.errors],
    }


def parse_command(
    path: str = typer.Argument(".", help="SKILL.md / HOOK.md file or the directory holding it."),
    kind: str = typer.Option("auto", "--kind", help="Unit kind: skill, hook or auto."),
    config_path: str = typer.Option("", "--config", help="Optional clawmeta.yaml path."),
    show_errors: bool = typer.Option(False, "--show-errors", help="Print dropped fields to stderr."),
) -> None:
    """Parse a unit file and print its resolved metadata as JSON."""
    normalized_kind = kind.strip().lower()
    if normalized_kind not in {"auto", "skill", "hook"}:
        typer.echo(f"Error: unsupported kind {kind!r} (expected skill, hook or auto)", err=True)
        raise typer.Exit(2)
    try:
        config = load_config(YAMLConfigLoader.resolve_path(config_path))
    except ClawmetaError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    logging.basicConfig(level=config.logging.level)

    target, resolved_kind = _resolve_target(Path(path).expanduser(), normalized_kind)
    try:
        content = target.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"Error: cannot read {target}: {exc.strerror or exc}", err=True)
        raise typer.Exit(2) from exc
    except UnicodeDecodeError as exc:
        typer.echo(f"Error: {target} is not valid UTF-8 (byte {exc.start})", err=True)
        raise typer.Exit(2) from exc

    payload = build_payload(content, target, resolved_kind, config)
    if show_errors:
        for error in payload["errors"]:
            typer.echo(f"dropped {error}", err=True)
    logger.debug("resolved %s %s from %s", resolved_kind, payload["key"], target)
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
