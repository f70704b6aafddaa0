"""Property tests for metadata normalization invariants."""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from clawmeta import hooks, skills
from clawmeta.metadata.normalize import normalize_string_list
from clawmeta.metadata.profiles import HOOK_PROFILE, SKILL_PROFILE

_token = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters=","),
    min_size=1,
    max_size=12,
).filter(lambda s: s.strip() != "")


@given(tokens=st.lists(_token, max_size=8))
def test_property_list_normalization_is_representation_invariant(tokens: list[str]) -> None:
    expected = tuple(token.strip() for token in tokens)
    assert normalize_string_list(tokens) == expected
    assert normalize_string_list(",".join(tokens)) == expected
    assert normalize_string_list(" , ".join(tokens)) == expected


@given(raw=st.text(max_size=200))
@settings(deadline=None)
def test_property_resolution_never_raises(raw: str) -> None:
    frontmatter = {"metadata": raw}
    skills.resolve_openclaw_metadata(frontmatter)
    hooks.resolve_openclaw_metadata(frontmatter)


_json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=10)
_json_values = st.recursive(
    _json_scalars,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=12,
)


@given(
    manifest=st.dictionaries(
        st.sampled_from(["always", "emoji", "homepage", "skillKey", "os", "requires", "install", "events"]),
        _json_values,
    )
)
@settings(deadline=None)
def test_property_resolution_is_idempotent(manifest: dict) -> None:
    frontmatter = {"metadata": json.dumps({"openclaw": manifest})}
    first = skills.resolve_openclaw_metadata(frontmatter)
    assert first is not None
    assert first == skills.resolve_openclaw_metadata(frontmatter)
    assert first.install is None or len(first.install) > 0
    assert first.os is None or len(first.os) > 0

    hook = hooks.resolve_openclaw_metadata(frontmatter)
    assert hook is not None
    assert isinstance(hook.events, tuple)


@given(
    kinds=st.lists(
        st.sampled_from(sorted(SKILL_PROFILE.install_kinds | HOOK_PROFILE.install_kinds) + ["apt", "pip", ""]),
        max_size=6,
    )
)
def test_property_install_keeps_only_supported_kinds_in_order(kinds: list[str]) -> None:
    entries = [{"kind": kind, "id": str(index)} for index, kind in enumerate(kinds)]
    frontmatter = {"metadata": json.dumps({"openclaw": {"install": entries}})}
    for module, profile in ((skills, SKILL_PROFILE), (hooks, HOOK_PROFILE)):
        metadata = module.resolve_openclaw_metadata(frontmatter)
        assert metadata is not None
        expected = [str(index) for index, kind in enumerate(kinds) if kind in profile.install_kinds]
        if expected:
            assert metadata.install is not None
            assert [spec.id for spec in metadata.install] == expected
        else:
            assert metadata.install is None
