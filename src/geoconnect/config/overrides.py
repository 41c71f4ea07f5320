"""
Per-request settings overrides (safe subset).

API callers can send `settings_overrides` to tune presentation knobs for a single
snapshot. Overrides are checked against a whitelist and layered onto a dump of the
current settings in one walk, then re-validated with Pydantic so types and ranges
still hold.

Security note:
We intentionally do NOT allow overriding the resolver endpoint or its API key.
"""

from __future__ import annotations

from typing import Any, Mapping

from geoconnect.config.settings import Settings

# A value of True means "allow any keys under this subtree".
# A nested dict means "only allow the listed keys, recursively".
ALLOWED_SETTINGS_OVERRIDES_TREE: dict[str, Any] = {
    # The default view is pure presentation config.
    "view": True,
    # Globe knobs are safe except the Earth radius, which would silently change every distance.
    "globe": {
        "radius": True,
        "centroid_color": True,
        "centroid_label": True,
        "palette": True,
    },
}


def _overlay(base: Any, value: Any) -> Any:
    """Layer `value` onto `base`; mappings merge key by key, anything else replaces."""
    if isinstance(base, Mapping) and isinstance(value, Mapping):
        return {**base, **{k: _overlay(base.get(k), v) for k, v in value.items()}}
    return value


def _apply_allowed(
    base: Mapping[str, Any],
    overrides: Mapping[str, Any],
    rules: Mapping[str, Any],
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    # Returns a new dict; `base` is usually the cached settings dump and must stay untouched.
    out = dict(base)
    for key, value in overrides.items():
        dotted_path = ".".join((*path, key))
        rule = rules.get(key)
        if rule is None:
            raise ValueError(f"settings_overrides contains a disallowed key: '{dotted_path}'")
        if rule is True:
            out[key] = _overlay(out.get(key), value)
        elif isinstance(value, Mapping):
            out[key] = _apply_allowed(out.get(key) or {}, value, rule, (*path, key))
        else:
            raise ValueError(f"settings_overrides key '{dotted_path}' must be a mapping")
    return out


def apply_settings_overrides(
    settings: Settings, overrides: Mapping[str, Any] | None
) -> Settings:
    """Return `settings` with the whitelisted subset of `overrides` applied.

    Raises:
        ValueError: On disallowed keys or wrong shapes (pydantic's ValidationError
            is a ValueError too, so out-of-range values surface the same way).
    """
    if not overrides:
        return settings
    payload = _apply_allowed(settings.model_dump(mode="python"), overrides, ALLOWED_SETTINGS_OVERRIDES_TREE)
    return Settings.model_validate(payload)
