"""User settings record and its merge rule."""

from typing import Any, Dict, Mapping

SETTINGS_KEY = "user-settings"

AppSettings = Dict[str, Dict[str, Any]]


def merge_settings(existing: Mapping[str, Any], partial: Mapping[str, Any]) -> AppSettings:
    """
    Merge a partial settings update over the stored settings.

    Groups missing from ``partial`` are kept untouched. A group present in
    ``partial`` is shallow-merged over the stored group, so its sub-keys are
    overwritten individually and unmentioned sub-keys survive.

    Raises:
        ValueError: If a group in ``partial`` is not a mapping.
    """
    merged: AppSettings = {name: dict(group) for name, group in existing.items()}
    for name, group in partial.items():
        if group is None:
            continue
        if not isinstance(group, Mapping):
            raise ValueError(f"Settings group '{name}' must be a mapping, got {type(group).__name__}")
        merged[name] = {**merged.get(name, {}), **group}
    return merged
