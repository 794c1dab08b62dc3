"""Parameter builder: merges computed defaults with caller overrides."""

from collections.abc import Mapping
from typing import Optional


def build_parameters(
    defaults: Mapping[str, str],
    *overrides: Optional[Mapping[str, object]],
) -> dict[str, str]:
    """Return defaults with every override mapping applied in order.

    Later mappings win over earlier ones, and any override wins over the
    computed defaults. None entries are skipped. Values are stringified so
    the template always sees text.
    """
    params = {key: str(value) for key, value in defaults.items()}
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            params[str(key)] = "" if value is None else str(value)
    return params


def merged_overrides(*overrides: Optional[Mapping[str, object]]) -> dict[str, str]:
    """Collapse the override mappings alone (later wins)."""
    return build_parameters({}, *overrides)
