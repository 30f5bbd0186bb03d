"""Short aliases for verbose option keys."""

from __future__ import annotations

from typing import Optional, Tuple

# Several option names may share one alias; first match wins.
ALIASES: Tuple[Tuple[str, str], ...] = (
    ("motion_force_zero", "force"),
    ("adm_enhn_gain_limit", "egl"),
    ("vif_enhn_gain_limit", "egl"),
    ("adm_norm_view_dist", "nvd"),
    ("adm_ref_display_height", "rdh"),
)


def lookup_alias(key: Optional[str]) -> Optional[str]:
    """Return the alias registered for ``key`` or ``None``."""
    if key is None:
        return None
    for name, alias in ALIASES:
        if name == key:
            return alias
    return None


__all__ = ["ALIASES", "lookup_alias"]
