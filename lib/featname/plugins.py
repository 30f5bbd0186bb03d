"""Import side effects to populate registries."""

from __future__ import annotations

# Built-in extractors
from .extractors import adm  # noqa: F401
from .extractors import motion  # noqa: F401
from .extractors import vif  # noqa: F401
