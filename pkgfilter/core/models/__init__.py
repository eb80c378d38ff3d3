"""
Domain models — Pydantic types for component selection.

All models are re-exported here for convenient access:

    from pkgfilter.core.models import Component, ResolvedComponent, RuntimeTarget
"""

from pkgfilter.core.models.component import (
    NEUTRAL,
    Component,
    InstallMarker,
    ResolvedComponent,
)
from pkgfilter.core.models.runtime import RuntimeTarget

__all__ = [
    # component.py
    "Component",
    "InstallMarker",
    "NEUTRAL",
    "ResolvedComponent",
    # runtime.py
    "RuntimeTarget",
]
