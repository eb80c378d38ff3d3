"""
Select use case — load a catalog and list what still needs installing.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from pkgfilter.core.config.catalog_loader import CatalogError, load_catalog
from pkgfilter.core.models import ResolvedComponent, RuntimeTarget
from pkgfilter.core.services.component_filter import select_for_install
from pkgfilter.core.services.install_state import InstallProbe
from pkgfilter.core.services.path_resolution import PathResolutionError
from pkgfilter.core.services.runtime_detection import (
    detect_runtime_target,
    normalize_architecture,
    normalize_platform,
)


@dataclass
class SelectResult:
    """Outcome of a selection run."""

    target: RuntimeTarget | None = None
    catalog_path: Path | None = None
    install_root: Path | None = None
    catalog_size: int = 0
    selected: list[ResolvedComponent] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "target": self.target.model_dump() if self.target else None,
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "install_root": str(self.install_root) if self.install_root else None,
            "catalog_size": self.catalog_size,
            "selected": [c.model_dump(by_alias=True) for c in self.selected],
            "error": self.error,
        }


def build_target(platform_name: str | None = None, architecture: str | None = None) -> RuntimeTarget:
    """Detect the runtime target, letting explicit values override either half."""
    detected = detect_runtime_target()
    return RuntimeTarget(
        platform=normalize_platform(platform_name) if platform_name else detected.platform,
        architecture=(
            normalize_architecture(architecture) if architecture else detected.architecture
        ),
    )


def run_select(
    catalog_path: Path,
    install_root: Path,
    target: RuntimeTarget | None = None,
    probe: InstallProbe | None = None,
) -> SelectResult:
    """Load ``catalog_path`` and select the components to install.

    Catalog and path errors are reported in ``SelectResult.error``
    rather than raised.
    """
    result = SelectResult(catalog_path=catalog_path, install_root=install_root)
    result.target = target or detect_runtime_target()

    try:
        components = load_catalog(catalog_path)
    except CatalogError as e:
        result.error = str(e)
        return result

    result.catalog_size = len(components)

    try:
        result.selected = asyncio.run(
            select_for_install(components, install_root, result.target, probe)
        )
    except PathResolutionError as e:
        result.error = str(e)

    return result
