"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgfilter.core.models import Component, InstallMarker, ResolvedComponent
from pkgfilter.core.services.path_resolution import resolve_components
from tests.probes import FakeProbe


CATALOG: list[dict] = [
    {
        "description": "linux-Architecture1 uninstalled package",
        "platforms": ["linux"],
        "architectures": ["architecture1"],
        "installPath": "path1",
    },
    {
        # already installed
        "description": "linux-Architecture1 installed package",
        "platforms": ["linux"],
        "architectures": ["architecture1"],
        "installPath": "path5",
    },
    {
        "description": "win32-Architecture2 uninstalled package",
        "platforms": ["win32"],
        "architectures": ["architecture2"],
        "installPath": "path2",
    },
    {
        "description": "linux-Architecture2 uninstalled package",
        "platforms": ["linux"],
        "architectures": ["architecture2"],
        "installPath": "path3",
    },
    {
        "description": "win32-Architecture1 uninstalled package",
        "platforms": ["win32"],
        "architectures": ["architecture1"],
        "installPath": "path4",
    },
    {
        "description": "linux-Architecture2 uninstalled package",
        "platforms": ["linux"],
        "architectures": ["architecture2"],
        "installPath": "path3",
    },
    {
        "description": "neutral platform and architecture uninstalled package",
        "platforms": ["neutral"],
        "architectures": ["neutral"],
        "installPath": "path6",
    },
    {
        "description": "neutral platform but specific architecture package",
        "platforms": ["neutral"],
        "architectures": ["architecture1"],
        "installPath": "path7",
    },
    {
        "description": "specific platform but neutral architecture package",
        "platforms": ["linux"],
        "architectures": ["neutral"],
        "installPath": "path8",
    },
]


@pytest.fixture
def catalog() -> list[Component]:
    """The nine-entry test catalog."""
    return [Component.model_validate(entry) for entry in CATALOG]


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Return a temporary install root."""
    root = tmp_path / "extension"
    root.mkdir()
    return root


@pytest.fixture
def resolved_catalog(catalog: list[Component], install_root: Path) -> list[ResolvedComponent]:
    """The test catalog resolved against ``install_root``."""
    return resolve_components(catalog, install_root)


@pytest.fixture
def fake_probe(resolved_catalog: list[ResolvedComponent]) -> FakeProbe:
    """Probe reporting only the ``path5`` component as installed."""
    lock = Path(resolved_catalog[1].install_path) / InstallMarker.LOCK.value
    return FakeProbe({lock})
