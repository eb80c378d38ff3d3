"""
Path resolution — turn catalog-relative paths into absolute ones.

Pure string/path manipulation, no filesystem access. Symlinks are not
followed; ``..`` segments are normalised away.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from pkgfilter.core.models import Component, ResolvedComponent


class PathResolutionError(ValueError):
    """Raised when a catalog path cannot be joined onto the install root."""


def _join(root: str, relative: str, component: Component, field: str) -> str:
    if os.path.isabs(relative):
        raise PathResolutionError(
            f"{component.label}: {field} must be relative, got {relative!r}"
        )
    return os.path.abspath(os.path.join(root, relative))


def resolve_component(component: Component, install_root: Path | str) -> ResolvedComponent:
    """Rewrite a component's paths against ``install_root``.

    - ``install_path`` → ``<root>/<install_path>`` (``<root>`` if unset)
    - ``binaries`` → joined onto the resolved install path
    - ``install_test_path`` → ``<root>/<install_test_path>`` (None if unset)

    Raises:
        PathResolutionError: If a catalog path is already absolute.
    """
    root = os.path.abspath(os.fspath(install_root))

    if component.install_path:
        install_path = _join(root, component.install_path, component, "installPath")
    else:
        install_path = root

    binaries = [
        _join(install_path, binary, component, "binaries")
        for binary in component.binaries
    ]

    install_test_path = None
    if component.install_test_path:
        install_test_path = _join(
            root, component.install_test_path, component, "installTestPath"
        )

    data = component.model_dump()
    data.update(
        install_path=install_path,
        binaries=binaries,
        install_test_path=install_test_path,
    )
    return ResolvedComponent.model_validate(data)


def resolve_components(
    components: Iterable[Component],
    install_root: Path | str,
) -> list[ResolvedComponent]:
    """Resolve every component against the same install root, keeping order."""
    return [resolve_component(c, install_root) for c in components]
