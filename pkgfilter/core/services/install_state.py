"""
Installed-state probing — has a component already been installed?

A completed installation leaves an ``install.Lock`` marker file inside
the component's install location. The probe checks for that file with
a single ``stat``; there are no retries.

Any filesystem error is read as "not installed": a missing path,
permission denied, an I/O error, or a path ``stat`` rejects outright
(``ValueError`` for an embedded NUL byte). The component may then be
installed again rather than blocking the pipeline.

The filesystem access sits behind ``InstallProbe`` so callers and
tests can pass their own implementation instead of patching ``os``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from pathlib import Path
from typing import Protocol

from pkgfilter.core.models import InstallMarker, ResolvedComponent

logger = logging.getLogger(__name__)


class InstallProbe(Protocol):
    """Answers one question: is there a marker file at this path?"""

    async def marker_exists(self, path: Path) -> bool:
        ...


class FilesystemProbe:
    """Default probe — ``stat`` on a worker thread, regular files only."""

    async def marker_exists(self, path: Path) -> bool:
        try:
            st = await asyncio.to_thread(os.stat, path)
        except (OSError, ValueError) as e:
            logger.debug("No install marker at %r: %s", path, e)
            return False
        return stat.S_ISREG(st.st_mode)


_default_probe = FilesystemProbe()


def install_marker_path(
    component: ResolvedComponent,
    marker: InstallMarker = InstallMarker.LOCK,
) -> Path:
    """Return the marker file path inside the component's install location."""
    return Path(component.install_path) / marker.value


async def is_installed(
    component: ResolvedComponent,
    probe: InstallProbe | None = None,
    marker: InstallMarker = InstallMarker.LOCK,
) -> bool:
    """Check whether ``component`` carries a completed-install marker.

    Args:
        component: Component with an absolute install path.
        probe: Marker probe (default: the real filesystem).
        marker: Which marker to look for (default: ``install.Lock``).

    Returns:
        True only if the probe positively reports the marker.
    """
    probe = probe or _default_probe
    path = install_marker_path(component, marker)
    try:
        found = await probe.marker_exists(path)
    except (OSError, ValueError) as e:
        logger.debug("Install probe failed for %s: %s", path, e)
        return False

    if found:
        logger.debug("Already installed: %s (%s)", component.label, path)
    return bool(found)
