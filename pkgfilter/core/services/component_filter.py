"""
Component filter — which catalog components still need installing?

Two passes:

    1. Compatibility (synchronous, catalog order) — drop components
       not meant for the runtime target.
    2. Installed-state (concurrent) — probe every survivor for its
       ``install.Lock`` marker and drop the ones already installed.

Probes are independent and all run at once via ``asyncio.gather``.
Fan-out is unbounded; catalogs are tens of entries. Each probe result
stays paired with the component it was issued for, so the output keeps
catalog order whatever order the probes finish in.

Nothing is raised to the caller for mismatches or probe errors.
Duplicate catalog entries are kept as-is.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from pkgfilter.core.models import Component, ResolvedComponent, RuntimeTarget
from pkgfilter.core.services.compatibility import filter_platform_components
from pkgfilter.core.services.install_state import InstallProbe, is_installed
from pkgfilter.core.services.path_resolution import resolve_components

logger = logging.getLogger(__name__)


async def filter_already_installed(
    components: Iterable[ResolvedComponent],
    probe: InstallProbe | None = None,
) -> list[ResolvedComponent]:
    """Drop components whose install marker is present.

    Args:
        components: Resolved components, in the order to preserve.
        probe: Marker probe (default: the real filesystem).

    Returns:
        Components not yet installed, in input order.
    """
    candidates = list(components)
    if not candidates:
        return []

    # One probe per component; gather returns results aligned with candidates
    states = await asyncio.gather(
        *(is_installed(component, probe) for component in candidates)
    )

    pending = [
        component
        for component, installed in zip(candidates, states)
        if not installed
    ]
    logger.info(
        "Installed-state check: %d of %d components need installing",
        len(pending), len(candidates),
    )
    return pending


async def select_not_installed_for_platform(
    components: Iterable[ResolvedComponent],
    target: RuntimeTarget,
    probe: InstallProbe | None = None,
) -> list[ResolvedComponent]:
    """Select the components compatible with ``target`` and not installed.

    Args:
        components: Resolved catalog components, in catalog order.
        target: Platform/architecture of the running system.
        probe: Marker probe (default: the real filesystem).

    Returns:
        Components to install, in catalog order.
    """
    compatible = filter_platform_components(components, target)
    return await filter_already_installed(compatible, probe)


async def select_for_install(
    components: Iterable[Component],
    install_root: Path | str,
    target: RuntimeTarget,
    probe: InstallProbe | None = None,
) -> list[ResolvedComponent]:
    """Filter a raw catalog: match, resolve survivors, then probe.

    Only compatible components are resolved against ``install_root``.

    Raises:
        PathResolutionError: If a compatible component declares an
            absolute install path.
    """
    compatible = filter_platform_components(components, target)
    resolved = resolve_components(compatible, install_root)
    return await filter_already_installed(resolved, probe)


def select_not_installed_for_platform_sync(
    components: Iterable[ResolvedComponent],
    target: RuntimeTarget,
    probe: InstallProbe | None = None,
) -> list[ResolvedComponent]:
    """Blocking wrapper around ``select_not_installed_for_platform``.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(select_not_installed_for_platform(components, target, probe))
