"""
Runtime detection — which platform/architecture are we running on?

Read-only probe of ``platform.system()`` and ``platform.machine()``,
normalised to the tag vocabulary used by component catalogs
(``win32``/``linux``/``darwin``, ``x86_64``/``arm64``/``x86``).
"""

from __future__ import annotations

import logging
import platform

from pkgfilter.core.models import RuntimeTarget

logger = logging.getLogger(__name__)


_PLATFORM_ALIASES: dict[str, str] = {
    "windows": "win32",
    "win32": "win32",
    "cygwin": "win32",
    "linux": "linux",
    "darwin": "darwin",
    "macos": "darwin",
}

_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


def normalize_platform(name: str) -> str:
    """Map an OS name to its catalog tag (unknown names are lowercased)."""
    key = name.strip().lower()
    return _PLATFORM_ALIASES.get(key, key)


def normalize_architecture(name: str) -> str:
    """Map a machine name to its catalog tag (unknown names are lowercased)."""
    key = name.strip().lower()
    return _ARCH_ALIASES.get(key, key)


def detect_runtime_target() -> RuntimeTarget:
    """Detect the platform and CPU architecture of this process.

    Returns::

        RuntimeTarget(platform="linux", architecture="x86_64")
    """
    system_name = platform.system()
    machine = platform.machine()
    target = RuntimeTarget(
        platform=normalize_platform(system_name),
        architecture=normalize_architecture(machine),
    )
    logger.debug("Detected runtime target %s (system=%r, machine=%r)",
                 target, system_name, machine)
    return target
