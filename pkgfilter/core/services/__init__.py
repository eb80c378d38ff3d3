"""
Component selection services — package re-exports::

    from pkgfilter.core.services import select_not_installed_for_platform

Each symbol lives in its single-responsibility module
(compatibility → install_state → component_filter, plus the
path_resolution and runtime_detection helpers that feed them).
"""

# ── Matching ──
from pkgfilter.core.services.compatibility import (  # noqa: F401
    filter_platform_components,
    is_platform_compatible,
)

# ── Installed state ──
from pkgfilter.core.services.install_state import (  # noqa: F401
    FilesystemProbe,
    InstallProbe,
    install_marker_path,
    is_installed,
)

# ── Inputs ──
from pkgfilter.core.services.path_resolution import (  # noqa: F401
    PathResolutionError,
    resolve_component,
    resolve_components,
)
from pkgfilter.core.services.runtime_detection import (  # noqa: F401
    detect_runtime_target,
    normalize_architecture,
    normalize_platform,
)

# ── Orchestration ──
from pkgfilter.core.services.component_filter import (  # noqa: F401
    filter_already_installed,
    select_for_install,
    select_not_installed_for_platform,
    select_not_installed_for_platform_sync,
)
