"""
Compatibility matching — is a component meant for this platform?

Pure functions, no I/O. A component is compatible when the first
platform tag is ``"neutral"`` or equals the target platform AND the
first architecture tag is ``"neutral"`` or equals the target
architecture.

Only index 0 of each tag list is compared. Catalogs declare one tag
per dimension today; a multi-value list would have its extra entries
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from pkgfilter.core.models import NEUTRAL, Component, RuntimeTarget

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Component)


def _tag_matches(tags: Sequence[str] | None, value: str) -> bool:
    """Check the leading tag of one dimension against the target value."""
    if not tags:
        return False
    first = tags[0]
    if not isinstance(first, str):
        return False
    return first == NEUTRAL or first == value


def is_platform_compatible(component: Component, target: RuntimeTarget) -> bool:
    """Decide whether ``component`` applies to ``target``.

    Missing or malformed tags never raise; they simply fail to match.
    """
    return _tag_matches(component.platforms, target.platform) and _tag_matches(
        component.architectures, target.architecture
    )


def filter_platform_components(
    components: Iterable[C],
    target: RuntimeTarget,
) -> list[C]:
    """Keep the components compatible with ``target``, in catalog order."""
    selected: list[C] = []
    skipped = 0
    for component in components:
        if is_platform_compatible(component, target):
            selected.append(component)
        else:
            skipped += 1
    logger.debug(
        "Platform filter for %s: %d compatible, %d skipped",
        target, len(selected), skipped,
    )
    return selected
