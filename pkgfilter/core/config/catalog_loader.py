"""
Catalog loader — reads a component catalog file into domain models.

The catalog is a local YAML or JSON file (fetching it is somebody
else's job). Accepted shapes::

    runtimeDependencies:          # or "components:"
      - description: "Debugger (Linux / x86_64)"
        platforms: [linux]
        architectures: [x86_64]
        installPath: .debugger

or a bare top-level list of the same entries.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pkgfilter.core.models import Component

logger = logging.getLogger(__name__)

# Keys that may hold the component list in a mapping-shaped catalog
CATALOG_KEYS = ("runtimeDependencies", "components")


class CatalogError(Exception):
    """Raised when a component catalog is missing or invalid."""


def parse_catalog(data: Any, source: str = "<catalog>") -> list[Component]:
    """Validate already-parsed catalog data.

    Args:
        data: Parsed YAML/JSON document.
        source: Name used in error messages.

    Returns:
        Components in declaration order.

    Raises:
        CatalogError: If the document shape or an entry is invalid.
    """
    if isinstance(data, dict):
        key = next((k for k in CATALOG_KEYS if k in data), None)
        if key is None:
            raise CatalogError(
                f"No component list in {source} "
                f"(expected one of: {', '.join(CATALOG_KEYS)})"
            )
        entries = data[key]
    else:
        entries = data

    if entries is None:
        return []
    if not isinstance(entries, list):
        raise CatalogError(
            f"Expected a list of components in {source}, got {type(entries).__name__}"
        )

    components: list[Component] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(
                f"Entry #{index} in {source} is not a mapping ({type(entry).__name__})"
            )
        try:
            components.append(Component.model_validate(entry))
        except ValidationError as e:
            raise CatalogError(f"Invalid entry #{index} in {source}: {e}") from e

    return components


def load_catalog(path: Path) -> list[Component]:
    """Load and validate a component catalog file.

    ``.json`` files are parsed as JSON, everything else as YAML.

    Raises:
        CatalogError: If the file is missing, unreadable or invalid.
    """
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    logger.debug("Loading component catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Invalid catalog syntax in {path}: {e}") from e

    components = parse_catalog(data, source=str(path))
    logger.info("Loaded %d components from %s", len(components), path)
    return components
