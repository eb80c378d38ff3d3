"""
Component models — installable units declared in a catalog.

A catalog lists every component the installer knows about. Each entry
is tagged with the platforms and architectures it applies to and a
relative install path. Before the installed-state check runs, that
path is resolved against an install root, producing a
``ResolvedComponent``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Wildcard tag: matches any platform or architecture
NEUTRAL = "neutral"


class InstallMarker(StrEnum):
    """Sentinel files written inside a component's install location."""

    BEGIN = "install.Begin"   # installation started
    LOCK = "install.Lock"     # installation completed


class Component(BaseModel):
    """A platform/architecture-tagged installable unit.

    Catalog files use camelCase keys (``installPath``, ``fallbackUrl``,
    ...). Both the camelCase alias and the field name are accepted.

    Only the first entry of ``platforms`` and ``architectures`` takes
    part in compatibility matching. Later entries are kept as declared
    but currently ignored.

    Tag and binary lists are stored as tuples so a loaded component
    cannot be changed in place and stays hashable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    description: str = ""
    platforms: tuple[str, ...] = ()
    architectures: tuple[str, ...] = ()
    install_path: str | None = Field(default=None, alias="installPath")

    # Download metadata, carried through for downstream collaborators
    url: str = ""
    fallback_url: str = Field(default="", alias="fallbackUrl")
    platform_id: str = Field(default="", alias="platformId")
    binaries: tuple[str, ...] = ()
    install_test_path: str | None = Field(default=None, alias="installTestPath")
    integrity: str = ""
    is_zipped: bool = Field(default=True, alias="isZipped")

    @field_validator("platforms", "architectures", "binaries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        # A missing tag list loads as empty and is excluded by the matcher
        return () if value is None else value

    @property
    def label(self) -> str:
        """Human-readable name: description, falling back to id."""
        return self.description or self.id or "<unnamed component>"


class ResolvedComponent(Component):
    """A component whose paths have been made absolute.

    Built fresh for each filtering pass by
    ``pkgfilter.core.services.path_resolution.resolve_component``.
    """

    install_path: str = Field(alias="installPath")
