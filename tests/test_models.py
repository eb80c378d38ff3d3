"""
Tests for domain models — validation, aliases, immutability.
"""

import json

import pytest
from pydantic import ValidationError

from pkgfilter.core.models import (
    NEUTRAL,
    Component,
    InstallMarker,
    ResolvedComponent,
    RuntimeTarget,
)


class TestComponent:
    """Component model tests."""

    def test_minimal_component(self):
        """A component needs no fields at all; tags default to empty."""
        c = Component(description="tool")
        assert c.platforms == ()
        assert c.architectures == ()
        assert c.install_path is None
        assert c.is_zipped is True

    def test_camel_case_aliases(self):
        """Catalog keys in camelCase populate the snake_case fields."""
        c = Component.model_validate({
            "description": "debugger",
            "platforms": ["linux"],
            "architectures": ["x86_64"],
            "installPath": ".debugger",
            "fallbackUrl": "https://example.invalid/fallback.zip",
            "platformId": "linux-x64",
            "installTestPath": ".debugger/vsdbg",
            "isZipped": False,
        })
        assert c.install_path == ".debugger"
        assert c.fallback_url.endswith("fallback.zip")
        assert c.platform_id == "linux-x64"
        assert c.install_test_path == ".debugger/vsdbg"
        assert c.is_zipped is False

    def test_field_names_accepted(self):
        c = Component(description="x", install_path="p", platforms=["win32"])
        assert c.install_path == "p"
        assert c.platforms == ("win32",)

    def test_null_tags_load_as_empty(self):
        """A null tag list loads as empty instead of failing validation."""
        c = Component.model_validate({"description": "x", "platforms": None})
        assert c.platforms == ()

    def test_frozen(self):
        """Fields cannot be reassigned."""
        c = Component(description="x")
        with pytest.raises(ValidationError):
            c.description = "y"

    def test_tags_cannot_be_changed_in_place(self):
        """Tag sequences are immutable, not just the attributes holding them."""
        c = Component(description="x", platforms=["linux"], architectures=["x86_64"])
        with pytest.raises(TypeError):
            c.platforms[0] = "win32"
        assert c.platforms == ("linux",)

    def test_hashable(self):
        """Equal components hash equal."""
        a = Component(description="x", platforms=["linux"], binaries=["bin/tool"])
        b = Component(description="x", platforms=["linux"], binaries=["bin/tool"])
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_label_fallbacks(self):
        """Description first, then id, then a placeholder."""
        assert Component(description="Debugger").label == "Debugger"
        assert Component(id="dbg").label == "dbg"
        assert Component().label == "<unnamed component>"

    def test_dump_by_alias(self):
        c = Component(description="x", install_path="p", platforms=["linux"])
        data = json.loads(c.model_dump_json(by_alias=True))
        assert data["installPath"] == "p"
        assert data["platforms"] == ["linux"]


class TestResolvedComponent:
    def test_requires_install_path(self):
        """A resolved component always has an install location."""
        with pytest.raises(ValidationError):
            ResolvedComponent(description="x")

    def test_is_a_component(self):
        r = ResolvedComponent(description="x", install_path="/abs/p")
        assert isinstance(r, Component)


class TestRuntimeTarget:
    def test_str(self):
        assert str(RuntimeTarget(platform="linux", architecture="arm64")) == "linux/arm64"

    def test_frozen(self):
        """The runtime target is read-only once built."""
        t = RuntimeTarget(platform="linux", architecture="arm64")
        with pytest.raises(ValidationError):
            t.platform = "win32"


def test_marker_names():
    """Marker filenames written by the installer."""
    assert InstallMarker.LOCK == "install.Lock"
    assert InstallMarker.BEGIN == "install.Begin"
    assert NEUTRAL == "neutral"
