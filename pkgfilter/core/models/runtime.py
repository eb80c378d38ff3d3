"""
Runtime target model — the platform/architecture of the running system.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RuntimeTarget(BaseModel):
    """Platform and CPU architecture the installer is running on.

    Built once per process (see ``detect_runtime_target``) and
    treated as read-only.
    """

    model_config = ConfigDict(frozen=True)

    platform: str
    architecture: str

    def __str__(self) -> str:
        return f"{self.platform}/{self.architecture}"
