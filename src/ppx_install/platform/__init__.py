"""
Host platform detection.

Maps the operating system identifier onto the platforms graphql_ppx ships
binaries for.
"""

from __future__ import annotations

import enum
import platform as _platform
from dataclasses import dataclass
from typing import Optional


class HostPlatform(str, enum.Enum):
    """Platforms a binary variant can exist for."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HostInfo:
    """What was detected about the running host."""

    platform: HostPlatform
    system: str
    machine: str


def platform_from_system(system: str) -> HostPlatform:
    """
    Classify an OS identifier.

    Accepts both ``platform.system()`` values and ``uname``/``os.type``
    style names such as ``Windows_NT``. Anything that is neither Windows
    nor Darwin is treated as Linux.
    """
    if "Windows" in system:
        return HostPlatform.WINDOWS
    if "Darwin" in system:
        return HostPlatform.MACOS
    return HostPlatform.LINUX


def detect_platform(system: Optional[str] = None) -> HostPlatform:
    """Detect the host platform, or classify ``system`` if given."""
    if system is None:
        system = _platform.system()
    return platform_from_system(system)


def detect_host(system: Optional[str] = None) -> HostInfo:
    """Detect platform together with the raw OS name and architecture."""
    if system is None:
        system = _platform.system()
    return HostInfo(
        platform=platform_from_system(system),
        system=system,
        machine=_platform.machine(),
    )
