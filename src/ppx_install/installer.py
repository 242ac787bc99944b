"""
ppx Installer

Selects the binary variant for the host platform and links it to the
canonical ``ppx`` path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ppx_install.config import InstallerConfig, load_config
from ppx_install.errors import UnsupportedPlatformError
from ppx_install.platform import HostPlatform, detect_platform
from ppx_install.platform import fs
from ppx_install.platform.paths import relative_to_link

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Outcome of an install run."""

    platform: HostPlatform
    source: str
    destination: str
    replaced: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class LinkStatus:
    """Whether the link target currently points at the expected variant."""

    platform: HostPlatform
    expected: str
    destination: str
    current: Optional[str]

    @property
    def linked(self) -> bool:
        if self.current is None:
            return False
        link_dir = os.path.dirname(self.destination)
        resolved = os.path.normpath(os.path.join(link_dir, self.current))
        return resolved == os.path.normpath(self.expected)


def select_variant(platform: HostPlatform, config: InstallerConfig) -> str:
    """
    Return the binary variant path for a platform.

    Raises UnsupportedPlatformError for Windows, which has no variant in
    this release.
    """
    if platform is HostPlatform.WINDOWS:
        raise UnsupportedPlatformError(
            "Windows",
            "Run the installer from WSL to use the Linux binary",
        )
    return config.variant_path(platform.value)


def install(
    config: Optional[InstallerConfig] = None,
    system: Optional[str] = None,
    dry_run: bool = False,
) -> InstallResult:
    """
    Link the host's binary variant to the link target.

    Whatever already sits at the link target is replaced, so repeated runs
    converge on the same link. The variant itself is not checked.

    Args:
        config: Installer configuration (``load_config()`` layering if omitted)
        system: OS identifier overriding detection, e.g. ``"Darwin"``
        dry_run: Report the link without touching the filesystem

    Raises:
        UnsupportedPlatformError: Host is Windows; nothing is changed
        FilesystemError: Removing the old entry or creating the link failed
    """
    if config is None:
        config = load_config()

    platform = detect_platform(system)
    source = select_variant(platform, config)
    destination = config.link_path
    logger.debug("Platform %s selects %s", platform, source)

    if dry_run:
        logger.info("Would link %s -> %s", destination, source)
        return InstallResult(
            platform=platform,
            source=source,
            destination=destination,
            replaced=fs.lexists(destination),
            dry_run=True,
        )

    replaced = fs.replace_symlink(relative_to_link(source, destination), destination)
    if replaced:
        logger.debug("Removed existing %s", destination)
    logger.info("Linked %s -> %s", destination, source)

    return InstallResult(
        platform=platform,
        source=source,
        destination=destination,
        replaced=replaced,
    )


def link_status(
    config: Optional[InstallerConfig] = None,
    system: Optional[str] = None,
) -> LinkStatus:
    """Inspect the link target without changing it."""
    if config is None:
        config = load_config()

    platform = detect_platform(system)
    expected = select_variant(platform, config)
    destination = config.link_path
    return LinkStatus(
        platform=platform,
        expected=expected,
        destination=destination,
        current=fs.read_link(destination),
    )
