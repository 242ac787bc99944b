# Copyright (c) 2024 graphql-ppx Contributors
# MIT License

"""
ppx-install: post-install helper for graphql_ppx.

Links the prebuilt graphql_ppx binary matching the host operating system
to the canonical ``ppx`` path used by the rest of the toolchain.

Features:
    - Host platform detection (Linux, macOS; Windows reported as unsupported)
    - Idempotent symlink replacement
    - Optional YAML configuration and environment overrides

This package exposes the installer entry points and release metadata.
"""

from __future__ import annotations

from ppx_install.release import __version__, __author__
from ppx_install.installer import InstallResult, install, select_variant

__all__ = [
    "__version__",
    "__author__",
    "InstallResult",
    "install",
    "select_variant",
]
