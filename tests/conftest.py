"""
Shared fixtures for ppx-install tests.
"""

import pytest
from pathlib import Path

from ppx_install.config import InstallerConfig


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A package root with a bin directory of fake binary variants."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for name in ("graphql_ppx.linux", "graphql_ppx.macos"):
        (bin_dir / name).write_text(f"#!/bin/sh\necho {name}\n")
    return tmp_path


@pytest.fixture
def config(package_dir: Path) -> InstallerConfig:
    """Installer configuration rooted at package_dir."""
    return InstallerConfig(root_dir=str(package_dir))


@pytest.fixture(autouse=True)
def clear_root_env(monkeypatch):
    """Keep a developer's PPX_INSTALL_ROOT out of the tests."""
    monkeypatch.delenv("PPX_INSTALL_ROOT", raising=False)
