"""
Installer Configuration

Where the binary variants live and where the link goes.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

from ppx_install.errors import ConfigError
from ppx_install.platform.paths import PathLike, package_root, resolve, variant_filename

logger = logging.getLogger(__name__)


CONFIG_FILENAME = "ppx-install.yml"
ROOT_ENV_VAR = "PPX_INSTALL_ROOT"


@dataclass(frozen=True)
class InstallerConfig:
    """
    Configuration for a single install run.

    Attributes:
        root_dir: Package root holding the bin directory and the link
        bin_dir: Directory of binary variants, relative to root_dir unless absolute
        binary_name: Variant file name stem (variants are ``<binary_name>.<platform>``)
        link_name: Link target path, relative to root_dir unless absolute
    """

    root_dir: str = ""
    bin_dir: str = "bin"
    binary_name: str = "graphql_ppx"
    link_name: str = "ppx"

    def __post_init__(self) -> None:
        if not self.root_dir:
            object.__setattr__(self, "root_dir", package_root())

    @property
    def bin_path(self) -> str:
        return resolve(self.root_dir, self.bin_dir)

    @property
    def link_path(self) -> str:
        return resolve(self.root_dir, self.link_name)

    def variant_path(self, platform: str) -> str:
        """Path of the binary variant for a platform name."""
        return os.path.join(self.bin_path, variant_filename(self.binary_name, platform))

    def with_overrides(self, **overrides: Any) -> InstallerConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: str(v) for k, v in overrides.items() if v is not None}
        unknown = set(changes) - _field_names()
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)


def _field_names() -> set[str]:
    return {f.name for f in fields(InstallerConfig)}


def load_config_file(path: PathLike) -> Dict[str, Any]:
    """Parse a YAML config file into a settings mapping."""
    path_str = str(path)
    try:
        with open(path_str, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", path_str) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path_str) from e

    if not isinstance(data, dict):
        raise ConfigError("Top level must be a mapping", path_str)

    unknown = set(data) - _field_names()
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(map(str, unknown)))}", path_str)

    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}", path_str)

    return data


def load_config(
    config_file: Optional[PathLike] = None,
    root_dir: Optional[PathLike] = None,
    environ: Optional[Dict[str, str]] = None,
    **overrides: Any,
) -> InstallerConfig:
    """
    Build the effective configuration.

    Layers, later wins: defaults, config file, ``PPX_INSTALL_ROOT``,
    explicit arguments. Without ``config_file``, ``ppx-install.yml`` in
    the root directory is used when present.
    """
    env = os.environ if environ is None else environ

    root = root_dir or env.get(ROOT_ENV_VAR) or package_root()
    root = os.path.abspath(os.path.expanduser(str(root)))

    if config_file is None:
        candidate = os.path.join(root, CONFIG_FILENAME)
        config_file = candidate if os.path.isfile(candidate) else None

    settings: Dict[str, Any] = {}
    if config_file is not None:
        logger.debug("Loading config from %s", config_file)
        settings = load_config_file(config_file)

    # An explicit or environment root beats the file's root_dir.
    if root_dir or env.get(ROOT_ENV_VAR) or "root_dir" not in settings:
        settings["root_dir"] = root
    else:
        settings["root_dir"] = resolve(root, settings["root_dir"])

    config = InstallerConfig(**settings)
    return config.with_overrides(**overrides)
