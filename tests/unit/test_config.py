"""Unit tests for installer configuration."""

import os
import pytest
from ppx_install.config import InstallerConfig, load_config, load_config_file
from ppx_install.errors import ConfigError
from ppx_install.platform.paths import package_root


class TestInstallerConfig:
    """Tests for the config dataclass."""

    def test_defaults(self):
        config = InstallerConfig()
        assert config.root_dir == package_root()
        assert config.bin_dir == "bin"
        assert config.link_name == "ppx"
        assert config.variant_path("linux") == os.path.join(package_root(), "bin", "graphql_ppx.linux")

    def test_absolute_bin_dir(self, tmp_path):
        config = InstallerConfig(root_dir=str(tmp_path), bin_dir="/opt/ppx/bin")
        assert config.bin_path == os.path.normpath("/opt/ppx/bin")

    def test_link_path(self, tmp_path):
        config = InstallerConfig(root_dir=str(tmp_path), link_name="tools/ppx")
        assert config.link_path == str(tmp_path / "tools" / "ppx")

    def test_with_overrides_skips_none(self, tmp_path):
        config = InstallerConfig(root_dir=str(tmp_path)).with_overrides(bin_dir=None, link_name="ppx2")
        assert config.bin_dir == "bin"
        assert config.link_name == "ppx2"

    def test_with_overrides_rejects_unknown(self, tmp_path):
        with pytest.raises(ConfigError, match="colour"):
            InstallerConfig(root_dir=str(tmp_path)).with_overrides(colour="red")


class TestLoadConfigFile:
    """Tests for YAML config files."""

    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("bin_dir: prebuilt\nlink_name: graphql_ppx\n")
        assert load_config_file(path) == {"bin_dir": "prebuilt", "link_name": "graphql_ppx"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("checksum: abc\n")
        with pytest.raises(ConfigError, match="checksum"):
            load_config_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("bin_dir: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("- bin\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config_file(path)

    def test_non_string_value(self, tmp_path):
        path = tmp_path / "ppx-install.yml"
        path.write_text("bin_dir: 42\n")
        with pytest.raises(ConfigError, match="bin_dir"):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config_file(tmp_path / "nope.yml")


class TestLoadConfig:
    """Tests for layering defaults, file, environment and arguments."""

    def test_root_argument(self, tmp_path):
        config = load_config(root_dir=tmp_path, environ={})
        assert config.root_dir == str(tmp_path)

    def test_env_root(self, tmp_path):
        config = load_config(environ={"PPX_INSTALL_ROOT": str(tmp_path)})
        assert config.root_dir == str(tmp_path)

    def test_argument_beats_env(self, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        config = load_config(root_dir=other, environ={"PPX_INSTALL_ROOT": str(tmp_path)})
        assert config.root_dir == str(other)

    def test_picks_up_root_config_file(self, tmp_path):
        (tmp_path / "ppx-install.yml").write_text("bin_dir: prebuilt\n")
        config = load_config(root_dir=tmp_path, environ={})
        assert config.bin_dir == "prebuilt"

    def test_file_root_dir_relative_to_root(self, tmp_path):
        cfg = tmp_path / "custom.yml"
        cfg.write_text("root_dir: vendor\n")
        config = load_config(config_file=cfg, environ={})
        assert config.root_dir == os.path.join(package_root(), "vendor")

    def test_arguments_override_file(self, tmp_path):
        (tmp_path / "ppx-install.yml").write_text("link_name: from_file\n")
        config = load_config(root_dir=tmp_path, environ={}, link_name="from_args")
        assert config.link_name == "from_args"
