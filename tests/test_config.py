"""
Unit tests: configuration manager
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.infra.config import AppSettings, ConfigManager
from eleccalc.infra.exceptions import ConfigError


class TestConfigManager:
    """Configuration manager tests"""

    @pytest.fixture
    def config_dir(self, tmp_path):
        (tmp_path / "app.yaml").write_text(
            'app_title: "Test Calc"\n'
            'default_panel: "voltage-drop"\n'
            "breakpoint_px: 1024\n"
            "drawer_width_px: 260\n",
            encoding="utf-8",
        )
        return tmp_path

    def test_project_config_loads(self):
        settings = ConfigManager(env={}).load_settings()
        assert settings.default_panel == "wire-calc"
        assert settings.breakpoint_px == 900
        assert settings.drawer_width_px == 240
        assert settings.default_standard == "NEC"

    def test_file_values(self, config_dir):
        settings = ConfigManager(config_dir=config_dir, env={}).load_settings()
        assert settings.app_title == "Test Calc"
        assert settings.default_panel == "voltage-drop"
        assert settings.breakpoint_px == 1024
        assert settings.log_level == "INFO"

    def test_env_overrides_file(self, config_dir):
        env = {"ELECCALC_BREAKPOINT_PX": "1200", "ELECCALC_DEFAULT_STANDARD": "IEC"}
        settings = ConfigManager(config_dir=config_dir, env=env).load_settings()
        assert settings.breakpoint_px == 1200
        assert settings.default_standard == "IEC"
        assert settings.drawer_width_px == 260

    def test_get_config_value(self, config_dir):
        manager = ConfigManager(config_dir=config_dir, env={"ELECCALC_APP_TITLE": "From env"})
        assert manager.get_config_value("app_title") == "From env"
        assert manager.get_config_value("drawer_width_px") == 260
        assert manager.get_config_value("missing", "fallback") == "fallback"

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = ConfigManager(config_dir=tmp_path, env={}).load_settings()
        assert settings == AppSettings()

    def test_invalid_value(self, config_dir):
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(config_dir=config_dir, env={"ELECCALC_BREAKPOINT_PX": "-5"}).load_settings()
        assert exc_info.value.details["config_key"] == "breakpoint_px"

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "app.yaml").write_text("app_title: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager(config_dir=tmp_path, env={}).load_file_config()

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "app.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager(config_dir=tmp_path, env={}).load_file_config()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
