"""
Unit tests for configuration loading
"""

import pytest

from artlens.config import ArtlensConfig, ArtlensSettings, get_config, load_config, set_config
from artlens.core.errors import ConfigurationError
from artlens.providers.vision_describers.gemini import DEFAULT_MODEL


@pytest.fixture(autouse=True)
def reset_global_config():
    set_config(None)
    yield
    set_config(None)


def settings(**kwargs) -> ArtlensSettings:
    return ArtlensSettings(_env_file=None, **kwargs)


class TestLoadConfig:
    """Test load_config"""

    def test_missing_api_key_is_fatal(self, clean_env):
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            load_config(env_settings=settings())

    def test_api_key_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        config = load_config(env_settings=settings())

        assert config.describer.api_key == "env-key"
        assert config.describer.type == "gemini-vlm-remote"
        assert config.describer.model == DEFAULT_MODEL

    def test_api_key_not_in_repr(self, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "secret-value")

        config = load_config(env_settings=settings())

        assert "secret-value" not in repr(config)

    def test_yaml_file_values(self, clean_env):
        path = clean_env / "artlens.yaml"
        path.write_text(
            "describer:\n"
            "  model: gemini-yaml\n"
            "  api_key: yaml-key\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )

        config = load_config(path, env_settings=settings())

        assert config.describer.model == "gemini-yaml"
        assert config.describer.api_key == "yaml-key"
        assert config.log_level == "DEBUG"

    def test_environment_overrides_yaml(self, clean_env, monkeypatch):
        path = clean_env / "artlens.yaml"
        path.write_text("describer:\n  model: gemini-yaml\n  api_key: yaml-key\n", encoding="utf-8")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("ARTLENS_MODEL", "gemini-env")
        monkeypatch.setenv("ARTLENS_LOG_LEVEL", "WARNING")

        config = load_config(path, env_settings=settings())

        assert config.describer.api_key == "env-key"
        assert config.describer.model == "gemini-env"
        assert config.log_level == "WARNING"

    def test_default_config_file_is_discovered(self, clean_env, monkeypatch):
        (clean_env / "artlens.yaml").write_text("describer:\n  model: from-default-file\n", encoding="utf-8")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        config = load_config(env_settings=settings())

        assert config.describer.model == "from-default-file"

    def test_broken_yaml_falls_back_to_defaults(self, clean_env, monkeypatch):
        path = clean_env / "artlens.yaml"
        path.write_text("describer: [unclosed\n", encoding="utf-8")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        config = load_config(path, env_settings=settings())

        assert config.describer.model == DEFAULT_MODEL

    def test_invalid_values_raise_configuration_error(self, clean_env, monkeypatch):
        path = clean_env / "artlens.yaml"
        path.write_text("describer: 42\n", encoding="utf-8")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        with pytest.raises(ConfigurationError):
            load_config(path, env_settings=settings())


def test_get_config_is_cached(clean_env, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    first = get_config()

    assert get_config() is first


def test_set_config(clean_env):
    config = ArtlensConfig()
    config.describer.api_key = "manual"

    set_config(config)

    assert get_config() is config
