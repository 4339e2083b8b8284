import pytest

from playlist_duration.config import Settings, load_settings
from playlist_duration.domain.errors import ConfigError


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)


def test_explicit_api_key():
    result = load_settings(api_key="explicit")

    assert result.is_right()
    assert result.value == Settings(api_key="explicit")


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")

    assert load_settings().value.api_key == "from-env"


def test_explicit_key_wins_over_environment(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")

    assert load_settings(api_key="explicit").value.api_key == "explicit"


def test_settings_from_yaml_file(tmp_path, caplog):
    """
    LDD: Verifies the info log.
    """
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        """
api_key: "from-file"
lang: fr
speeds: [1.5, 2]
show_days: true
"""
    )

    result = load_settings(config_file)

    assert result.is_right()
    assert result.value == Settings(
        api_key="from-file", lang="fr", speeds=(1.5, 2.0), show_days=True
    )
    assert f"Config file '{config_file}' loaded." in caplog.text


def test_environment_wins_over_yaml_file(tmp_path, monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")
    config_file = tmp_path / "config.yml"
    config_file.write_text("api_key: from-file\n")

    assert load_settings(config_file).value.api_key == "from-env"


def test_missing_api_key(caplog):
    result = load_settings()

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, ConfigError)
    assert "No YouTube API key found" in error_value.message
    assert "No YouTube API key configured." in caplog.text


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("api_key: [unclosed")

    error_value, _ = load_settings(config_file).monoid

    assert isinstance(error_value, ConfigError)
    assert "Could not read config file" in error_value.message


def test_missing_file(tmp_path):
    error_value, _ = load_settings(tmp_path / "missing.yml").monoid

    assert isinstance(error_value, ConfigError)


def test_yaml_must_be_a_mapping(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("- just\n- a list\n")

    error_value, _ = load_settings(config_file, api_key="k").monoid

    assert "must contain a mapping" in error_value.message


def test_empty_yaml_file_uses_defaults(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("")

    assert load_settings(config_file, api_key="k").value == Settings(api_key="k")


@pytest.mark.parametrize("speeds", ["[0, 2]", "[-1]", "[]", "[fast]", "2"])
def test_invalid_speeds(tmp_path, speeds):
    config_file = tmp_path / "config.yml"
    config_file.write_text(f"speeds: {speeds}\n")

    error_value, _ = load_settings(config_file, api_key="k").monoid

    assert isinstance(error_value, ConfigError)
    assert "'speeds'" in error_value.message
