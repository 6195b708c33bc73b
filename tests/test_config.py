"""Tests for brizo.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from brizo.core.client import API_BASE_URL
from brizo.core.config import Config, Profile, get_api_key
from brizo.core.exceptions import ConfigurationError, ProfileNotFoundError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("BRIZO_API_KEY", "BRIZO_BASE_URL", "BRIZO_TIMEOUT", "BRIZO_PROFILE"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Profile Tests
# =============================================================================


class TestProfile:
    """Tests for Profile dataclass."""

    def test_default_values(self):
        profile = Profile()
        assert profile.base_url == API_BASE_URL
        assert profile.timeout == 30
        assert profile.default_folder is None
        assert profile.concurrency == 3

    def test_from_dict(self):
        profile = Profile.from_dict({"base_url": "https://api.brizo.test", "concurrency": "4"})
        assert profile.base_url == "https://api.brizo.test"
        assert profile.concurrency == 4
        assert profile.timeout == 30

    @pytest.mark.parametrize("data", [{"timeout": "soon"}, {"concurrency": 0}, {"timeout": -5}])
    def test_from_dict_rejects_bad_numbers(self, data: dict):
        with pytest.raises(ConfigurationError):
            Profile.from_dict(data)

    def test_to_dict_has_no_api_key(self):
        assert "api_key" not in Profile().to_dict()


# =============================================================================
# Config Tests
# =============================================================================


class TestConfigLoad:
    """Tests for Config.load."""

    def test_missing_file_gives_defaults(self, temp_dir: Path):
        config = Config.load(temp_dir / "config.yaml")
        assert config.default_profile == "default"
        assert config.output_format == "table"
        assert config.profiles == {}
        assert config.get_profile().base_url == API_BASE_URL

    def test_load_profiles(self, temp_dir: Path, sample_config_yaml: str):
        path = temp_dir / "config.yaml"
        path.write_text(sample_config_yaml)

        config = Config.load(path)

        assert config.default_profile == "work"
        work = config.get_profile()
        assert work.timeout == 45
        assert work.default_folder == "fld_inbox"
        assert work.concurrency == 5
        assert config.get_profile("personal").timeout == 30

    def test_invalid_yaml(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("profiles: [unclosed")

        with pytest.raises(ConfigurationError):
            Config.load(path)

    def test_non_mapping(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            Config.load(path)

    def test_invalid_output_format(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("output_format: xml\n")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.load(path)
        assert exc_info.value.field == "output_format"

    def test_env_overrides(self, temp_dir: Path, sample_config_yaml: str, monkeypatch: pytest.MonkeyPatch):
        path = temp_dir / "config.yaml"
        path.write_text(sample_config_yaml)
        monkeypatch.setenv("BRIZO_PROFILE", "personal")
        monkeypatch.setenv("BRIZO_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("BRIZO_TIMEOUT", "90")

        config = Config.load(path)

        assert config.default_profile == "personal"
        profile = config.get_profile()
        assert profile.base_url == "http://localhost:8080"
        assert profile.timeout == 90
        assert config.get_profile("work").base_url == "https://api.brizo.test"

    def test_env_without_file(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIZO_BASE_URL", "http://localhost:8080")

        config = Config.load(temp_dir / "missing.yaml")

        assert config.get_profile().base_url == "http://localhost:8080"


class TestConfigProfiles:
    """Tests for profile management."""

    def test_unknown_profile(self):
        with pytest.raises(ProfileNotFoundError):
            Config().get_profile("staging")

    def test_set_default_requires_existing(self):
        config = Config()
        with pytest.raises(ProfileNotFoundError):
            config.set_default_profile("staging")

    def test_save_and_reload(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIZO_API_KEY", "brz_secret_value")
        path = temp_dir / "nested" / "config.yaml"
        config = Config()
        config.add_profile("staging", base_url="https://staging.brizo.test", concurrency=8)
        config.set_default_profile("staging")

        config.save(path)
        reloaded = Config.load(path)

        assert reloaded.default_profile == "staging"
        assert reloaded.get_profile().concurrency == 8
        assert "brz_secret_value" not in path.read_text()
        assert yaml.safe_load(path.read_text())["profiles"]["staging"]["base_url"] == (
            "https://staging.brizo.test"
        )


class TestGetApiKey:
    """Tests for get_api_key function."""

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIZO_API_KEY", "brz_live_key")
        assert get_api_key() == "brz_live_key"

    def test_unset(self):
        assert get_api_key() is None

    def test_empty_is_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIZO_API_KEY", "")
        assert get_api_key() is None
