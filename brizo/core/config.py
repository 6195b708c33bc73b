"""Configuration management for the brizo CLI.

Supports YAML profiles and environment variable overrides. The API key is
only ever read from the environment and is never written to disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from brizo.core.client import API_BASE_URL, DEFAULT_TIMEOUT
from brizo.core.exceptions import ConfigurationError, ProfileNotFoundError
from brizo.uploaders.constants import DEFAULT_CONCURRENCY

# =============================================================================
# Constants
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "brizo"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variable names
ENV_API_KEY = "BRIZO_API_KEY"
ENV_BASE_URL = "BRIZO_BASE_URL"
ENV_TIMEOUT = "BRIZO_TIMEOUT"
ENV_PROFILE = "BRIZO_PROFILE"

OUTPUT_FORMATS = ("table", "json")


# =============================================================================
# Profile
# =============================================================================


@dataclass
class Profile:
    """Connection settings for one Brizo account."""

    base_url: str = API_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    default_folder: Optional[str] = None
    concurrency: int = DEFAULT_CONCURRENCY

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "default_folder": self.default_folder,
            "concurrency": self.concurrency,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Profile:
        """Create from a profile mapping in the config file.

        Raises:
            ConfigurationError: If timeout or concurrency is not a positive integer.
        """
        return cls(
            base_url=data.get("base_url") or API_BASE_URL,
            timeout=_positive_int(data.get("timeout", DEFAULT_TIMEOUT), "timeout"),
            default_folder=data.get("default_folder"),
            concurrency=_positive_int(
                data.get("concurrency", DEFAULT_CONCURRENCY), "concurrency"
            ),
        )


def _positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid {name}: {value!r}", field=name, value=value)
    if number < 1:
        raise ConfigurationError(f"{name} must be at least 1", field=name, value=value)
    return number


# =============================================================================
# Config
# =============================================================================


@dataclass
class Config:
    """Application configuration."""

    default_profile: str = "default"
    output_format: str = "table"
    profiles: dict[str, Profile] = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> Config:
        """Load config from file with environment variable overrides.

        Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Defaults

        Args:
            config_path: Optional path to config file.

        Returns:
            Loaded configuration.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = config_path or CONFIG_FILE
        config = cls()

        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config: {e}") from e

            if not isinstance(data, dict):
                raise ConfigurationError("Config file must contain a mapping")

            config.default_profile = data.get("default_profile", "default")
            config.output_format = data.get("output_format", "table")
            if config.output_format not in OUTPUT_FORMATS:
                raise ConfigurationError(
                    f"Invalid output format: {config.output_format}",
                    field="output_format",
                    value=config.output_format,
                )

            for name, pdata in (data.get("profiles") or {}).items():
                config.profiles[name] = Profile.from_dict(pdata or {})

        if profile := os.getenv(ENV_PROFILE):
            config.default_profile = profile

        base_url = os.getenv(ENV_BASE_URL)
        timeout = os.getenv(ENV_TIMEOUT)
        if base_url or timeout:
            profile = config.profiles.get(config.default_profile) or Profile()
            if base_url:
                profile.base_url = base_url
            if timeout:
                profile.timeout = _positive_int(timeout, "timeout")
            config.profiles[config.default_profile] = profile

        return config

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save config to file (the API key is never included).

        Args:
            config_path: Optional path to config file.
        """
        path = config_path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "default_profile": self.default_profile,
            "output_format": self.output_format,
            "profiles": {name: p.to_dict() for name, p in self.profiles.items()},
        }

        with open(path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def get_profile(self, name: Optional[str] = None) -> Profile:
        """Get profile by name or default.

        The built-in defaults are used when no profile named ``default`` is
        configured.

        Raises:
            ProfileNotFoundError: If a named profile doesn't exist.
        """
        name = name or self.default_profile
        if name in self.profiles:
            return self.profiles[name]
        if name == "default":
            return Profile()
        raise ProfileNotFoundError(name)

    def has_profile(self, name: str) -> bool:
        return name in self.profiles

    def add_profile(
        self,
        name: str,
        base_url: str = API_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        default_folder: Optional[str] = None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> Profile:
        """Add or update a profile."""
        profile = Profile(
            base_url=base_url,
            timeout=timeout,
            default_folder=default_folder,
            concurrency=concurrency,
        )
        self.profiles[name] = profile
        return profile

    def set_default_profile(self, name: str) -> None:
        """Set the default profile.

        Raises:
            ProfileNotFoundError: If profile doesn't exist.
        """
        if name not in self.profiles:
            raise ProfileNotFoundError(name)
        self.default_profile = name


def get_api_key() -> Optional[str]:
    """Get the API key from the environment.

    Returns:
        API key if set, None otherwise.
    """
    return os.getenv(ENV_API_KEY) or None
