"""Config commands for brizo."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

import click

from brizo.core.client import API_BASE_URL, DEFAULT_TIMEOUT
from brizo.core.config import CONFIG_FILE, ENV_API_KEY, Config, get_api_key
from brizo.core.exceptions import ConfigurationError
from brizo.core.output import OutputFormat, print_error, print_key_value, print_output, print_success
from brizo.sdk import mask_api_key
from brizo.uploaders.constants import DEFAULT_CONCURRENCY


def _load() -> Config:
    try:
        return Config.load(CONFIG_FILE)
    except ConfigurationError as e:
        print_error(str(e))
        raise SystemExit(1)


@click.group()
def config() -> None:
    """Manage brizo configuration."""
    pass


@config.command("init")
@click.option("--base-url", default=API_BASE_URL, show_default=True, help="API root URL")
@click.option("--profile", default="default", help="Profile name")
@click.option("--timeout", type=click.IntRange(min=1), default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
@click.option("--folder", "default_folder", default=None, help="Default upload folder ID")
@click.option(
    "--concurrency",
    type=click.IntRange(min=1),
    default=DEFAULT_CONCURRENCY,
    help="Default batch upload concurrency",
)
@click.option("--force", is_flag=True, help="Overwrite an existing profile")
def config_init(
    base_url: str,
    profile: str,
    timeout: int,
    default_folder: Optional[str],
    concurrency: int,
    force: bool,
) -> None:
    """Create or update a profile.

    The API key is not stored; set BRIZO_API_KEY in the environment.

    Example:
        brizo config init --profile staging --base-url https://staging.example.com
    """
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        print_error(f"Invalid base URL: {base_url}")
        raise SystemExit(1)

    cfg = _load() if CONFIG_FILE.exists() else Config()
    if cfg.has_profile(profile) and not force:
        print_error(f"Profile '{profile}' already exists. Use --force to overwrite.")
        raise SystemExit(1)

    cfg.add_profile(
        profile,
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        default_folder=default_folder,
        concurrency=concurrency,
    )
    if len(cfg.profiles) == 1:
        cfg.default_profile = profile
    cfg.save(CONFIG_FILE)

    print_success(f"Configuration saved to {CONFIG_FILE}")
    if not get_api_key():
        click.echo(f"Set {ENV_API_KEY} to authenticate.")


@config.command("show")
@click.option("--output", "-o", type=click.Choice(["json", "table"]), default="table")
def config_show(output: str) -> None:
    """Show current configuration."""
    cfg = _load()
    api_key = get_api_key()
    data = {
        "config_file": str(CONFIG_FILE),
        "default_profile": cfg.default_profile,
        "output_format": cfg.output_format,
        "api_key": mask_api_key(api_key) if api_key else None,
    }

    if output == "json":
        data["profiles"] = {name: p.to_dict() for name, p in cfg.profiles.items()}
        print_output(data, format=OutputFormat.JSON)
        return

    print_key_value(data, title="Configuration")
    for name, profile in cfg.profiles.items():
        marker = " (default)" if name == cfg.default_profile else ""
        click.echo()
        click.echo(f"Profile: {name}{marker}")
        print_key_value(profile.to_dict())


@config.command("use")
@click.argument("profile")
def config_use(profile: str) -> None:
    """Switch the default profile.

    Example:
        brizo config use staging
    """
    cfg = _load()
    if not cfg.has_profile(profile):
        print_error(f"Profile '{profile}' not found.")
        click.echo(f"Available profiles: {', '.join(cfg.profiles) or '-'}")
        raise SystemExit(1)

    cfg.set_default_profile(profile)
    cfg.save(CONFIG_FILE)
    print_success(f"Switched to profile '{profile}'")
