"""Usage metrics command for brizo."""

from __future__ import annotations

from typing import Any

import click

from brizo.cli.common import Context, global_options, handle_errors
from brizo.core.output import OutputFormat, print_json, print_key_value
from brizo.sdk import Brizo

SECTIONS = ("storage", "requests", "uploads")


async def _collect(sdk: Brizo, sections: tuple[str, ...]) -> dict[str, dict[str, Any]]:
    data: dict[str, dict[str, Any]] = {}
    if "storage" in sections:
        data["storage"] = (await sdk.metrics.get_storage_usage()).model_dump()
    if "requests" in sections:
        data["requests"] = (await sdk.metrics.get_api_requests_usage()).model_dump()
    if "uploads" in sections:
        data["uploads"] = (await sdk.metrics.get_upload_stats()).model_dump()
    return data


@click.command()
@click.argument("section", required=False, type=click.Choice(SECTIONS))
@global_options
@handle_errors
def metrics(ctx: Context, section: str | None) -> None:
    """Show account usage.

    Example:
        brizo metrics
        brizo metrics storage -o json
    """
    sections = (section,) if section else SECTIONS
    data = ctx.run(lambda sdk: _collect(sdk, sections))

    if ctx.output_format == OutputFormat.JSON:
        print_json(data if section is None else data[section])
        return

    for name, values in data.items():
        print_key_value(values, title=name.title())
