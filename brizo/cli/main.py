"""Main CLI entry point for brizo."""

from __future__ import annotations

from typing import Any

import click

from brizo import __version__
from brizo.cli.common import Context, global_options, handle_errors
from brizo.cli.config_cmd import config
from brizo.cli.files import files
from brizo.cli.folders import folders
from brizo.cli.metrics import metrics
from brizo.core.output import print_output


@click.group()
@click.version_option(version=__version__, prog_name="brizo")
def cli() -> None:
    """brizo - manage files in Brizo cloud storage.

    Get started:

      export BRIZO_API_KEY=...   # Authenticate

      brizo config init          # Create config file

      brizo files upload *.pdf   # Upload files

    Use --help on any command for more information.
    """
    pass


cli.add_command(config)
cli.add_command(files)
cli.add_command(folders)
cli.add_command(metrics)


@cli.command()
@global_options
@handle_errors
def health(ctx: Context) -> None:
    """Check that the API is reachable."""
    result: Any = ctx.run(lambda sdk: sdk.health_check())
    if not isinstance(result, dict):
        result = {"status": result}
    print_output(result, format=ctx.output_format, quiet=False)


def main() -> None:
    """Entry point for the brizo console script."""
    cli()


if __name__ == "__main__":
    main()
