"""File commands for brizo."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from brizo.cli.common import Context, ExitCode, confirm_option, global_options, handle_errors
from brizo.core.output import (
    OutputFormat,
    create_progress,
    print_batch_summary,
    print_json,
    print_output,
    print_success,
)
from brizo.models.file import File
from brizo.models.upload import BatchOutcome, UploadRequest
from brizo.services.uploads import BatchProgressCallback


def _file_rows(files: list[File]) -> list[dict[str, str]]:
    return [f.to_row() for f in files]


@click.group()
def files() -> None:
    """Manage stored files."""
    pass


@files.command("list")
@click.option("--page", type=int, default=1, show_default=True, help="Page number")
@click.option("--per-page", type=int, default=20, show_default=True, help="Files per page")
@click.option("--search", help="Filter by name")
@click.option("--type", "file_type", help="Filter by MIME type prefix (e.g. image)")
@click.option("--sort", default="-created", show_default=True, help="Sort field")
@click.option("--folder", "folder_id", help="Folder ID")
@global_options
@handle_errors
def files_list(
    ctx: Context,
    page: int,
    per_page: int,
    search: Optional[str],
    file_type: Optional[str],
    sort: str,
    folder_id: Optional[str],
) -> None:
    """List files.

    Example:
        brizo files list
        brizo files list --folder abc123 -o json
        brizo files list -q  # IDs only
    """
    result = ctx.run(
        lambda sdk: sdk.files.list(
            page=page,
            per_page=per_page,
            search=search,
            type=file_type,
            sort=sort,
            folder_id=folder_id,
        )
    )

    if ctx.output_format == OutputFormat.JSON and not ctx.quiet:
        print_json(result.to_dict())
        return

    print_output(
        _file_rows(result.items),
        format=ctx.output_format,
        columns=File.table_columns(),
        quiet=ctx.quiet,
    )
    if not ctx.quiet and result.total_pages > 1:
        click.echo(f"Page {result.page} of {result.total_pages} ({result.total_items} files)")


@files.command("show")
@click.argument("file_id")
@global_options
@handle_errors
def files_show(ctx: Context, file_id: str) -> None:
    """Show file details."""
    file = ctx.run(lambda sdk: sdk.files.get(file_id))
    print_output(file.to_dict(), format=ctx.output_format, quiet=ctx.quiet)


@files.command("delete")
@click.argument("file_id")
@global_options
@confirm_option("Delete this file?")
@handle_errors
def files_delete(ctx: Context, file_id: str) -> None:
    """Delete a file."""
    ctx.run(lambda sdk: sdk.files.delete(file_id))
    if not ctx.quiet:
        print_success(f"Deleted {file_id}")


@files.command("move")
@click.argument("file_id")
@click.option("--folder", "folder_id", default="", help="Target folder ID (root if omitted)")
@global_options
@handle_errors
def files_move(ctx: Context, file_id: str, folder_id: str) -> None:
    """Move a file to another folder."""
    file = ctx.run(lambda sdk: sdk.files.move(file_id, folder_id))
    if not ctx.quiet:
        print_success(f"Moved {file.display_name} to {folder_id or 'root'}")


@files.command("url")
@click.argument("file_id")
@click.option("--share", is_flag=True, help="Print the public share URL instead")
@global_options
@handle_errors
def files_url(ctx: Context, file_id: str, share: bool) -> None:
    """Print a download URL for a file."""
    if share:
        file = ctx.run(lambda sdk: sdk.files.get(file_id))
        url = file.share_url
    else:
        url = ctx.run(lambda sdk: sdk.files.get_download_url(file_id))

    if not url:
        click.echo("No URL available", err=True)
        sys.exit(ExitCode.GENERAL_ERROR)
    click.echo(url)


@files.command("upload")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--folder", "folder_id", default=None, help="Target folder ID")
@click.option("--concurrency", "-c", type=int, default=None, help="Uploads in flight at once")
@click.option("--content-type", default=None, help="Override the MIME type")
@global_options
@handle_errors
def files_upload(
    ctx: Context,
    paths: tuple[Path, ...],
    folder_id: Optional[str],
    concurrency: Optional[int],
    content_type: Optional[str],
) -> None:
    """Upload one or more files.

    Several paths are uploaded as a batch; a failed file does not stop the
    others, and the command exits with status 1 if any file failed.

    Example:
        brizo files upload report.pdf
        brizo files upload *.jpg --folder abc123 --concurrency 5
    """
    profile = ctx.profile
    folder = folder_id if folder_id is not None else profile.default_folder or ""
    requests = [
        UploadRequest(source=path, content_type=content_type, folder_id=folder) for path in paths
    ]

    if len(requests) == 1:
        file = ctx.run(lambda sdk: sdk.uploads.upload(requests[0]))
        if ctx.quiet:
            click.echo(file.id)
        elif ctx.output_format == OutputFormat.JSON:
            print_json(file.to_dict())
        else:
            print_success(f"Uploaded {file.display_name} ({file.size_display}) as {file.id}")
        return

    limit = concurrency if concurrency is not None else profile.concurrency

    def run_batch(on_progress: Optional[BatchProgressCallback] = None) -> BatchOutcome:
        return ctx.run(
            lambda sdk: sdk.uploads.upload_batch(requests, concurrency=limit, on_progress=on_progress)
        )

    if ctx.quiet or ctx.output_format != OutputFormat.TABLE:
        outcome = run_batch()
    else:
        with create_progress() as progress:
            task = progress.add_task("Uploading", total=len(requests))
            outcome = run_batch(
                lambda percent, completed, total: progress.update(task, completed=completed)
            )

    if ctx.quiet:
        for f in outcome.files:
            click.echo(f.id)
    elif ctx.output_format == OutputFormat.JSON:
        print_json(
            {
                "successful": [
                    {"label": s.label, "file": s.file.to_dict()} for s in outcome.successful
                ],
                "failed": [
                    {"label": f.label, "message": f.message, "kind": f.kind.value}
                    for f in outcome.failed
                ],
            }
        )
    else:
        print_batch_summary(outcome)

    if not outcome.success:
        sys.exit(ExitCode.GENERAL_ERROR)
