"""Folder commands for brizo."""

from __future__ import annotations

import click

from brizo.cli.common import Context, confirm_option, global_options, handle_errors
from brizo.core.output import print_output, print_success, print_warning
from brizo.models.folder import Folder


@click.group()
def folders() -> None:
    """Manage folders."""
    pass


@folders.command("list")
@click.option("--parent", "parent_id", default="", help="Parent folder ID (root if omitted)")
@global_options
@handle_errors
def folders_list(ctx: Context, parent_id: str) -> None:
    """List folders directly under a parent.

    Example:
        brizo folders list
        brizo folders list --parent abc123 -q
    """
    result = ctx.run(lambda sdk: sdk.folders.list(parent_id=parent_id))
    columns = Folder.table_columns()
    print_output(
        [folder.to_row(columns) for folder in result.items],
        format=ctx.output_format,
        columns=columns,
        quiet=ctx.quiet,
    )


@folders.command("tree")
@click.option("--parent", "parent_id", default="", help="Start below this folder")
@global_options
@handle_errors
def folders_tree(ctx: Context, parent_id: str) -> None:
    """List every folder recursively with its path."""
    tree = ctx.run(lambda sdk: sdk.folders.list_all(parent_id=parent_id))
    rows = [{"id": f.id, "path": f.path_string} for f in tree.folders]
    print_output(rows, format=ctx.output_format, columns=["id", "path"], quiet=ctx.quiet)

    for err in tree.errors:
        print_warning(f"Could not list folder {err.parent_id or 'root'}: {err.error}")


@folders.command("create")
@click.argument("name")
@click.option("--parent", "parent_id", default="", help="Parent folder ID")
@global_options
@handle_errors
def folders_create(ctx: Context, name: str, parent_id: str) -> None:
    """Create a folder."""
    folder = ctx.run(lambda sdk: sdk.folders.create(name, parent_id=parent_id))
    if ctx.quiet:
        click.echo(folder.id)
    else:
        print_success(f"Created folder {folder.name} ({folder.id})")


@folders.command("mkdir")
@click.argument("path")
@global_options
@handle_errors
def folders_mkdir(ctx: Context, path: str) -> None:
    """Create a nested folder path, reusing folders that exist.

    Example:
        brizo folders mkdir photos/2024/summer
    """
    folder = ctx.run(lambda sdk: sdk.folders.create_path(path))
    if ctx.quiet:
        click.echo(folder.id)
    else:
        print_success(f"{path} is folder {folder.id}")


@folders.command("rename")
@click.argument("folder_id")
@click.argument("name")
@global_options
@handle_errors
def folders_rename(ctx: Context, folder_id: str, name: str) -> None:
    """Rename a folder."""
    folder = ctx.run(lambda sdk: sdk.folders.rename(folder_id, name))
    if not ctx.quiet:
        print_success(f"Renamed {folder.id} to {folder.name}")


@folders.command("delete")
@click.argument("folder_id")
@click.option("--contents", is_flag=True, help="Also delete files and subfolders")
@global_options
@confirm_option("Delete this folder?")
@handle_errors
def folders_delete(ctx: Context, folder_id: str, contents: bool) -> None:
    """Delete a folder."""
    ctx.run(lambda sdk: sdk.folders.delete(folder_id, delete_contents=contents))
    if not ctx.quiet:
        print_success(f"Deleted folder {folder_id}")
