"""
Command-line interface for the MOIBit storage client.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from moibit.client.client import Client
from moibit.client.domain.options import (
    EncryptionType,
    apply_encryption,
    create_only_file,
    keep_previous,
    perform_restore,
    provenance,
    remove_directory,
    replication_factor,
)
from moibit.common.exceptions import MoiBitError


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _client(ctx: click.Context) -> Client:
    """Authenticate lazily so that --help never touches the network."""
    if "client" not in ctx.obj:
        settings = ctx.obj["settings"]
        if not settings["signature"] or not settings["nonce"]:
            msg = "ERROR: --signature and --nonce (or MOIBIT_SIGNATURE and MOIBIT_NONCE) must be set."
            raise click.ClickException(msg)
        try:
            ctx.obj["client"] = Client(**ctx.obj["settings"])
        except MoiBitError as err:
            raise click.ClickException(str(err)) from err
        ctx.call_on_close(ctx.obj["client"].close)
    return ctx.obj["client"]


@click.group()
@click.option("--signature", envvar="MOIBIT_SIGNATURE", default=None, help="Developer signature (env MOIBIT_SIGNATURE)")
@click.option("--nonce", envvar="MOIBIT_NONCE", default=None, help="Nonce the signature was produced for (env MOIBIT_NONCE)")
@click.option("--app-id", default=None, help="Application ID (default: from MOIBIT_APP_ID env)")
@click.option("--network-id", default=None, help="Network ID (default: from MOIBIT_NETWORK_ID env or the public network)")
@click.option("--base-url", default=None, help="Service base URL (default: from MOIBIT_BASE_URL env)")
@click.pass_context
def cli(
    ctx: click.Context,
    signature: str | None,
    nonce: str | None,
    app_id: str | None,
    network_id: str | None,
    base_url: str | None,
) -> None:
    """MOIBit storage CLI"""
    ctx.ensure_object(dict)
    ctx.obj["settings"] = {
        "signature": signature,
        "nonce": nonce,
        "app_id": app_id,
        "network_id": network_id,
        "base_url": base_url,
    }


@cli.command("ls")
@click.argument("path", default="/")
@click.pass_context
def list_files(ctx: click.Context, path: str) -> None:
    """List the files of a directory"""
    try:
        files = _client(ctx).list_files(path)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    for fd in files:
        kind = "d" if fd.is_directory else "-"
        click.echo(f"{kind} {fd.filesize:>10} {fd.last_updated:<25} {fd.path}")


@cli.command("stat")
@click.argument("path")
@click.pass_context
def file_status(ctx: click.Context, path: str) -> None:
    """Show the status of a file"""
    try:
        fd = _client(ctx).file_status(path)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    if not fd.exists():
        raise click.ClickException(f"{path}: no such file")
    _echo_json(fd.model_dump(by_alias=True))


@cli.command("versions")
@click.argument("path")
@click.pass_context
def file_versions(ctx: click.Context, path: str) -> None:
    """Show the version history of a file"""
    try:
        versions = _client(ctx).file_versions(path)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    _echo_json([v.model_dump(by_alias=True) for v in versions])


@cli.command("cat")
@click.argument("path")
@click.option("--version", "version", default=0, type=int, help="File version to read (default: latest)")
@click.pass_context
def read_file(ctx: click.Context, path: str, version: int) -> None:
    """Print the contents of a file"""
    try:
        data = _client(ctx).read_file(path, version)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    click.echo(data, nl=False)


@cli.command("put")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("--keep-previous", "keep", is_flag=True, help="Keep the previous version of the file")
@click.option("--no-create-folders", is_flag=True, help="Fail if the parent folders do not exist")
@click.option("--provenance", "with_provenance", is_flag=True, help="Record provenance of the file")
@click.option("--replication", default=None, type=click.IntRange(min=1), help="Replication factor")
@click.option(
    "--encryption",
    default=None,
    type=click.Choice([e.name.lower() for e in EncryptionType]),
    help="Encryption scheme",
)
@click.pass_context
def write_file(  # noqa: PLR0913
    ctx: click.Context,
    source: Path,
    name: str,
    keep: bool,  # noqa: FBT001
    no_create_folders: bool,  # noqa: FBT001
    with_provenance: bool,  # noqa: FBT001
    replication: int | None,
    encryption: str | None,
) -> None:
    """Upload a local text file to NAME"""
    options = []
    if keep:
        options.append(keep_previous())
    if no_create_folders:
        options.append(create_only_file())
    if with_provenance:
        options.append(provenance())
    if replication is not None:
        options.append(replication_factor(replication))
    if encryption is not None:
        options.append(apply_encryption(EncryptionType[encryption.upper()]))

    try:
        descriptors = _client(ctx).write_file(source.read_bytes(), name, *options)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    _echo_json([fd.model_dump(by_alias=True) for fd in descriptors])


@cli.command("rm")
@click.argument("path")
@click.option("--version", "version", default=0, type=int, help="File version to act on")
@click.option("--directory", is_flag=True, help="PATH is a directory")
@click.option("--restore", is_flag=True, help="Restore the version instead of removing it")
@click.pass_context
def remove_file(
    ctx: click.Context,
    path: str,
    version: int,
    directory: bool,  # noqa: FBT001
    restore: bool,  # noqa: FBT001
) -> None:
    """Remove or restore a file or directory"""
    options = []
    if directory:
        options.append(remove_directory())
    if restore:
        options.append(perform_restore())

    try:
        _client(ctx).remove_file(path, version, *options)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    click.echo(f"{'Restored' if restore else 'Removed'} {path}")


@cli.command("mkdir")
@click.argument("path")
@click.pass_context
def make_directory(ctx: click.Context, path: str) -> None:
    """Create a directory"""
    try:
        _client(ctx).make_directory(path)
    except MoiBitError as err:
        raise click.ClickException(str(err)) from err
    click.echo(f"Created {path}")


if __name__ == "__main__":
    cli()
