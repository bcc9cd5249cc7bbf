#!/usr/bin/env python3
"""
Command Line Interface for ntfs-remount.
(Re-)mounts all or the given NTFS volumes in read/write mode with NTFS-3G.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from ntfs_remount import __version__
from ntfs_remount.config.loader import ConfigLoader
from ntfs_remount.core.errors import InsufficientPrivilegeError, NtfsRemountError
from ntfs_remount.core.logger import LOG_LEVELS, get_logger
from ntfs_remount.core.system import SystemCommands
from ntfs_remount.discovery.drive_enumerator import DriveEnumerator, NTFSDrive
from ntfs_remount.discovery.volume_selector import select_volume_names
from ntfs_remount.storage.disk_mounter import DiskMounter, MountRequest, MountResult

logger = get_logger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Anything that is not one of our options is a volume name
    "ignore_unknown_options": True,
}

@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--unmount", "-u", "unmount_only", is_flag=True,
              help="Unmount specified VOLUME NAMES. Or all NTFS volumes currently connected.")
@click.option("--volumes-folder", "-f", metavar="PATH", envvar="NTFS_REMOUNT_VOLUMES_FOLDER",
              help="Folder where volumes are mounted. Defaults to /Volumes.")
@click.option("--list", "-l", "list_only", is_flag=True,
              help="List connected NTFS volumes and exit.")
@click.option("--ntfs-3g", "driver_path", metavar="PATH", envvar="NTFS_REMOUNT_DRIVER",
              help="NTFS-3G binary. Defaults to /usr/local/bin/ntfs-3g.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--log-level", type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
              help="Logging level. Defaults to WARNING.")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file.")
@click.version_option(__version__, prog_name="ntfs-remount")
@click.argument("volume_names", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    unmount_only: bool,
    volumes_folder: str | None,
    list_only: bool,
    driver_path: str | None,
    verbose: bool,
    log_level: str | None,
    log_file: str | None,
    volume_names: tuple[str, ...],
):
    """Utility to automate NTFS drives mounting in read/write mode on macOS,
    by using the NTFS-3G driver.

    VOLUME_NAMES: list of volume names to be used. If blank, then all NTFS
    drives that are currently connected will be used.
    """
    system = ctx.ensure_object(SystemCommands)

    # Drives cannot be manipulated without root
    if not system.is_privileged():
        fail(InsufficientPrivilegeError("Need privileges. Please re-run this command with sudo"))

    try:
        config = ConfigLoader.from_options(
            volumes_folder=volumes_folder,
            unmount_only=unmount_only,
            requested_volumes=volume_names,
            driver_path=driver_path,
            log_level="DEBUG" if verbose else log_level,
            log_file=log_file,
        )
    except ValueError as e:
        raise click.UsageError(str(e), ctx=ctx)

    try:
        enumerator = DriveEnumerator(system)
        available = enumerator.list_available_ntfs_drives()

        if list_only:
            list_drives(available)
            return

        selected = select_volume_names(available, config.requested_volumes)
        logger.info(f"Selected volumes: {', '.join(selected)}")

        mounter = DiskMounter(config, system, enumerator)
        mounter.process(selected, available, on_result=report_result, on_unmount=report_unmount)

    except NtfsRemountError as e:
        fail(e)

def fail(error: NtfsRemountError) -> NoReturn:
    """Print a fatal error and exit with its status"""
    logger.debug(f"{error.kind.name}: {error.message}")
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(error.exit_code)

def list_drives(drives: list[NTFSDrive]) -> None:
    click.echo(f"Found {len(drives)} NTFS volume(s):")
    for drive in drives:
        mounted = f"mounted at {drive.mount_point}" if drive.mount_point else "not mounted"
        name = drive.volume_name or "(no volume name)"
        click.echo(f"  {name} (/dev/{drive.device_identifier}) -- {mounted}")

def report_unmount(request: MountRequest) -> None:
    click.echo(f"Unmounting existing '{request.volume_name}'... Done.")

def report_result(result: MountResult) -> None:
    """Print what happened to one volume"""
    if not result.unmounted and not result.mounted:
        click.echo(f"'{result.volume_name}' is not mounted.")

    if result.mounted:
        click.echo(f"Mounting '{result.volume_name}' with NTFS-3G... Done.")
        click.echo(f"NTFS volume '{result.volume_name}' available at {result.mount_path}")

def main():
    cli(prog_name="ntfs-remount")

if __name__ == "__main__":
    main()
