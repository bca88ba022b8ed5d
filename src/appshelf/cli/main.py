"""
appshelf CLI — inspect package kinds, storage names and record indexes.

Usage:
    appshelf classify MyApp.ipa demo.APK
    appshelf name --file MyApp.ipa --identifier com.example.app --version 1.2.0 --build 42
    appshelf list ./index.json --grouped
"""

import json
import logging

import click


def _setup_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.version_option(package_name="appshelf")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def cli(verbose):
    """appshelf — identity and storage naming for uploaded app packages."""
    _setup_logging(verbose)


@cli.command()
@click.argument("filenames", nargs=-1, required=True)
def classify(filenames):
    """Print the package kind of each FILENAME (by extension)."""
    from appshelf.models.appinfo import file_kind

    for filename in filenames:
        click.echo(f"{filename}\t{file_kind(filename).name}")


@cli.command()
@click.option("--file", "-f", "filename", required=True, help="Uploaded file name; decides the package kind.")
@click.option("--identifier", "-i", required=True, help="Application identifier (reverse DNS).")
@click.option("--version", "app_version", default="", help="Application version string.")
@click.option("--build", "-b", default="", help="Build number.")
@click.option("--channel", "-c", default="", help="Distribution channel, e.g. beta.")
@click.option("--name", "-n", default="", help="Display name.")
@click.option("--size", type=int, default=0, help="Package size in bytes.")
@click.option("--no-icon", is_flag=True, help="The package carries no icon.")
def name(filename, identifier, app_version, build, channel, name, size, no_icon):
    """Create a record and print its storage names as JSON."""
    from appshelf.models.appinfo import AppInfo, UnsupportedPackageError, file_kind
    from appshelf.models.package import ParsedPackage

    package = ParsedPackage(
        name=name,
        version=app_version,
        identifier=identifier,
        build=build,
        channel=channel,
        icon=None if no_icon else object(),
        size=size,
    )
    try:
        info = AppInfo.create(package, file_kind(filename))
    except UnsupportedPackageError as e:
        raise click.UsageError(f"{filename!r} is not an .ipa or .apk file ({e})") from e

    click.echo(
        json.dumps(
            {
                "id": info.id,
                "package": info.package_storage_name(),
                "icon": info.icon_storage_name(),
            },
            indent=2,
        )
    )


@cli.command(name="list")
@click.argument("index", type=click.Path(exists=True, dir_okay=False), envvar="APPSHELF_INDEX")
@click.option("--grouped", "-g", is_flag=True, help="One row per app identifier, with platform tags.")
def list_records(index, grouped):
    """Show the records of a JSON INDEX, most recent first."""
    from rich.console import Console
    from rich.table import Table

    from appshelf.core.catalog import group_by_identifier, platform_tags, size_str
    from appshelf.models.appinfo import AppInfo, sort_by_recency

    logger = logging.getLogger("appshelf.cli")
    try:
        with open(index) as f:
            data = json.load(f)
        records = [AppInfo.from_dict(item) for item in data]
    except (OSError, TypeError, KeyError, ValueError) as e:
        raise click.ClickException(f"Invalid index {index}: {e}") from e
    logger.debug(f"Loaded {len(records)} records from {index}")

    console = Console()
    if grouped:
        table = Table(title=f"Apps ({index})")
        table.add_column("Name", no_wrap=True)
        table.add_column("Identifier")
        table.add_column("Latest")
        table.add_column("Platforms", no_wrap=True)
        table.add_column("Uploads", justify="right")
        for group in group_by_identifier(records):
            latest = group.latest
            table.add_row(
                latest.name,
                group.identifier,
                f"{latest.version} (Build {latest.build})",
                ", ".join(platform_tags(group)),
                str(len(group.history)),
            )
    else:
        sort_by_recency(records)
        table = Table(title=f"Uploads ({index})")
        table.add_column("Name", no_wrap=True)
        table.add_column("Version")
        table.add_column("Channel")
        table.add_column("Kind")
        table.add_column("Size", justify="right")
        table.add_column("Uploaded")
        table.add_column("Storage name", overflow="fold")
        for record in records:
            table.add_row(
                record.name,
                f"{record.version} (Build {record.build})",
                record.channel,
                record.type.name,
                size_str(record.size),
                record.date.strftime("%Y-%m-%d %H:%M"),
                record.package_storage_name(),
            )
    console.print(table)


if __name__ == "__main__":
    cli()
