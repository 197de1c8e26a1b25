"""CLI entry point: carttool.

Subcommands:
    carttool copy-frameworks                      # Xcode Run Script phase
    carttool verify App.app --search-root DIR     # check a built bundle
    carttool list-deps App.app/App --search-root DIR
    carttool cartfile Cartfile.resolved           # show parsed declarations
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from carttool.cartfile import CartfileEntry, read_manifest, scan
from carttool.config import BuildSettings
from carttool.core.logging import setup_logging
from carttool.exceptions import CartToolError
from carttool.frameworks.copy import copy_frameworks
from carttool.frameworks.discovery import discover_dependencies
from carttool.frameworks.verify import verify_dependencies


def _fail(error: CartToolError) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _print_entries(entries: list[CartfileEntry], as_json: bool) -> None:
    if as_json:
        rows = [
            {
                "type": e.type.value,
                "repo_name": e.repo_name,
                "remote_url": e.remote_url,
                "tag": e.tag,
                "source_file": e.source_file,
            }
            for e in entries
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    if not entries:
        click.echo("No dependencies found.")
        return

    by_file: dict[str, list[CartfileEntry]] = {}
    for e in entries:
        by_file.setdefault(e.source_file, []).append(e)

    for source_file, file_entries in sorted(by_file.items()):
        click.echo(f"{source_file}")
        for e in file_entries:
            click.echo(f"  {e.repo_name} {e.tag}  -> {e.remote_url}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """carttool: bundle exactly the Carthage frameworks an app links against."""
    setup_logging("DEBUG" if verbose else None)


@main.command("copy-frameworks")
@click.option(
    "--platform",
    default=None,
    help="Carthage platform directory (iOS, Mac, tvOS, watchOS). "
    "Defaults to one derived from PLATFORM_NAME.",
)
def copy_frameworks_cmd(platform: str | None) -> None:
    """Resolve linked frameworks and run `carthage copy-frameworks`."""
    try:
        settings = BuildSettings.from_env(platform=platform)
        resolved = copy_frameworks(settings)
    except CartToolError as e:
        _fail(e)

    click.echo("Resolved frameworks for `carthage copy-frameworks`:")
    for fw in resolved:
        click.echo(fw.path)


@main.command("verify")
@click.argument("app_path", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--search-root",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory the frameworks were built into (e.g. Carthage/Build/iOS)",
)
@click.option(
    "--expect",
    "expected",
    multiple=True,
    help="Framework expected in the app; repeatable. "
    "Without it the bundle's Frameworks directory is checked.",
)
def verify(app_path: str, search_root: str, expected: tuple[str, ...]) -> None:
    """Fail if APP_PATH links a framework it does not bundle."""
    try:
        names = verify_dependencies(app_path, search_root, expected or None)
    except CartToolError as e:
        _fail(e)
    click.echo(f"OK: {len(names)} framework(s) bundled")


@main.command("list-deps")
@click.argument("binary_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--search-root",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding the vendored frameworks",
)
def list_deps(binary_path: str, search_root: str) -> None:
    """List the vendored frameworks BINARY_PATH links against, transitively."""
    for name in sorted(set(discover_dependencies(binary_path, search_root))):
        click.echo(name)


@main.command("cartfile")
@click.argument("path", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def cartfile(path: str, as_json: bool) -> None:
    """Show the declarations in a Cartfile, or in every manifest of a directory."""
    target = Path(path)
    if target.is_dir():
        entries = scan(target)
    else:
        entries = read_manifest(target)
    _print_entries(entries, as_json)


if __name__ == "__main__":
    main()
