"""radtools CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from radtools import __version__


@click.group()
@click.version_option(version=__version__, prog_name="radtools")
@click.option("--verbose", "-v", is_flag=True, help="Log engine warnings to stderr")
def cli(verbose: bool) -> None:
    """radtools: keep design tokens and globals.css in sync."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=4100, type=int, help="Port to bind to")
@click.option("--root", default=".", help="Project root containing app/globals.css")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, root: str, debug: bool) -> None:
    """Start the devtools API server."""
    from dataclasses import replace

    from radtools.config import RadToolsConfig
    from radtools.web.app import create_app

    config = replace(RadToolsConfig.from_env(), root=root, host=host, port=port)
    app = create_app(config)
    click.echo(f"Starting radtools on {host}:{port} ({config.environment})")
    app.run(host=host, port=port, debug=debug)


@cli.command()
@click.option("--css", "css_path", default="app/globals.css", type=click.Path(exists=True, dir_okay=False))
def tokens(css_path: str) -> None:
    """Print the token model parsed from a stylesheet as JSON."""
    from radtools.serialize import font_to_dict, style_to_dict, tokens_to_dict
    from radtools.sync import StylesheetSync

    sync = StylesheetSync(css_path)
    data = tokens_to_dict(sync.load())
    fonts, styles = sync.load_typography()
    data["fonts"] = [font_to_dict(f) for f in fonts]
    data["typographyStyles"] = [style_to_dict(s) for s in styles]
    click.echo(json.dumps(data, indent=2))

    for warning in data["warnings"]:
        click.echo(warning, err=True)


@cli.command("switch-theme")
@click.argument("package")
@click.option("--css", "css_path", default="app/globals.css", type=click.Path(dir_okay=False))
def switch_theme(package: str, css_path: str) -> None:
    """Point the stylesheet's theme import at PACKAGE."""
    from radtools.theme.switcher import switch_theme_import

    result = switch_theme_import(css_path, package)
    if result.failed:
        click.echo(f"Error ({result.error_kind}): {result.error}", err=True)
        sys.exit(1)
    click.echo(f"Switched theme-{result.previous_theme} -> {result.new_theme}")


@cli.command()
@click.argument("directory", default="components", type=click.Path(file_okay=False))
@click.option("--folder", default=None, help="Only scan this sub-folder")
def scan(directory: str, folder: str | None) -> None:
    """List components and props found in DIRECTORY as JSON."""
    from radtools.scanner.components import scan_components
    from radtools.serialize import component_to_dict

    found = scan_components(directory, folder=folder)
    click.echo(json.dumps({"components": [component_to_dict(c) for c in found]}, indent=2))


@cli.command()
@click.argument("directory", default="public/fonts", type=click.Path(file_okay=False))
def fonts(directory: str) -> None:
    """List font families found in DIRECTORY as JSON."""
    from radtools.fontfiles import discover_fonts
    from radtools.serialize import font_to_dict

    click.echo(json.dumps({"fonts": [font_to_dict(f) for f in discover_fonts(directory)]}, indent=2))
