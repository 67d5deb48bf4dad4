"""Command line entry point for rendering citation record files."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from citeformats import __version__
from citeformats.config import CitationConfig, load_config
from citeformats.converter import CitationFormat, CitationFormatsConverter
from citeformats.core.labels import BundleLabelResolver, LabelConstant
from citeformats.core.models import load_record


@dataclass
class Context:
    """CLI context that holds shared resources."""

    config: CitationConfig
    converter: CitationFormatsConverter
    console: Console
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        highlight=False,
        color_system=None if no_color else "auto",
    )


class CiteFormatsGroup(click.Group):
    """Group that reports errors without tracebacks unless debugging."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=CiteFormatsGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="citeformats", message="citeformats %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Render dataset citations as text, BibTeX, RIS or EndNote XML."""
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        citation_config = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        config=citation_config,
        converter=CitationFormatsConverter.from_config(citation_config),
        console=create_console(no_color=no_color),
        debug=debug,
    )


@cli.command()
@click.argument("record", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice([f.value for f in CitationFormat]),
    default=CitationFormat.CITATION.value,
    help="Citation format",
)
@click.option("--locale", "-l", help="Label locale (defaults to configuration)")
@click.option("--escape-html", is_flag=True, help="HTML-escape the plain citation")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to file instead of stdout",
)
@click.pass_obj
def render(
    obj: Context,
    record: Path,
    fmt: str,
    locale: str | None,
    escape_html: bool,
    output: Path | None,
) -> None:
    """Render a JSON or YAML citation RECORD."""
    citation_record = load_record(record)
    text = obj.converter.render(
        citation_record,
        fmt,
        locale or obj.config.default_locale,
        escape_html=escape_html or obj.config.escape_html,
    )

    if output:
        output.write_text(text, encoding="utf-8", newline="")
        obj.console.print(
            f"[green]Wrote {fmt} citation to {escape(str(output))}[/green]"
        )
    else:
        click.echo(text)


@cli.command()
@click.pass_obj
def formats(obj: Context) -> None:
    """List supported citation formats."""
    table = Table(title="Citation formats")
    table.add_column("Format", style="cyan")
    table.add_column("Media type")
    table.add_column("Extension")

    for fmt in CitationFormat:
        table.add_row(fmt.value, fmt.media_type, fmt.extension)

    obj.console.print(table)


@cli.command()
@click.option("--locale", "-l", help="Label locale (defaults to configuration)")
@click.pass_obj
def labels(obj: Context, locale: str | None) -> None:
    """Show the citation labels of a locale."""
    locale = locale or obj.config.default_locale
    resolver = obj.converter.resolver

    table = Table(title=f"Citation labels ({locale})")
    table.add_column("Constant", style="cyan")
    table.add_column("Label")

    for constant in LabelConstant:
        table.add_row(constant.name, escape(resolver.resolve(constant, locale)))

    obj.console.print(table)
    if isinstance(resolver, BundleLabelResolver):
        obj.console.print(f"Available locales: {', '.join(resolver.locales)}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
