"""CLI entry point: parse a rustdoc HTML page and print it as JSON or Markdown."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from rustdoc_page.config import load_config
from rustdoc_page.domain.exceptions import ParseError
from rustdoc_page.infrastructure.parsers.page_parser import PageParser
from rustdoc_page.presentation.formatter import MarkdownFormatter
from rustdoc_page.presentation.serializer import to_json


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "markdown"]),
    default=None,
    help="Output format (overrides config/env)",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="JSON indentation (overrides config/env)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Threads used to parse main-content sections (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging (overrides config/env)",
)
def cli(
    path: str,
    config: str | None,
    output_format: str | None,
    indent: int | None,
    workers: int | None,
    verbose: bool,
) -> None:
    """Parse a rustdoc-generated HTML page.

    Configuration priority: YAML config < env vars (RUSTDOC_PAGE_*) < CLI arguments.
    """
    # None values are skipped by load_config
    cli_overrides = {
        "output.format": output_format,
        "output.indent": indent,
        "parser.workers": workers,
        "logging.verbose": verbose or None,
    }

    app_config = load_config(config_path=config, cli_overrides=cli_overrides)

    log_level = logging.DEBUG if app_config.logging.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    html = Path(path).read_text(encoding="utf-8")
    parser = PageParser(
        workers=app_config.parser.workers,
        method_heading=app_config.parser.method_heading,
        introduction_heading=app_config.parser.introduction_heading,
    )
    formatter = MarkdownFormatter()
    try:
        page = parser.parse(html)
    except ParseError as e:
        if app_config.output.format == "markdown":
            click.echo(formatter.format_error(f"{path}: {e}"), err=True)
            sys.exit(1)
        raise click.ClickException(f"{path}: {e}") from e

    if app_config.output.format == "markdown":
        click.echo(formatter.format_page(page))
    else:
        click.echo(to_json(page, indent=app_config.output.indent))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
