"""Command-line interface for WWDC Parser."""

import asyncio
import logging
import sys
from typing import cast

import click

from wwdcparser import __version__
from wwdcparser.converter import convert_content
from wwdcparser.logger import setup_logger
from wwdcparser.models import ContentType, FetchConfig

from .utils import validate_developer_url

logger = logging.getLogger("wwdcparser")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.argument("url", required=True, callback=validate_developer_url)
@click.option(
    "--content-type",
    "-c",
    type=click.Choice(["video", "document"]),
    default=None,
    help="Type of content to parse (inferred from the URL when omitted)",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Directory for the markdown file (defaults to the current directory)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=30.0,
    show_default=True,
    help="HTTP timeout in seconds",
)
@click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose output", default=False
)
@click.option(
    "--quiet", "-q", is_flag=True, help="Suppress non-error messages", default=False
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    help="Write logs to file",
    default=None,
)
def main(  # noqa: PLR0913
    url: str,
    content_type: str | None,
    output_dir: str | None,
    timeout: float,
    verbose: bool,
    quiet: bool,
    log_file: str | None,
) -> None:
    """WWDC Parser - Convert WWDC video and documentation pages to markdown.

    URL should be a developer.apple.com page, for example
    'https://developer.apple.com/videos/play/wwdc2023/10149/' (video) or
    'https://developer.apple.com/documentation/swiftui' (document).
    """
    log_level = logging.WARNING
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.ERROR

    setup_logger(level=log_level, log_file=log_file)

    try:
        result = asyncio.run(
            convert_content(
                url=url,
                content_type=cast(ContentType | None, content_type),
                output_dir=output_dir,
                config=FetchConfig(timeout=timeout),
            )
        )
        logger.info(f"Successfully converted {result}")
        click.echo(f"Generated markdown file: {result.markdown_path}")

    except Exception as e:
        logger.error(f"Error converting {url}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
