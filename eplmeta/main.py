import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from eplmeta.config import GeneratorConfig
from eplmeta.errors import GeneratorError
from eplmeta.generate import generate

log_format = "%(name)s - %(levelname)s - %(message)s"
logger = logging.getLogger(__name__)

USAGE = [
    'Not enough arguments, expected 4',
    '1) URL to Maven metadata XML',
    '2) Ely.by Authlib download URL format string ({} will be replaced with the version)',
    '3) authlib-injector download URL',
    '4) Output file name',
]


def print_usage() -> None:
    console = Console(stderr=True, highlight=False)
    for line in USAGE:
        console.print(line, markup=False, soft_wrap=True)


@click.command(context_settings={"allow_extra_args": True})
@click.argument("metadata_url", required=False)
@click.argument("authlib_download_url_format", required=False)
@click.argument("injector_download_url", required=False)
@click.argument("output_file", type=click.Path(dir_okay=False), required=False)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None)
@click.option("--max-concurrency", type=click.IntRange(min=1), default=None)
@click.option("-v", "--verbose", is_flag=True)
def main(
    metadata_url: str | None,
    authlib_download_url_format: str | None,
    injector_download_url: str | None,
    output_file: str | None,
    timeout: float | None,
    max_concurrency: int | None,
    verbose: bool,
):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING, format=log_format
    )
    if output_file is None:
        print_usage()
        return

    config = GeneratorConfig(
        metadata_url=metadata_url,
        authlib_download_url_format=authlib_download_url_format,
        injector_download_url=injector_download_url,
        output_file=Path(output_file),
        timeout=timeout,
        max_concurrency=max_concurrency,
    )
    try:
        asyncio.run(generate(config))
    except GeneratorError as e:
        logger.error(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
