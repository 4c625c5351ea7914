"""Command-line entry point for mediacheck."""

import asyncio
import sys

import click

from mediacheck import __version__
from mediacheck.clients.fetcher import MediaFetcher
from mediacheck.config import LOG_FORMATS, get_settings
from mediacheck.errors import MediaCheckError
from mediacheck.models import ValidationReport
from mediacheck.services.orchestrator import ValidationRun
from mediacheck.services.report import format_failure
from mediacheck.utils.logging import get_logger, setup_logging


async def _run(url: str, timeout_ms: int, follow_redirects: bool) -> ValidationReport:
    async with MediaFetcher(follow_redirects=follow_redirects) as fetcher:
        return await ValidationRun(fetcher).run(url, timeout_ms)


@click.command()
@click.version_option(version=__version__)
@click.option("--url", required=True, help="URL of the page to check")
@click.option("--timeout", "timeout_ms", type=click.IntRange(min=1), default=None, help="Timeout (ms)")
@click.option(
    "--log-level",
    type=click.Choice(["info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Log level: info/warn/error",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    default=None,
    help="Log format: text or json",
)
def main(
    url: str,
    timeout_ms: int | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Check that every image, script, stylesheet and frame on a page loads."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, log_format or settings.log_format)
    logger = get_logger(__name__)

    try:
        report = asyncio.run(
            _run(url, timeout_ms or settings.timeout_ms, settings.follow_redirects)
        )
    except MediaCheckError as e:
        logger.error("Validation aborted", error_kind=e.kind.value, reason=e.reason)
        click.echo(f"{e.kind.value}: {e.reason}", err=True)
        sys.exit(1)

    if report.ok:
        logger.info("OK", page=str(report.page_url), media_checked=report.media_checked)
        click.echo("OK")
        return

    for failure in report.failures:
        logger.error(
            "Error fetching media",
            url=str(failure.url),
            error_kind=failure.kind.value,
            error=failure.detail,
        )
        click.echo(format_failure(failure))
    logger.error("NOT OK", failed=len(report.failures), media_checked=report.media_checked)
    click.echo("NOT OK")
    sys.exit(1)


if __name__ == "__main__":
    main()
