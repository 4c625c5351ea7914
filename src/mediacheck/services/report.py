"""Aggregation of check results into a run verdict."""

from collections.abc import Iterable

from mediacheck.models import AbsoluteURL, Failure, ValidationReport


def aggregate(
    page_url: AbsoluteURL,
    media_urls: Iterable[AbsoluteURL],
    failures: Iterable[Failure],
) -> ValidationReport:
    """Combine the checked URLs and their failures into a report.

    Failures keep the order in which they were discovered.
    """
    return ValidationReport(
        page_url=page_url,
        media_urls=list(media_urls),
        failures=list(failures),
    )


def format_failure(failure: Failure) -> str:
    """Render a failure as a tab-separated line for terminal output."""
    return f"{failure.url}\t{failure.kind.value}\t{failure.detail}"
