"""Final verdict and summary for a checked manifest."""

from __future__ import annotations

from xxcheck.domain.types import ChecksumReport, VerificationPolicy
from xxcheck.ui.display import CheckDisplay


def resolve_verdict(report: ChecksumReport, policy: VerificationPolicy) -> bool:
    """Fold a report into a single success value.

    A manifest passes when it has at least one properly formatted line,
    every listed file was read and matched, it was read to the end, and
    (in strict mode) no line was improperly formatted.
    """
    return (
        report.n_properly_formatted_lines > 0
        and not report.has_failures
        and (not policy.strict or report.n_improperly_formatted_lines == 0)
        and not report.quit
    )


def display_summary(
    name: str,
    report: ChecksumReport,
    policy: VerificationPolicy,
    display: CheckDisplay,
) -> None:
    """Print the end-of-manifest summary.

    The "no properly formatted lines" diagnostic is printed even in
    status-only mode; the count lines are not.
    """
    if report.n_properly_formatted_lines == 0:
        display.diagnostic(
            f"{name}: no properly formatted XXHASH checksum lines found"
        )
        return

    if policy.status_only:
        return

    if report.n_improperly_formatted_lines:
        display.result(
            f"{report.n_improperly_formatted_lines} "
            "lines are improperly formatted"
        )
    if report.n_open_or_read_failures:
        display.result(
            f"{report.n_open_or_read_failures} "
            "listed files could not be read"
        )
    if report.n_mismatched_checksums:
        display.result(
            f"{report.n_mismatched_checksums} "
            "computed checksums did NOT match"
        )
