"""Tests for the per-manifest verification session."""

import io
import logging

import pytest
import xxhash

from xxcheck.core.line_reader import LineReader
from xxcheck.core.session import VerificationSession
from xxcheck.domain.types import BitWidth, VerificationPolicy

XXH32_EMPTY = "02cc5d05"
XXH64_EMPTY = "ef46db3751d8e999"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from tmp_path so manifests can use relative names."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run_session(manifest: bytes, display, policy=None, **kwargs):
    session = VerificationSession(
        "SUMS",
        io.BytesIO(manifest),
        policy or VerificationPolicy(),
        display=display,
        **kwargs,
    )
    return session.run()


def test_single_matching_line(workdir, make_file, display) -> None:
    make_file("empty.txt")

    report = run_session(f"{XXH32_EMPTY}  empty.txt\n".encode(), display)

    assert report.n_properly_formatted_lines == 1
    assert report.n_mismatched_checksums == 0
    assert report.n_open_or_read_failures == 0
    assert report.xxh_bits is BitWidth.XXH32
    assert not report.quit
    assert display.results == ["empty.txt: OK"]
    assert display.diagnostics == []


def test_mismatch_line(workdir, make_file, display) -> None:
    make_file("one.txt", b"1")

    report = run_session(f"{XXH32_EMPTY}  one.txt\n".encode(), display)

    assert report.n_mismatched_checksums == 1
    assert display.results == ["one.txt: FAILED"]


def test_missing_file_reports_open_failure(workdir, display) -> None:
    report = run_session(
        f"{XXH64_EMPTY}  gone.bin\n".encode(), display
    )

    assert report.n_properly_formatted_lines == 1
    assert report.n_open_or_read_failures == 1
    assert display.results == ["SUMS : 1: FAILED open or read gone.bin"]


def test_open_failure_uses_line_number(workdir, make_file, display) -> None:
    make_file("a.txt")
    manifest = (
        f"{XXH32_EMPTY}  a.txt\n"
        "garbage\n"
        f"{XXH32_EMPTY}  missing.txt\n"
    ).encode()

    run_session(manifest, display)

    assert display.results == [
        "a.txt: OK",
        "SUMS : 3: FAILED open or read missing.txt",
    ]


def test_malformed_lines_are_counted_and_skipped(
    workdir, make_file, display
) -> None:
    make_file("a.txt")
    manifest = (
        "not a checksum line\n"
        f"{XXH32_EMPTY} a.txt\n"
        f"{XXH32_EMPTY}  a.txt\n"
    ).encode()

    report = run_session(manifest, display)

    assert report.n_improperly_formatted_lines == 2
    assert report.n_properly_formatted_lines == 1
    assert display.results == ["a.txt: OK"]
    assert display.diagnostics == []


def test_warn_reports_malformed_lines(workdir, display) -> None:
    run_session(
        b"bad line\n\n", display, VerificationPolicy(warn=True)
    )

    assert display.diagnostics == [
        "SUMS : 1: improperly formatted XXHASH checksum line",
        "SUMS : 2: improperly formatted XXHASH checksum line",
    ]


def test_warn_is_independent_of_status_only(workdir, display) -> None:
    run_session(
        b"bad line\n",
        display,
        VerificationPolicy(warn=True, status_only=True),
    )

    assert display.diagnostics == [
        "SUMS : 1: improperly formatted XXHASH checksum line"
    ]


def test_mixed_widths_are_rejected_per_line(
    workdir, make_file, display
) -> None:
    make_file("a.txt")
    manifest = (
        f"{XXH32_EMPTY}  a.txt\n"
        f"{XXH64_EMPTY}  a.txt\n"
        f"{XXH32_EMPTY}  a.txt\n"
    ).encode()

    report = run_session(manifest, display, VerificationPolicy(warn=True))

    assert report.xxh_bits is BitWidth.XXH32
    assert report.n_mixed_format_lines == 1
    assert report.n_improperly_formatted_lines == 1
    assert report.n_properly_formatted_lines == 2
    assert display.results == ["a.txt: OK", "a.txt: OK"]
    assert display.diagnostics == [
        "SUMS : 2: improperly formatted XXHASH checksum line (XXH32/64)"
    ]


def test_width_set_by_first_well_formed_line(
    workdir, make_file, display
) -> None:
    make_file("a.txt")
    manifest = (
        "junk\n"
        f"{XXH64_EMPTY}  a.txt\n"
        f"{XXH32_EMPTY}  a.txt\n"
    ).encode()

    report = run_session(manifest, display)

    assert report.xxh_bits is BitWidth.XXH64
    assert report.n_mixed_format_lines == 1
    assert report.n_improperly_formatted_lines == 2


def test_quiet_suppresses_ok_only(workdir, make_file, display) -> None:
    make_file("a.txt")
    make_file("b.txt", b"b")
    manifest = (
        f"{XXH32_EMPTY}  a.txt\n"
        f"{XXH32_EMPTY}  b.txt\n"
    ).encode()

    run_session(manifest, display, VerificationPolicy(quiet=True))

    assert display.results == ["b.txt: FAILED"]


def test_status_only_suppresses_results(workdir, make_file, display) -> None:
    make_file("a.txt")
    make_file("b.txt", b"b")
    manifest = (
        f"{XXH32_EMPTY}  a.txt\n"
        f"{XXH32_EMPTY}  b.txt\n"
        f"{XXH32_EMPTY}  c.txt\n"
    ).encode()

    report = run_session(
        manifest, display, VerificationPolicy(status_only=True)
    )

    assert report.n_mismatched_checksums == 1
    assert report.n_open_or_read_failures == 1
    assert display.results == []


def test_too_long_line_aborts_without_losing_counts(
    workdir, make_file, display
) -> None:
    make_file("a.txt")
    manifest = (
        f"{XXH32_EMPTY}  a.txt\n".encode()
        + b"x" * 200
        + b"\n"
        + f"{XXH32_EMPTY}  a.txt\n".encode()
    )

    report = run_session(
        manifest,
        display,
        line_reader=LineReader(initial_length=16, max_length=64),
    )

    assert report.quit
    assert report.n_properly_formatted_lines == 1
    assert display.results == ["a.txt: OK"]
    assert display.diagnostics == ["SUMS : 2: too long line"]


def test_out_of_memory_aborts(workdir, display) -> None:
    class FailingStream(io.BytesIO):
        def readline(self, size=-1):
            raise MemoryError

    session = VerificationSession(
        "SUMS", FailingStream(), VerificationPolicy(), display=display
    )
    report = session.run()

    assert report.quit
    assert display.diagnostics == ["SUMS : 1: out of memory"]


def test_line_counter_ceiling_aborts(workdir, make_file, display) -> None:
    make_file("a.txt")
    manifest = f"{XXH32_EMPTY}  a.txt\n".encode() * 3

    report = run_session(manifest, display, max_line_number=2)

    assert report.quit
    assert report.n_properly_formatted_lines == 2
    assert display.diagnostics == ["SUMS : too many checksum lines"]


def test_filenames_with_spaces(workdir, make_file, display) -> None:
    make_file("my file.txt", b"content")
    digest = xxhash.xxh64_hexdigest(b"content")

    report = run_session(f"{digest}  my file.txt".encode(), display)

    assert report.n_properly_formatted_lines == 1
    assert display.results == ["my file.txt: OK"]


def test_empty_manifest(display) -> None:
    report = run_session(b"", display)

    assert report.n_properly_formatted_lines == 0
    assert not report.quit
    assert display.results == []


def test_run_resets_report(workdir, make_file, display) -> None:
    make_file("a.txt")
    session = VerificationSession(
        "SUMS",
        io.BytesIO(f"{XXH32_EMPTY}  a.txt\n".encode()),
        VerificationPolicy(),
        display=display,
    )
    session.run()
    session.stream = io.BytesIO(b"")

    assert session.run().n_properly_formatted_lines == 0


def test_concrete_empty_file_scenario(
    workdir, make_file, display, length_hasher
) -> None:
    make_file("emptyfile.txt")

    report = run_session(
        b"d41d8cd9  emptyfile.txt\n", display, hasher_factory=length_hasher
    )

    assert report.n_mismatched_checksums == 0
    assert display.results == ["emptyfile.txt: OK"]


def test_concrete_one_byte_file_scenario(
    workdir, make_file, display, length_hasher
) -> None:
    make_file("emptyfile.txt", b"!")

    report = run_session(
        b"d41d8cd9  emptyfile.txt\n", display, hasher_factory=length_hasher
    )

    assert report.n_mismatched_checksums == 1
    assert display.results == ["emptyfile.txt: FAILED"]


def test_abort_is_reported_once(workdir, display, caplog) -> None:
    manifest = b"0" * 40000 + b"\n"

    report = run_session(
        manifest, display, VerificationPolicy(status_only=True)
    )

    assert report.quit
    assert display.diagnostics == ["SUMS : 1: too long line"]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
