from unittest.mock import patch

import pytest

from xxcheck.cli.parser import CLIParser


@pytest.fixture
def cli_parser() -> CLIParser:
    """Fixture providing a CLIParser instance."""
    return CLIParser(prog="xxcheck")


def test_no_arguments(cli_parser):
    with patch("sys.argv", ["xxcheck"]):
        args = cli_parser.parse_args()
        assert args.manifests == []
        assert not args.strict
        assert not args.status
        assert not args.quiet
        assert not args.warn
        assert not args.little_endian
        assert not args.version
        assert args.log_level is None


def test_manifests_and_flags(cli_parser):
    args = cli_parser.parse_args(
        ["-c", "--strict", "--status", "-q", "-w", "a.xxh32", "-", "b.xxh64"]
    )
    assert args.check
    assert args.strict
    assert args.status
    assert args.quiet
    assert args.warn
    assert args.manifests == ["a.xxh32", "-", "b.xxh64"]


def test_long_option_names(cli_parser):
    args = cli_parser.parse_args(["--quiet", "--warn", "--check", "SUMS"])
    assert args.quiet
    assert args.warn
    assert args.check
    assert args.manifests == ["SUMS"]


def test_little_endian_flag(cli_parser):
    args = cli_parser.parse_args(["--little-endian", "SUMS"])
    assert args.little_endian


def test_version_flag(cli_parser):
    assert cli_parser.parse_args(["-V"]).version
    assert cli_parser.parse_args(["--version"]).version


def test_log_level_is_case_insensitive(cli_parser):
    args = cli_parser.parse_args(["--log-level", "debug", "SUMS"])
    assert args.log_level == "DEBUG"


def test_invalid_log_level_rejected(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["--log-level", "chatty"])


def test_unknown_option_rejected(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["--bogus"])


def test_print_usage_error(cli_parser, capsys):
    cli_parser.print_usage_error()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Wrong parameters\nusage: xxcheck")
