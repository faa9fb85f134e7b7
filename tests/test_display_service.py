"""Tests for printing scan results"""
from pathlib import Path
from unittest.mock import patch

import pytest

from kamino.exceptions import FetchError
from kamino.models.branch import AheadBehind
from kamino.models.hook import Hook, HookState
from kamino.models.report import RepoReport
from kamino.services.display_service import DisplayService


@pytest.fixture
def consoles():
    """Patch both consoles and yield (console, error_console) mocks."""
    with patch("kamino.services.display_service.console") as console, \
            patch("kamino.services.display_service.error_console") as error_console:
        yield console, error_console


def printed(mock_console):
    return [call.args[0] for call in mock_console.print.call_args_list]


class TestShowReport:
    """Test output for a single repository."""

    def test_header_printed_once(self, consoles):
        console, _ = consoles
        report = RepoReport(
            path=Path("repos/app"),
            has_uncommitted=True,
            stash_count=1,
            branches=[AheadBehind(2, 0, "main", "origin/main")],
            hooks=[Hook("pre-push", HookState.IN_REPO_ONLY)],
        )

        DisplayService().show_report(report)

        lines = printed(console)
        assert len(lines) == 5
        assert sum(str(Path("repos/app")) in line for line in lines) == 1
        assert str(Path("repos/app")) in lines[0]
        assert "Has uncommitted changes" in lines[1]
        assert "Has 1 stashed changes" in lines[2]
        assert "Branch main is ahead of origin/main by 2 commits" in lines[3]
        assert 'Hook "pre-push" only appears in .githooks' in lines[4]

    def test_clean_repo_prints_nothing(self, consoles):
        console, error_console = consoles

        DisplayService().show_report(RepoReport(path=Path("repos/app")))

        console.print.assert_not_called()
        error_console.print.assert_not_called()

    def test_clean_repo_verbose(self, consoles):
        console, _ = consoles

        DisplayService(verbose=True).show_report(RepoReport(path=Path("repos/app")))

        assert "clean" in printed(console)[0]

    def test_error(self, consoles):
        """Errors go to stderr after the findings collected so far."""
        console, error_console = consoles
        report = RepoReport(
            path=Path("repos/app"), has_uncommitted=True, error=FetchError("origin", "timed out")
        )

        DisplayService().show_report(report)

        assert len(printed(console)) == 2
        errors = printed(error_console)
        assert str(Path("repos/app")) in errors[0]
        assert "Error: failed to fetch origin: timed out" in errors[1]

    def test_undecodable_names(self, consoles):
        """Undecodable bytes in paths and hook names are printed escaped."""
        console, _ = consoles
        undecodable = b"\xff".decode("utf-8", errors="surrogateescape")
        report = RepoReport(
            path=Path(f"repos/app{undecodable}"),
            hooks=[Hook(f"pre{undecodable}commit", HookState.ACTIVE_ONLY)],
        )

        DisplayService().show_report(report)

        lines = printed(console)
        assert "app\\xff" in lines[0]
        assert 'Hook "pre\\xffcommit"' in lines[1]
        for line in lines:
            line.encode("utf-8")

    def test_markup_in_names_is_escaped(self, consoles):
        console, _ = consoles
        report = RepoReport(path=Path("repos/app"), hooks=[Hook("[bold]x", HookState.ACTIVE_ONLY)])

        DisplayService().show_report(report)

        assert "\\[bold]x" in printed(console)[1]


class TestShowBannerAndSummary:
    """Test the lines printed around the scan."""

    def test_banner(self, consoles):
        console, _ = consoles

        DisplayService().show_banner(Path("/srv/repos"))

        assert printed(console) == [f"Kamino scanning repos in {Path('/srv/repos')}"]

    def test_summary(self, consoles):
        console, _ = consoles

        DisplayService().show_summary({"scanned": 3, "drifted": 1, "failed": 0, "skipped": 2})

        assert printed(console) == [
            "Kamino scans complete! 3 repos scanned, 1 with findings, 0 failed"
        ]

    def test_halted(self, consoles):
        _, error_console = consoles

        DisplayService().show_halted()

        assert "--keep-going" in printed(error_console)[0]
