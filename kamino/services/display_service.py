"""Display service for scan results"""
from pathlib import Path
from typing import Dict

from rich.console import Console
from rich.markup import escape

from kamino.constants import ERROR_STYLE, FINDING_STYLE, HEADER_STYLE
from kamino.formatters import INDENT, display_text, format_error, format_findings
from kamino.logging_config import get_logger
from kamino.models.report import RepoReport

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def show_banner(self, root: Path) -> None:
        console.print(f"Kamino scanning repos in {escape(display_text(root))}")

    def show_report(self, report: RepoReport) -> None:
        """Print the findings of one repository.

        The header naming the repository is printed at most once, and only
        when there is something to report.
        """
        header_printed = False

        def print_header_once():
            nonlocal header_printed
            if not header_printed:
                console.print(f"[{HEADER_STYLE}]{escape(display_text(report.path))}:[/{HEADER_STYLE}]")
                header_printed = True

        for line in format_findings(report):
            print_header_once()
            console.print(f"{INDENT}[{FINDING_STYLE}]{escape(display_text(line))}[/{FINDING_STYLE}]")

        if report.error is not None:
            error_console.print(f"[{ERROR_STYLE}]{escape(display_text(report.path))}:[/{ERROR_STYLE}]")
            for line in format_error(report.error):
                error_console.print(f"{INDENT}[{ERROR_STYLE}]{escape(display_text(line))}[/{ERROR_STYLE}]")
        elif not header_printed and self.verbose:
            console.print(f"[dim]{escape(display_text(report.path))}: clean[/dim]")

    def show_halted(self) -> None:
        error_console.print(f"[{ERROR_STYLE}]Scan halted (use --keep-going to continue past errors)[/{ERROR_STYLE}]")

    def show_summary(self, stats: Dict[str, int]) -> None:
        """Print the final summary line."""
        console.print(
            f"Kamino scans complete! "
            f"{stats['scanned']} repos scanned, "
            f"{stats['drifted']} with findings, "
            f"{stats['failed']} failed"
        )
        logger.info(f"Skipped {stats['skipped']} directories that are not repositories")
