"""Command-line argument parsing for kamino."""

import argparse
from kamino.__version__ import __version__
from kamino.constants import DEFAULT_REMOTE


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="kamino",
        description="Help manage a bunch of git repo clones by ensuring they are in sync with the remote.",
        epilog="Reports uncommitted changes, stashes, branches ahead/behind their upstream "
        "and differences between .git/hooks and .githooks for every repository directly under DIR.",
    )
    parser.add_argument("dir", metavar="DIR", help="Directory containing the repositories to scan")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"kamino {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--remote",
        default=DEFAULT_REMOTE,
        help=f"Remote fetched before checking branches (default: {DEFAULT_REMOTE})",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the next repository after an error instead of halting",
    )
    parser.add_argument(
        "--skip-branch-errors",
        action="store_true",
        help="Report and skip branches whose ahead/behind can't be computed",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Scan repositories in parallel (output order is unchanged)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers, implies --parallel (default: auto-detect)",
    )

    return parser.parse_args(argv)
