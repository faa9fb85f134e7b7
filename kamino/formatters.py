"""Formatting of scan findings as display text"""

from typing import List, Optional

from kamino.constants import (
    ACTIVE_HOOKS_LABEL,
    IN_REPO_HOOKS_LABEL,
    UNNAMED_BRANCH,
    UNNAMED_UPSTREAM,
)
from kamino.exceptions import AheadBehindError
from kamino.models.branch import AheadBehind
from kamino.models.hook import Hook, HookState
from kamino.models.report import RepoReport

INDENT = "    "


def display_text(value) -> str:
    """Render a name or path for the console.

    Names read from disk may carry undecodable bytes as surrogate escapes,
    which can't be written to a stream. Those bytes are shown as \\xNN.
    """
    text = str(value)
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


HOOK_STATE_MESSAGES = {
    HookState.ACTIVE_ONLY: f"only appears in {ACTIVE_HOOKS_LABEL}",
    HookState.IN_REPO_ONLY: f"only appears in {IN_REPO_HOOKS_LABEL}",
    HookState.MISMATCH: f"is different in {ACTIVE_HOOKS_LABEL} and {IN_REPO_HOOKS_LABEL}",
}


def format_uncommitted() -> str:
    return "Has uncommitted changes"


def format_stashed(count: int) -> str:
    return f"Has {count} stashed changes"


def format_ahead_behind(ahead_behind: AheadBehind) -> List[str]:
    """
    Format the non-zero deltas of a branch.

    Args:
        ahead_behind: Result for one branch

    Returns:
        Zero, one or two lines ("ahead" before "behind")
    """
    if not ahead_behind.has_upstream:
        return []

    branch = ahead_behind.branch_name or UNNAMED_BRANCH
    upstream = ahead_behind.upstream_name or UNNAMED_UPSTREAM
    lines = []
    if ahead_behind.ahead > 0:
        lines.append(f"Branch {branch} is ahead of {upstream} by {ahead_behind.ahead} commits")
    if ahead_behind.behind > 0:
        lines.append(f"Branch {branch} is behind {upstream} by {ahead_behind.behind} commits")
    return lines


def format_hook(hook: Hook) -> Optional[str]:
    """Format a hook finding, or None for a hook that is in sync."""
    message = HOOK_STATE_MESSAGES.get(hook.state)
    if message is None:
        return None
    return f'Hook "{hook.name}" {message}'


def format_branch_error(error: AheadBehindError) -> str:
    return f"Skipped branch {error.branch or UNNAMED_BRANCH}: {error.message}"


def format_findings(report: RepoReport) -> List[str]:
    """
    Format every finding of a report, in check order.

    Args:
        report: Scan result of one repository

    Returns:
        Display lines, without indentation
    """
    lines = []
    if report.has_uncommitted:
        lines.append(format_uncommitted())
    if report.stash_count > 0:
        lines.append(format_stashed(report.stash_count))
    for ahead_behind in sorted(report.branches, key=lambda b: b.branch_name or ""):
        lines.extend(format_ahead_behind(ahead_behind))
    for error in report.branch_errors:
        lines.append(format_branch_error(error))
    for hook in report.hooks:
        line = format_hook(hook)
        if line is not None:
            lines.append(line)
    return lines


def format_error(error: BaseException) -> List[str]:
    """Format an error and its direct cause."""
    lines = [f"Error: {error}"]
    cause = error.__cause__
    if cause is not None:
        cause_text = str(cause).strip() or cause.__class__.__name__
        lines.append(f"Caused by: {cause_text}")
    return lines
