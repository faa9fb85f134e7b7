"""Shared constants for kamino."""

DEFAULT_REMOTE = "origin"

# Hook directories, relative to the repository metadata dir (.git)
ACTIVE_HOOKS_DIR = "hooks"
IN_REPO_HOOKS_DIR = "../.githooks"

# Display names for the two hook locations
ACTIVE_HOOKS_LABEL = ".git/hooks"
IN_REPO_HOOKS_LABEL = ".githooks"

# Extension of the disabled example hooks git ships
SAMPLE_EXTENSION = "sample"

# Placeholders used when a ref name has no text form
UNNAMED_BRANCH = "(unnamed)"
UNNAMED_UPSTREAM = "upstream"

# Environment for git commands that must never prompt. Credentials can then
# only come from the configured credential helper.
NON_INTERACTIVE_GIT_ENV = {
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_ASKPASS": "",
    "SSH_ASKPASS": "",
    "GCM_INTERACTIVE": "never",
}

# Read-only git commands should not refresh the index on disk
READ_ONLY_GIT_ENV = {
    "GIT_OPTIONAL_LOCKS": "0",
}

# Colors (Rich color names)
HEADER_STYLE = "bold"
FINDING_STYLE = "yellow"
ERROR_STYLE = "red"
