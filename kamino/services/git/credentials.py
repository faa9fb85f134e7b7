"""Credential handling for fetches from authenticated remotes.

git itself resolves credentials through the credential helper configured in
the default/global git configuration. That helper protocol only exchanges a
username and password. Interactive sources (terminal prompts, askpass
programs, credential manager GUIs) are switched off, so a fetch that needs
anything else fails instead of hanging on a prompt.
"""

import configparser
from typing import Dict, Optional

import git

from kamino.constants import NON_INTERACTIVE_GIT_ENV
from kamino.logging_config import get_logger

logger = get_logger(__name__)


def credential_environment() -> Dict[str, str]:
    """Environment overrides for network git commands."""
    return dict(NON_INTERACTIVE_GIT_ENV)


def configured_credential_helper(repo: git.Repo) -> Optional[str]:
    """Return the credential helper git would use for this repository, if any.

    Repository-level configuration wins over the global one, like git does.
    """
    for level in ("repository", "global", "system"):
        try:
            reader = repo.config_reader(level)
            if reader.has_option("credential", "helper"):
                return str(reader.get_value("credential", "helper"))
        except (OSError, ValueError, configparser.Error) as e:
            logger.debug(f"Could not read {level} git config: {e}")
    return None
