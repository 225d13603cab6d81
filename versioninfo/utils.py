"""
Shared utility functions for versioninfo.
"""
import os
import re
from typing import Optional, Mapping, Sequence

from .domain import RepoInfo
from .exit_codes import RepoUrlError

GITURL_REGEX = re.compile(r"^https://github\.com/([^/]+)/(.+)\.git$")


def parse_repo_url(url) -> RepoInfo:
    """
    Parses a GitHub HTTPS clone URL to extract the owner and repository name.

    Only the https://github.com/<owner>/<repo>.git form is supported.

    Args:
        url (str): The GitHub repository URL.

    Returns:
        RepoInfo with owner and repo.

    Raises:
        RepoUrlError: If the URL does not have the expected form.
    """
    match = GITURL_REGEX.match(url) if isinstance(url, str) else None
    if not match:
        raise RepoUrlError(url)
    return RepoInfo(owner=match.group(1), repo=match.group(2))


def get_build_number(env_names: Sequence[str],
                     environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Get the CI build number from the first non-empty environment variable.

    Args:
        env_names: Variable names, in priority order
        environ: Environment mapping (default: os.environ)

    Returns:
        The build number, or None when running outside CI
    """
    if environ is None:
        environ = os.environ
    for name in env_names:
        value = environ.get(name)
        if value:
            return value
    return None
