"""
Handles the 'show' command, which reports everything at once.
"""

import click

from ..api import create
from ..cli_utils import standard_command, add_common_options


@click.command(name='show')
@add_common_options('cwd', 'format', 'verbose', 'quiet')
@standard_command
def show_handler(cwd, progress, config, **kwargs):
    """Show package, current version, released versions and repository.

    \b
    Output keys:
        package           The package.json contents
        currentVersion    Tagged release or snapshot being built
        previousVersions  Released versions, oldest first
        gitRepoInfo       GitHub owner and repository
    """
    info = create(cwd=cwd, config=config)
    progress.success(f"{info.repo_info.owner}/{info.repo_info.repo} {info.current_version.full}")
    return info.to_dict()
