"""
Handles the 'repo' and 'manifest' commands.
"""

import click

from ..api import resolve_manifest
from ..cli_utils import standard_command, add_common_options
from ..utils import parse_repo_url


@click.command(name='repo')
@add_common_options('cwd', 'format', 'fields', 'verbose', 'quiet')
@standard_command
def repo_handler(cwd, progress, config, **kwargs):
    """Show the GitHub owner and repository from package.json.

    The "repository.url" field must look like
    https://github.com/<owner>/<repo>.git
    """
    manifest = resolve_manifest(cwd, config)
    return parse_repo_url(manifest.repository_url).to_dict()


@click.command(name='manifest')
@add_common_options('cwd', 'format', 'verbose', 'quiet')
@standard_command
def manifest_handler(cwd, progress, config, **kwargs):
    """Show the package.json that versioninfo uses, with its path."""
    return resolve_manifest(cwd, config).to_dict()
