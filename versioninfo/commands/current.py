"""
Handles the 'current' command for resolving the version being built.
"""

import click

from ..api import create_git_client, create_service, resolve_manifest
from ..cli_utils import standard_command, add_common_options, resolve_table_flag
from ..render import render_current_version


@click.command(name='current')
@add_common_options('cwd', 'table', 'format', 'fields', 'verbose', 'quiet')
@standard_command
def current_handler(cwd, table, progress, config, format=None, **kwargs):
    """Show the version being built.

    \b
    If HEAD is exactly tagged with a release on this branch's line
    (package.json "branchVersion"), that release is reported with the
    code name from the tag message: codename(<name>).
    Otherwise a snapshot version is computed from the latest matching
    release plus the CI build number and the commit hash.

    Examples:

    \b
        versioninfo current                  # 1.2.1-local+sha.abc1234
        versioninfo current --table          # Human-readable table
        versioninfo current -f yaml          # YAML output
        BUILD_NUMBER=42 versioninfo current  # 1.2.1-build.42+sha.abc1234
    """
    manifest = resolve_manifest(cwd, config)
    progress(f"Using {manifest.path}")

    service = create_service(manifest, create_git_client(cwd, config), config)
    version = service.current_version()

    if resolve_table_flag(table, format):
        render_current_version(version)
        return None
    return version.to_dict()
