"""
Handles the 'history' command for listing released versions.
"""

import click

from ..api import create_git_client, create_service, resolve_manifest
from ..cli_utils import standard_command, add_common_options, resolve_table_flag
from ..render import render_history_table


@click.command(name='history')
@click.option('--stable', is_flag=True, help='Only list stable releases')
@click.option('--limit', type=click.IntRange(min=1), default=None,
              help='Only list the N most recent releases')
@add_common_options('cwd', 'table', 'format', 'fields', 'verbose', 'quiet')
@standard_command
def history_handler(stable, limit, cwd, table, progress, config, format=None, **kwargs):
    """List released versions found in git tags, oldest first.

    \b
    Tags that are not semantic versions are ignored. Each release is
    annotated with whether it is stable and where its docs live.

    Examples:

    \b
        versioninfo history                  # All releases as JSONL
        versioninfo history --stable         # Stable releases only
        versioninfo history --limit 5        # Five most recent releases
        versioninfo history -f csv --fields version,isStable
    """
    manifest = resolve_manifest(cwd, config)
    service = create_service(manifest, create_git_client(cwd, config), config)

    versions = service.previous_versions()
    progress(f"Found {len(versions)} released versions")

    if stable:
        versions = [v for v in versions if v.is_stable]
    if limit:
        versions = versions[-limit:]

    if resolve_table_flag(table, format):
        render_history_table(versions)
        return None
    return [v.to_dict() for v in versions]
