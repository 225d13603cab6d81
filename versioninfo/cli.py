#!/usr/bin/env python3

import click

from versioninfo import __version__
from versioninfo.commands.current import current_handler
from versioninfo.commands.history import history_handler
from versioninfo.commands.repo import repo_handler, manifest_handler
from versioninfo.commands.show import show_handler
from versioninfo.commands.config import config_cmd


@click.group()
@click.version_option(version=__version__, prog_name='versioninfo')
def cli():
    """versioninfo - Semantic version descriptor for release builds.

    Derives the version being built from git tags and package.json:
    the tagged release at HEAD, or a snapshot of the branch's latest
    release with CI build and commit metadata.
    """
    pass


cli.add_command(current_handler, name='current')
cli.add_command(history_handler, name='history')
cli.add_command(repo_handler, name='repo')
cli.add_command(manifest_handler, name='manifest')
cli.add_command(show_handler, name='show')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
