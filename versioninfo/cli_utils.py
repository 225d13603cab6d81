"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import logging
import sys
import click
from functools import wraps
from typing import Any, Dict, Optional
from .config import load_config
from .progress import get_progress
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)
from .format_utils import format_output, get_format_from_env, FORMATS


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Progress reporting on stderr
    - Clean data output on stdout in the requested format
    - Debug logging with --verbose/-v
    - --quiet/-q to suppress data output
    - Consistent error handling and exit codes

    The wrapped command receives ``progress`` and ``config`` keyword
    arguments and returns a dict, a list of dicts, or None when it has
    written its own output (tables).
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get('verbose', False)
        quiet = kwargs.get('quiet', False)
        output_format = kwargs.get('format', None)
        fields_str = kwargs.get('fields', None)
        fields = fields_str.split(',') if fields_str else None

        if output_format is None:
            output_format = get_format_from_env('jsonl')

        progress = get_progress(enabled=verbose or None)
        kwargs['progress'] = progress

        try:
            config = load_config()
            if verbose:
                logging.getLogger("versioninfo").setLevel(logging.DEBUG)
            kwargs['config'] = config

            result = func(*args, **kwargs)

            if quiet or result is None:
                pass
            else:
                records = result if isinstance(result, (list, tuple)) else [result]
                for line in format_output(records, output_format, fields):
                    print(line, flush=True)

            sys.exit(SUCCESS)

        except KeyboardInterrupt:
            progress.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            progress.error(str(e))
            if not quiet:
                error_obj = {
                    "error": str(e),
                    "type": type(e).__name__,
                    "exit_code": e.exit_code
                }
                print(json.dumps(error_obj, ensure_ascii=False), flush=True)
            sys.exit(e.exit_code)
        except Exception as e:
            progress.error(f"Command failed: {e}")
            if not quiet:
                error_obj = {
                    "error": str(e),
                    "type": type(e).__name__
                }
                print(json.dumps(error_obj, ensure_ascii=False), flush=True)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def resolve_table_flag(table: Optional[bool], output_format: Optional[str]) -> bool:
    """Tables are used on interactive terminals unless a format was requested."""
    if table is not None:
        return table
    if output_format is not None:
        return False
    return sys.stdout.isatty()


# Standard options that many commands share
common_options: Dict[str, Any] = {
    'cwd': click.option('-C', '--cwd', type=click.Path(exists=True, file_okay=False),
                        default=None,
                        help='Directory to start the package.json search from (default: current)'),
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Force progress output and enable debug logging'),
    'quiet': click.option('-q', '--quiet', is_flag=True,
                          help='Suppress data output, show only progress'),
    'format': click.option('-f', '--format',
                           type=click.Choice(list(FORMATS)),
                           help='Output format (default: jsonl, or from VERSIONINFO_FORMAT env)'),
    'fields': click.option('--fields',
                           help='Comma-separated list of fields to include (for CSV/TSV)'),
    'table': click.option('--table/--no-table', default=None,
                          help='Display as formatted table (auto-detected by default)'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'quiet')
        def my_command(verbose, quiet):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
