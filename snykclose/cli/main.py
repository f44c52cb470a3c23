# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
snykclose CLI - Main entry point

Finds open pull requests opened by the Snyk bot across the repositories
listed in a JSON config file, writes a CSV report of them and, once
confirmed, closes them with an explanatory comment.
"""

import logging
import os
import sys
from typing import Optional

import click
from dotenv import load_dotenv
from rich.markup import escape

from snykclose import __version__
from snykclose.classes import ConfigError
from snykclose.cli.helpers import console, print_error
from snykclose.constants import (
    CLOSE_DELAY_SECONDS,
    CLOSE_REASON,
    DEFAULT_CONFIG_FILE,
    DEFAULT_CSV_FILE,
    GITHUB_TOKEN_ENV,
    SCAN_DELAY_SECONDS,
)
from snykclose.utils.github_api_tools import GitHubClient
from snykclose.utils.logging import setup_logging
from snykclose.workflow import run_workflow

logger = logging.getLogger('snykclose.cli')

EXIT_INTERRUPTED = 130


def prompt_answer(question: str) -> str:
    """Read a free-form answer; an empty line is returned as ''."""
    return click.prompt(question, default='', show_default=False, prompt_suffix=' ')


@click.command(name='snykclose')
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help='Repository config JSON file',
)
@click.option(
    '--output',
    'csv_path',
    type=click.Path(dir_okay=False),
    default=DEFAULT_CSV_FILE,
    show_default=True,
    help='CSV report destination (overwritten)',
)
@click.option('--token', default=None, help=f'GitHub token (defaults to ${GITHUB_TOKEN_ENV})')
@click.option(
    '--scan-delay',
    type=click.FloatRange(min=0),
    default=SCAN_DELAY_SECONDS,
    show_default=True,
    help='Seconds to pause between repository scans',
)
@click.option(
    '--close-delay',
    type=click.FloatRange(min=0),
    default=CLOSE_DELAY_SECONDS,
    show_default=True,
    help='Seconds to pause between PR closures',
)
@click.option('--reason', default=CLOSE_REASON, help='Comment left on each closed PR')
@click.option('--yes', '-y', 'assume_yes', is_flag=True, help='Close without asking for confirmation')
@click.option('--dry-run', is_flag=True, help='Scan and write the report, close nothing')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--log-file', type=click.Path(dir_okay=False), default=None, help='Also write logs to this file')
@click.version_option(version=__version__, prog_name='snykclose')
def cli(
    config_path: str,
    csv_path: str,
    token: Optional[str],
    scan_delay: float,
    close_delay: float,
    reason: str,
    assume_yes: bool,
    dry_run: bool,
    verbose: bool,
    log_file: Optional[str],
):
    """Scan repositories for Snyk PRs, report them to CSV, and close them.

    \b
    Examples:
        snykclose                            # Interactive run using ./repo.json
        snykclose --dry-run                  # Report only
        snykclose --config repos.json --yes  # No prompt
    """
    try:
        setup_logging(verbose=verbose, log_file=log_file)

        token = token or os.environ.get(GITHUB_TOKEN_ENV)
        if not token:
            logger.warning(f'{GITHUB_TOKEN_ENV} is not set; GitHub requests will likely fail')

        client = GitHubClient(token)
        run_workflow(
            client,
            config_path=config_path,
            csv_path=csv_path,
            ask=prompt_answer,
            scan_delay=scan_delay,
            close_delay=close_delay,
            reason=reason,
            assume_yes=assume_yes,
            dry_run=dry_run,
        )
    except ConfigError as e:
        print_error(escape(str(e)))
        sys.exit(1)
    except OSError as e:
        print_error(f'File error: {escape(str(e))}')
        sys.exit(1)
    except (KeyboardInterrupt, click.Abort):
        console.print('\n[yellow]Interrupted.[/yellow]')
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.exception(f'Unhandled error: {e}')
        sys.exit(1)


def main():
    """Main entry point for the CLI"""
    load_dotenv()
    cli()


if __name__ == '__main__':
    main()
