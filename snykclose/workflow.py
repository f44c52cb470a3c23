# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Scan, report, confirm, close.

The run moves forward through a fixed sequence of stages and stops early
when nothing matched, when the user declines, or in dry-run mode:

    LOAD_CONFIG -> SCAN -> WRITE_REPORT -> CONFIRM -> CLOSE_ALL

The CSV report is always written before any pull request is touched, so the
user confirms exactly the set that will be closed.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from rich.markup import escape

from snykclose.classes import CloseSummary, MatchedPR, RepositoryTarget
from snykclose.cli.helpers import (
    build_summary_table,
    console,
    print_banner,
    print_error,
    print_step,
    print_success,
)
from snykclose.closer import close_all
from snykclose.config import load_repository_targets
from snykclose.constants import (
    AFFIRMATIVE_ANSWERS,
    CLOSE_DELAY_SECONDS,
    CLOSE_REASON,
    SCAN_DELAY_SECONDS,
)
from snykclose.report import generate_csv
from snykclose.scanner import scan_repositories
from snykclose.utils.github_api_tools import GitHubClient

TOTAL_STEPS = 4
CONFIRM_QUESTION = 'Do you want to proceed with closing these PRs? (yes/no)'


class RunOutcome(Enum):
    """Where the run stopped"""

    NO_MATCHES = 'no_matches'
    DRY_RUN = 'dry_run'
    DECLINED = 'declined'
    CLOSED = 'closed'


@dataclass
class WorkflowResult:
    outcome: RunOutcome
    matches: List[MatchedPR] = field(default_factory=list)
    failed_scans: List[RepositoryTarget] = field(default_factory=list)
    csv_path: Optional[Path] = None
    summary: Optional[CloseSummary] = None


def is_affirmative(answer: Optional[str]) -> bool:
    """Only 'yes' or 'y' (any case) count as consent; anything else declines."""
    if answer is None:
        return False
    return answer.lower() in AFFIRMATIVE_ANSWERS


def run_workflow(
    client: GitHubClient,
    config_path: Union[str, Path],
    csv_path: Union[str, Path],
    ask: Callable[[str], str],
    pace: Callable[[float], None] = time.sleep,
    scan_delay: float = SCAN_DELAY_SECONDS,
    close_delay: float = CLOSE_DELAY_SECONDS,
    reason: str = CLOSE_REASON,
    assume_yes: bool = False,
    dry_run: bool = False,
) -> WorkflowResult:
    """
    Run one scan-and-close pass.

    Args:
        client (GitHubClient): GitHub collaborator
        config_path: Repository config file
        csv_path: Report destination, overwritten
        ask (Callable[[str], str]): Reads the confirmation answer for a question
        pace (Callable[[float], None]): Blocking pause between GitHub calls
        scan_delay (float): Pause between repository scans, in seconds
        close_delay (float): Pause between closures, in seconds
        reason (str): Comment left on each closed PR
        assume_yes (bool): Skip the confirmation prompt
        dry_run (bool): Stop once the report is written

    Returns:
        WorkflowResult: The stage the run stopped at and what it produced

    Raises:
        ConfigError: config file missing or malformed
        OSError: the report could not be written
    """
    print_banner('SNYK PR SCANNER & CLOSER')

    print_step(1, TOTAL_STEPS, 'Reading repository configuration...')
    targets = load_repository_targets(config_path)
    print_success(f'Found {len(targets)} repositories in config')

    print_step(2, TOTAL_STEPS, 'Scanning repositories for Snyk PRs...')
    scan = scan_repositories(client, targets, pace=pace, delay=scan_delay)
    matches = scan.matches
    if scan.failed:
        print_error(f'Failed to scan: {len(scan.failed)} repositor(ies)')
        for target in scan.failed:
            console.print(f'  - {escape(target.full_name)}')

    print_step(3, TOTAL_STEPS, 'Generating CSV report...')
    if not matches:
        if scan.failed:
            print_success('No Snyk PRs found in the repositories that could be scanned')
        else:
            print_success('No Snyk PRs found across all repositories')
        return WorkflowResult(outcome=RunOutcome.NO_MATCHES, failed_scans=scan.failed)

    report_path = generate_csv(matches, csv_path)
    print_success(f'CSV report generated: {escape(str(report_path))}')

    console.print()
    print_banner(f'SUMMARY: Found {len(matches)} Snyk PR(s) to close')
    console.print(build_summary_table(matches))

    if dry_run:
        console.print('\n[yellow]Dry run: no PRs were closed.[/yellow]')
        console.print(f'CSV report is available at: {escape(str(report_path))}')
        return WorkflowResult(
            outcome=RunOutcome.DRY_RUN, matches=matches, failed_scans=scan.failed, csv_path=report_path
        )

    print_step(4, TOTAL_STEPS, 'Confirmation required to close PRs')
    console.print(f'\nYou are about to close {len(matches)} Snyk PR(s).')
    console.print(f'CSV report has been saved to: {escape(str(report_path))}')

    if not assume_yes and not is_affirmative(ask(f'\n{CONFIRM_QUESTION}')):
        console.print()
        print_success('Operation cancelled. No PRs were closed.')
        console.print(f'CSV report is available at: {escape(str(report_path))}')
        return WorkflowResult(
            outcome=RunOutcome.DECLINED, matches=matches, failed_scans=scan.failed, csv_path=report_path
        )

    console.print()
    print_banner('CLOSING SNYK PRs')
    results = close_all(client, matches, reason=reason, pace=pace, delay=close_delay)
    summary = CloseSummary.from_results(results)

    console.print()
    print_banner('COMPLETED')
    print_success(f'Successfully closed: {summary.succeeded} PR(s)')
    if summary.failed > 0:
        print_error(f'Failed to close: {summary.failed} PR(s)')
    if scan.failed:
        print_error(f'Failed to scan: {len(scan.failed)} repositor(ies)')

    return WorkflowResult(
        outcome=RunOutcome.CLOSED,
        matches=matches,
        failed_scans=scan.failed,
        csv_path=report_path,
        summary=summary,
    )
