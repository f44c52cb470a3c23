# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared console helpers for snykclose output
"""

from collections import OrderedDict
from typing import Dict, Sequence

from rich.console import Console
from rich.table import Table

from snykclose.classes import MatchedPR

BANNER_WIDTH = 60

console = Console()


def print_success(message: str) -> None:
    """Print a standardized success message."""
    console.print(f'[green]✓[/green] {message}')


def print_error(message: str) -> None:
    """Print a standardized error message."""
    console.print(f'[red]✗[/red] {message}')


def print_banner(title: str) -> None:
    console.print('=' * BANNER_WIDTH)
    console.print(f'[bold]{title}[/bold]')
    console.print('=' * BANNER_WIDTH)


def print_step(step: int, total: int, message: str) -> None:
    console.print(f'\n[bold cyan][{step}/{total}][/bold cyan] {message}')


def count_by_repository(matches: Sequence[MatchedPR]) -> Dict[str, int]:
    """Count matches per owner/repo, in first-seen order."""
    counts: Dict[str, int] = OrderedDict()
    for match in matches:
        key = match.target.full_name
        counts[key] = counts.get(key, 0) + 1
    return counts


def build_summary_table(matches: Sequence[MatchedPR]) -> Table:
    table = Table(show_header=True, header_style='bold magenta', title='Snyk PRs by repository')
    table.add_column('Repository', style='cyan')
    table.add_column('PRs', style='green', justify='right')

    for repository, count in count_by_repository(matches).items():
        table.add_row(repository, f'{count} PR(s)')
    return table
