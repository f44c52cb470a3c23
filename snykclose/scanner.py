# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Open pull request discovery and Snyk classification."""

import logging
import time
from typing import Callable, List, Sequence

from snykclose.classes import MatchedPR, PullRequest, RepositoryTarget, ScanResult
from snykclose.constants import (
    PR_PAGE_SIZE,
    SCAN_DELAY_SECONDS,
    SNYK_BOT_LOGIN,
    SNYK_KEYWORD,
    SNYK_TITLE_TAG,
)
from snykclose.utils.github_api_tools import GitHubClient

logger = logging.getLogger(__name__)


def fetch_open_prs(client: GitHubClient, target: RepositoryTarget, per_page: int = PR_PAGE_SIZE) -> List[PullRequest]:
    """
    Page through every open pull request of a repository.

    Pagination stops at the first empty page. Collaborator errors propagate.

    Args:
        client (GitHubClient): GitHub collaborator
        target (RepositoryTarget): Repository to scan
        per_page (int): Page size

    Returns:
        List[PullRequest]: Open PRs in the order GitHub returned them
    """
    prs: List[PullRequest] = []
    page = 1

    while True:
        batch = client.list_open_pull_requests(target.owner, target.name, page=page, per_page=per_page)
        if not batch:
            break
        prs.extend(batch)
        page += 1

    return prs


def get_all_open_prs(client: GitHubClient, target: RepositoryTarget, per_page: int = PR_PAGE_SIZE) -> List[PullRequest]:
    """Like fetch_open_prs, but a failure is logged and yields an empty list."""
    try:
        return fetch_open_prs(client, target, per_page=per_page)
    except Exception as e:
        logger.error(f'Error fetching PRs for {target.full_name}: {e}')
        return []


def is_snyk_pr(pr: PullRequest) -> bool:
    """Heuristic match on title and author; false positives are accepted."""
    title = pr.title.lower()
    username = pr.author_login.lower()

    return (
        SNYK_KEYWORD in title
        or SNYK_TITLE_TAG in title
        or username == SNYK_BOT_LOGIN
        or SNYK_KEYWORD in username
    )


def scan_repositories(
    client: GitHubClient,
    targets: Sequence[RepositoryTarget],
    pace: Callable[[float], None] = time.sleep,
    delay: float = SCAN_DELAY_SECONDS,
) -> ScanResult:
    """Scan each repository in order and collect the Snyk PRs found.

    A repository whose scan fails is logged, recorded in ``failed`` and
    skipped; the remaining repositories are still scanned.
    """
    result = ScanResult()

    for index, target in enumerate(targets):
        if index > 0:
            pace(delay)

        logger.info(f'Checking {target.full_name}...')
        try:
            prs = fetch_open_prs(client, target)
        except Exception as e:
            logger.error(f'Error fetching PRs for {target.full_name}: {e}')
            result.failed.append(target)
            continue

        if not prs:
            logger.info('  No open PRs found')
            continue

        snyk_prs = [pr for pr in prs if is_snyk_pr(pr)]
        if not snyk_prs:
            logger.info(f'  Found {len(prs)} open PR(s), but no Snyk PRs')
            continue

        logger.info(f'  Found {len(snyk_prs)} Snyk PR(s) out of {len(prs)} open PR(s)')
        for pr in snyk_prs:
            logger.info(f'    - PR #{pr.number}: {pr.title}')
            result.matches.append(MatchedPR(target=target, pr=pr))

    return result
