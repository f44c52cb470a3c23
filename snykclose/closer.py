# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import time
from typing import Callable, List, Sequence

from snykclose.classes import CloseResult, MatchedPR, RepositoryTarget
from snykclose.constants import CLOSE_DELAY_SECONDS, CLOSE_REASON
from snykclose.utils.github_api_tools import GitHubClient

logger = logging.getLogger(__name__)


def close_pr(client: GitHubClient, target: RepositoryTarget, pr_number: int, reason: str = CLOSE_REASON) -> bool:
    """
    Close a pull request and leave a comment explaining why.

    The state change goes first. If the comment then fails the PR stays
    closed without a comment; nothing is rolled back or retried.

    Args:
        client (GitHubClient): GitHub collaborator
        target (RepositoryTarget): Repository owning the PR
        pr_number (int): PR number
        reason (str): Comment body

    Returns:
        bool: True when both calls succeeded
    """
    try:
        client.set_pull_request_state(target.owner, target.name, pr_number, state='closed')
        client.create_issue_comment(target.owner, target.name, pr_number, reason)
    except Exception as e:
        logger.error(f'✗ Failed to close PR #{pr_number} in {target.full_name}: {e}')
        return False

    logger.info(f'✓ Closed PR #{pr_number} in {target.full_name}')
    return True


def close_all(
    client: GitHubClient,
    matches: Sequence[MatchedPR],
    reason: str = CLOSE_REASON,
    pace: Callable[[float], None] = time.sleep,
    delay: float = CLOSE_DELAY_SECONDS,
) -> List[CloseResult]:
    """Close every matched PR in order, pausing between closures."""
    results: List[CloseResult] = []

    for index, match in enumerate(matches):
        if index > 0:
            pace(delay)
        succeeded = close_pr(client, match.target, match.pr.number, reason)
        results.append(CloseResult(matched=match, succeeded=succeeded))

    return results
