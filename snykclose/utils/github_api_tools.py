# The MIT License (MIT)
# Copyright © 2025 Entrius
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from snykclose.classes import GitHubAPIError, PullRequest
from snykclose.constants import (
    BASE_GITHUB_API_URL,
    GITHUB_API_TIMEOUT,
    PR_PAGE_SIZE,
    RATE_LIMIT_MIN_REMAINING,
)

logger = logging.getLogger(__name__)


@dataclass
class RateLimitInfo:
    """Represents GitHub API rate limit information extracted from response headers."""

    limit: int  # Maximum requests allowed per hour
    remaining: int  # Requests remaining in current window
    reset_timestamp: int  # Unix timestamp when the rate limit resets

    @property
    def seconds_until_reset(self) -> int:
        return max(0, self.reset_timestamp - int(time.time()))

    def __str__(self) -> str:
        return f'RateLimit(remaining={self.remaining}/{self.limit}, resets_in={self.seconds_until_reset}s)'


def parse_rate_limit_headers(response: requests.Response) -> Optional[RateLimitInfo]:
    """
    Parse GitHub API rate limit information from response headers.

    Args:
        response: The HTTP response from GitHub API

    Returns:
        RateLimitInfo object if headers are present, None otherwise
    """
    headers = response.headers
    if 'X-RateLimit-Limit' not in headers:
        return None

    try:
        return RateLimitInfo(
            limit=int(headers.get('X-RateLimit-Limit', 0)),
            remaining=int(headers.get('X-RateLimit-Remaining', 0)),
            reset_timestamp=int(headers.get('X-RateLimit-Reset', 0)),
        )
    except (ValueError, TypeError) as e:
        logger.debug(f'Could not parse rate limit headers: {e}')
        return None


def log_rate_limit_status(response: requests.Response) -> None:
    """Warn when the remaining request quota runs low. Never waits."""
    rate_limit_info = parse_rate_limit_headers(response)
    if rate_limit_info and rate_limit_info.remaining <= RATE_LIMIT_MIN_REMAINING:
        logger.warning(
            f'Approaching GitHub API rate limit: {rate_limit_info.remaining} requests remaining, '
            f'resets in {rate_limit_info.seconds_until_reset}s'
        )


def make_headers(token: Optional[str]) -> Dict[str, str]:
    """Build standard GitHub HTTP headers for a PAT.

    Args:
        token (Optional[str]): Github pat, the Authorization header is omitted when empty
    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    headers = {'Accept': 'application/vnd.github.v3+json'}
    if token:
        headers['Authorization'] = f'token {token}'
    return headers


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason or 'unknown error'
    if isinstance(payload, dict) and payload.get('message'):
        return payload['message']
    return response.text or 'unknown error'


class GitHubClient:
    """Minimal GitHub REST client covering the pull request calls snykclose needs.

    Every call blocks until GitHub answers. Non-success statuses raise
    GitHubAPIError; transport failures propagate as requests exceptions.
    """

    def __init__(
        self,
        token: Optional[str],
        base_url: str = BASE_GITHUB_API_URL,
        timeout: int = GITHUB_API_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(make_headers(token))

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f'{self.base_url}{path}'
        logger.debug(f'{method} {url}')
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)

        if not 200 <= response.status_code < 300:
            raise GitHubAPIError(response.status_code, _error_message(response))

        log_rate_limit_status(response)
        return response

    def list_open_pull_requests(
        self, owner: str, repo: str, page: int = 1, per_page: int = PR_PAGE_SIZE
    ) -> List[PullRequest]:
        """Fetch a single page of open pull requests.

        Args:
            owner (str): Repository owner
            repo (str): Repository name
            page (int): 1-based page number
            per_page (int): Page size, GitHub caps this at 100
        Returns:
            List[PullRequest]: The page contents, empty once past the last page
        """
        response = self._request(
            'GET',
            f'/repos/{owner}/{repo}/pulls',
            params={'state': 'open', 'per_page': per_page, 'page': page},
        )
        items: List[Dict[str, Any]] = response.json()
        return [PullRequest.from_github_response(item) for item in items]

    def set_pull_request_state(self, owner: str, repo: str, number: int, state: str = 'closed') -> None:
        self._request('PATCH', f'/repos/{owner}/{repo}/pulls/{number}', json={'state': state})

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        self._request('POST', f'/repos/{owner}/{repo}/issues/{issue_number}/comments', json={'body': body})
