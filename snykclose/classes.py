# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


class SnykCloseError(Exception):
    """Base class for errors raised by snykclose"""


class ConfigError(SnykCloseError):
    """Repository configuration is missing, unreadable or malformed"""


class GitHubAPIError(SnykCloseError):
    """GitHub answered a request with a non-success status"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f'GitHub API error {status_code}: {message}')


@dataclass(frozen=True)
class RepositoryTarget:
    """A GitHub repository to scan"""

    owner: str
    name: str
    key: Optional[str] = None  # config entry this target was loaded from

    @property
    def full_name(self) -> str:
        return f'{self.owner}/{self.name}'

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class PullRequest:
    """Snapshot of an open pull request as returned by GitHub"""

    number: int
    title: str
    author_login: str
    created_at: str
    updated_at: str
    url: str

    @classmethod
    def from_github_response(cls, data: Dict[str, Any]) -> 'PullRequest':
        """Build a PullRequest from a REST `pulls` list item."""
        user = data.get('user') or {}
        return cls(
            number=data['number'],
            title=data.get('title') or '',
            author_login=user.get('login') or '',
            created_at=data.get('created_at') or '',
            updated_at=data.get('updated_at') or '',
            url=data.get('html_url') or '',
        )


@dataclass(frozen=True)
class MatchedPR:
    """A pull request classified as a Snyk PR, together with its repository"""

    target: RepositoryTarget
    pr: PullRequest


@dataclass
class ScanResult:
    """Snyk PRs found across all repositories, plus the repositories that could not be scanned"""

    matches: List[MatchedPR] = field(default_factory=list)
    failed: List[RepositoryTarget] = field(default_factory=list)


@dataclass(frozen=True)
class CloseResult:
    matched: MatchedPR
    succeeded: bool


@dataclass
class CloseSummary:
    """Tally of closure outcomes"""

    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    @classmethod
    def from_results(cls, results: Iterable[CloseResult]) -> 'CloseSummary':
        summary = cls()
        for result in results:
            if result.succeeded:
                summary.succeeded += 1
            else:
                summary.failed += 1
        return summary
