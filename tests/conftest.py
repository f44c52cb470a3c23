# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared fixtures for snykclose tests.
"""

import json
from typing import Optional
from unittest.mock import Mock

import pytest

from snykclose.classes import MatchedPR, PullRequest, RepositoryTarget


def make_pr(
    number: int = 1,
    title: str = 'Bump lodash to 4.17.21',
    author_login: str = 'dependabot',
    created_at: str = '2025-01-10T12:00:00Z',
    updated_at: str = '2025-01-11T08:30:00Z',
    url: Optional[str] = None,
) -> PullRequest:
    return PullRequest(
        number=number,
        title=title,
        author_login=author_login,
        created_at=created_at,
        updated_at=updated_at,
        url=url or f'https://github.com/acme/api/pull/{number}',
    )


def make_snyk_pr(number: int = 1, title: Optional[str] = None) -> PullRequest:
    return make_pr(
        number=number,
        title=title or f'[Snyk] Security upgrade axios from 0.21.1 to 1.6.0 ({number})',
        author_login='snyk-bot',
    )


@pytest.fixture
def pr_factory():
    """Factory for PullRequest snapshots."""
    return make_pr


@pytest.fixture
def snyk_pr_factory():
    return make_snyk_pr


@pytest.fixture
def target():
    return RepositoryTarget(owner='acme', name='api', key='api')


@pytest.fixture
def other_target():
    return RepositoryTarget(owner='acme', name='web', key='web')


@pytest.fixture
def matched_prs(target, other_target):
    return [
        MatchedPR(target=target, pr=make_snyk_pr(11)),
        MatchedPR(target=target, pr=make_snyk_pr(12)),
        MatchedPR(target=other_target, pr=make_snyk_pr(7)),
    ]


@pytest.fixture
def mock_client():
    """GitHub collaborator double; every page is empty unless a test says otherwise."""
    client = Mock()
    client.list_open_pull_requests.return_value = []
    return client


@pytest.fixture
def config_file(tmp_path):
    data = {
        'api': {'github': {'owner': 'acme', 'repoName': 'api'}, 'namespace': '@acme/api'},
        'web': {'github': {'owner': 'acme', 'repoName': 'web'}},
    }
    path = tmp_path / 'repo.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path
