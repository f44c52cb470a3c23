# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Tests for closing matched pull requests.
"""

from unittest.mock import Mock, call, patch

import requests

from snykclose.classes import CloseSummary, GitHubAPIError
from snykclose.closer import close_all, close_pr
from snykclose.constants import CLOSE_REASON


class TestClosePR:
    def test_closes_then_comments(self, mock_client, target):
        assert close_pr(mock_client, target, 12, 'no longer needed') is True

        mock_client.set_pull_request_state.assert_called_once_with('acme', 'api', 12, state='closed')
        mock_client.create_issue_comment.assert_called_once_with('acme', 'api', 12, 'no longer needed')

    def test_default_reason(self, mock_client, target):
        close_pr(mock_client, target, 12)
        assert mock_client.create_issue_comment.call_args[0][3] == CLOSE_REASON

    @patch('snykclose.closer.logger')
    def test_state_update_failure_skips_comment(self, mock_logger, mock_client, target):
        mock_client.set_pull_request_state.side_effect = GitHubAPIError(403, 'Resource not accessible')

        assert close_pr(mock_client, target, 12) is False

        mock_client.create_issue_comment.assert_not_called()
        message = mock_logger.error.call_args[0][0]
        assert '#12' in message and 'acme/api' in message

    @patch('snykclose.closer.logger')
    def test_comment_failure_leaves_pr_closed(self, mock_logger, mock_client, target):
        mock_client.create_issue_comment.side_effect = requests.ConnectionError('reset by peer')

        assert close_pr(mock_client, target, 12) is False

        mock_client.set_pull_request_state.assert_called_once()
        mock_logger.error.assert_called_once()


class TestCloseAll:
    def test_processes_in_order_and_pauses_between(self, mock_client, matched_prs):
        pace = Mock()

        results = close_all(mock_client, matched_prs, pace=pace, delay=1.0)

        assert [r.matched.pr.number for r in results] == [11, 12, 7]
        assert all(r.succeeded for r in results)
        assert pace.call_args_list == [call(1.0), call(1.0)]

    def test_partial_failure_is_counted_and_run_continues(self, mock_client, matched_prs):
        mock_client.create_issue_comment.side_effect = [None, GitHubAPIError(500, 'boom'), None]

        results = close_all(mock_client, matched_prs, pace=Mock())
        summary = CloseSummary.from_results(results)

        assert [r.succeeded for r in results] == [True, False, True]
        assert mock_client.set_pull_request_state.call_count == 3
        assert (summary.succeeded, summary.failed, summary.total) == (2, 1, 3)

    def test_empty(self, mock_client):
        pace = Mock()
        assert close_all(mock_client, [], pace=pace) == []
        pace.assert_not_called()
