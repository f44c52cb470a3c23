# The MIT License (MIT)
# Copyright © 2025 Entrius

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = 'https://api.github.com'
GITHUB_API_TIMEOUT = 30  # seconds
GITHUB_TOKEN_ENV = 'GITHUB_TOKEN'
PR_PAGE_SIZE = 100

# Warn when fewer than this many requests remain in the current window
RATE_LIMIT_MIN_REMAINING = 10

# =============================================================================
# Pacing
# =============================================================================
SCAN_DELAY_SECONDS = 0.5  # between repository scans
CLOSE_DELAY_SECONDS = 1.0  # between PR closures

# =============================================================================
# Snyk classification
# =============================================================================
SNYK_KEYWORD = 'snyk'
SNYK_TITLE_TAG = '[snyk]'
SNYK_BOT_LOGIN = 'snyk-bot'

# =============================================================================
# Files
# =============================================================================
DEFAULT_CONFIG_FILE = 'repo.json'
DEFAULT_CSV_FILE = 'snyk-prs-report.csv'

CSV_HEADERS = [
    'Repository',
    'Owner',
    'PR Number',
    'PR Title',
    'Author',
    'Created Date',
    'Updated Date',
    'PR URL',
]

# =============================================================================
# Closing
# =============================================================================
CLOSE_REASON = (
    'Closing this Snyk PR as it is no longer required. '
    'This PR was automatically closed as part of a cleanup process.'
)
AFFIRMATIVE_ANSWERS = ('yes', 'y')
