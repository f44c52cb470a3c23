# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
CSV audit report for matched pull requests.

Only the title column is quoted (with embedded quotes doubled). Other fields
are written as-is, so a comma inside an owner, login or URL is not escaped.
Existing reports are read by tooling that expects exactly this layout.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from snykclose.classes import MatchedPR
from snykclose.constants import CSV_HEADERS

logger = logging.getLogger(__name__)


def quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def format_csv_row(match: MatchedPR) -> str:
    pr = match.pr
    row: List[str] = [
        match.target.name,
        match.target.owner,
        str(pr.number),
        quote_field(pr.title),
        pr.author_login,
        pr.created_at,
        pr.updated_at,
        pr.url,
    ]
    return ','.join(row)


def build_csv_content(matches: Sequence[MatchedPR]) -> str:
    lines = [','.join(CSV_HEADERS)]
    lines.extend(format_csv_row(match) for match in matches)
    return '\n'.join(lines)


def generate_csv(matches: Sequence[MatchedPR], path: Union[str, Path]) -> Path:
    """Write the report, replacing any previous file at ``path``.

    Raises:
        OSError: the destination cannot be written
    """
    path = Path(path)
    path.write_text(build_csv_content(matches), encoding='utf-8')
    logger.debug(f'Wrote {len(matches)} row(s) to {path}')
    return path
