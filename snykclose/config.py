# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Repository configuration loading.

The config file is a JSON object keyed by an arbitrary repository identifier:

    {
        "api": {"github": {"owner": "acme", "repoName": "api"}, "namespace": "@acme/api"},
        "web": {"github": {"owner": "acme", "repoName": "web"}}
    }

Only ``github.owner`` and ``github.repoName`` are read; anything else is ignored.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from snykclose.classes import ConfigError, RepositoryTarget

logger = logging.getLogger(__name__)


def _required_str(section: dict, field: str, key: str) -> str:
    value = section.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Repository '{key}': missing or invalid 'github.{field}'")
    return value


def parse_repository_targets(data: Any) -> List[RepositoryTarget]:
    """Validate decoded config data into targets, preserving key order."""
    if not isinstance(data, dict):
        raise ConfigError(f'Repository config must be a JSON object, got {type(data).__name__}')

    targets = []
    for key, entry in data.items():
        github = entry.get('github') if isinstance(entry, dict) else None
        if not isinstance(github, dict):
            raise ConfigError(f"Repository '{key}': missing 'github' section")

        targets.append(
            RepositoryTarget(
                owner=_required_str(github, 'owner', key),
                name=_required_str(github, 'repoName', key),
                key=key,
            )
        )
    return targets


def load_repository_targets(path: Union[str, Path]) -> List[RepositoryTarget]:
    """Read the repository config file.

    Raises:
        ConfigError: the file cannot be read, is not valid JSON, or an entry is malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f'Config file not found: {path}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f'Invalid JSON in {path}: {e}')
    except OSError as e:
        raise ConfigError(f'Error reading {path}: {e}')

    targets = parse_repository_targets(data)
    logger.debug(f'Loaded {len(targets)} repositories from {path}')
    return targets
