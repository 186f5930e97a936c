"""Core functionality for gitvis.

This module contains the core data structures:
- Versioned objects (File, Blob, Tree, Commit)
- Working directory and staging area
- Repository orchestration (commit, revert)
- Configuration management
- Error kinds

For status queries and session handling, see gitvis.operations
"""

from gitvis.core.objects import File, Blob, Tree, Commit, Status, DiffStats
from gitvis.core.areas import WorkingDirectory, StagingArea
from gitvis.core.repository import Repository
from gitvis.core.modifications import ModificationGenerator
from gitvis.core.config import Config, get_config
from gitvis.core.errors import (
    GitVisError,
    NotFoundError,
    AlreadyStagedError,
    NotStageableError,
    FrozenTreeError,
    UnknownActionError,
    ConfigError,
)

__all__ = [
    'File',
    'Blob',
    'Tree',
    'Commit',
    'Status',
    'DiffStats',
    'WorkingDirectory',
    'StagingArea',
    'Repository',
    'ModificationGenerator',
    'Config',
    'get_config',
    'GitVisError',
    'NotFoundError',
    'AlreadyStagedError',
    'NotStageableError',
    'FrozenTreeError',
    'UnknownActionError',
    'ConfigError',
]
