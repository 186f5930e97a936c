"""Operations module for high-level gitvis operations.

This module contains the logic consumed by front-ends:
- Status resolution and rendering queries
- Session dispatch, logging and replay
"""

from gitvis.operations.status import (
    FileStatus, CommitStatus, StatusResolver, resolve,
    working_directory_files, staging_area_files, commit_files, commit_log,
)
from gitvis.operations.session import Action, LogEntry, Session, SessionLog

__all__ = [
    'FileStatus', 'CommitStatus', 'StatusResolver', 'resolve',
    'working_directory_files', 'staging_area_files', 'commit_files', 'commit_log',
    'Action', 'LogEntry', 'Session', 'SessionLog',
]
