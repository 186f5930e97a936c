"""gitvis - the versioned file tree engine behind an interactive Git tutorial."""

__version__ = '0.1.0'

from gitvis.core.repository import Repository
from gitvis.core.objects import File, Blob, Tree, Commit, Status

__all__ = [
    'Repository',
    'File',
    'Blob',
    'Tree',
    'Commit',
    'Status',
]
