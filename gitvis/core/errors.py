"""Error kinds raised by the gitvis engine.

All of them are local and recoverable: a failed operation leaves the
repository exactly as it was before the call.
"""


class GitVisError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GitVisError):
    """A file or commit is not present where the operation requires it."""


class AlreadyStagedError(GitVisError):
    """The file already has an unchanged copy in the staging area."""


class NotStageableError(GitVisError):
    """The file is neither added, deleted nor modified."""


class FrozenTreeError(GitVisError):
    """A commit's tree was asked to change."""


class UnknownActionError(GitVisError):
    """A session was asked to dispatch an action type it does not know."""


class ConfigError(GitVisError, ValueError):
    """A configuration value could not be parsed."""
