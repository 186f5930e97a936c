"""Tutorial session: command dispatch, session log and replay.

A session owns one repository and applies one command at a time. Each
command runs to completion before the next is accepted.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from gitvis.core.errors import GitVisError, UnknownActionError
from gitvis.core.modifications import ModificationGenerator
from gitvis.core.objects import Commit, File
from gitvis.core.repository import Repository

ADD_FILE = 'ADD_FILE'
MODIFY_FILE = 'MODIFY_FILE'
DELETE_FILE = 'DELETE_FILE'
STAGE_FILE = 'STAGE_FILE'
STAGE_ALL_FILES = 'STAGE_ALL_FILES'
UNSTAGE_FILE = 'UNSTAGE_FILE'
CREATE_COMMIT = 'CREATE_COMMIT'
REVERT_COMMIT = 'REVERT_COMMIT'

INFO = 'info'
ERROR = 'error'


@dataclass(frozen=True)
class Action:
    """
    A learner command.

    Payloads reference files by name and commits by checksum so a recorded
    action can be replayed against a fresh repository.
    """

    type: str
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LogEntry:
    """One line of the session log."""

    level: str
    action: Action
    message: str


class SessionLog:
    """Ordered record of command outcomes."""

    def __init__(self):
        self.entries: List[LogEntry] = []

    def info(self, action: Action, message: str) -> LogEntry:
        return self._append(INFO, action, message)

    def error(self, action: Action, message: str) -> LogEntry:
        return self._append(ERROR, action, message)

    def _append(self, level: str, action: Action, message: str) -> LogEntry:
        entry = LogEntry(level, action, message)
        self.entries.append(entry)
        return entry

    def errors(self) -> List[LogEntry]:
        return [e for e in self.entries if e.level == ERROR]

    def last(self) -> Optional[LogEntry]:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


class Session:
    """
    Dispatches learner commands against one repository.

    Engine errors never escape dispatch: they are written to the log and the
    command is dropped. Successful commands are kept in `history` so the
    session can be rebuilt with `replay`.
    """

    def __init__(self, modifications: Optional[ModificationGenerator] = None):
        """
        Initialize session.

        Args:
            modifications: Generator for random edit sizes
        """
        self.modifications = modifications or ModificationGenerator()
        self.repo = Repository(self.modifications)
        self.log = SessionLog()
        self.history: List[Action] = []

        self._handlers: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            ADD_FILE: self._add_file,
            MODIFY_FILE: self._modify_file,
            DELETE_FILE: self._delete_file,
            STAGE_FILE: self._stage_file,
            STAGE_ALL_FILES: self._stage_all_files,
            UNSTAGE_FILE: self._unstage_file,
            CREATE_COMMIT: self._create_commit,
            REVERT_COMMIT: self._revert_commit,
        }

    def add_file(self) -> Action:
        return Action(ADD_FILE)

    def modify_file(self, name: str, insertions: Optional[int] = None, deletions: Optional[int] = None) -> Action:
        """
        Create a modify action.

        Missing edit sizes are drawn now and stored in the payload, so
        replaying the action repeats the same edit.
        """
        if insertions is None or deletions is None:
            random_insertions, random_deletions = self.modifications.create()
            if insertions is None:
                insertions = random_insertions
            if deletions is None:
                deletions = random_deletions

        return Action(MODIFY_FILE, {'file': name, 'insertions': insertions, 'deletions': deletions})

    def delete_file(self, name: str) -> Action:
        return Action(DELETE_FILE, {'file': name})

    def stage_file(self, name: str) -> Action:
        return Action(STAGE_FILE, {'file': name})

    def stage_all_files(self) -> Action:
        return Action(STAGE_ALL_FILES)

    def unstage_file(self, name: str) -> Action:
        return Action(UNSTAGE_FILE, {'file': name})

    def create_commit(self) -> Action:
        return Action(CREATE_COMMIT)

    def revert_commit(self, ref: str) -> Action:
        return Action(REVERT_COMMIT, {'commit': ref})

    def dispatch(self, action: Action) -> Any:
        """
        Apply an action to the repository.

        Args:
            action: Action to apply

        Returns:
            The affected File, Commit or list of Files; None if the engine
            rejected the action

        Raises:
            UnknownActionError: If the action type has no handler
        """
        handler = self._handlers.get(action.type)
        if handler is None:
            raise UnknownActionError(f"Unknown action: {action.type}")

        try:
            data, message = handler(action.payload)
        except GitVisError as e:
            self.log.error(action, e.message)
            return None

        self.log.info(action, message)
        self.history.append(action)
        return data

    def replay(self, actions: Iterable[Action]) -> None:
        """Rebuild the session from scratch by dispatching recorded actions."""
        actions = list(actions)
        self.reset()

        for action in actions:
            self.dispatch(action)

    def reset(self) -> None:
        """Start over with an empty repository."""
        self.repo = Repository(self.modifications)
        self.log.clear()
        self.history = []

    def _file(self, payload: Dict[str, Any]) -> File:
        return self.repo.get_file(str(payload['file']))

    def _add_file(self, payload):
        file = self.repo.add_file()
        return file, f"A new file {file.name} was added."

    def _modify_file(self, payload):
        file = self.repo.modify_file(self._file(payload), payload.get('insertions'), payload.get('deletions'))
        return file, f"{file.name} was modified."

    def _delete_file(self, payload):
        file = self.repo.delete_file(self._file(payload))
        return file, f"{file.name} was deleted."

    def _stage_file(self, payload):
        file = self.repo.stage_file(self._file(payload))
        return file, f"{file.name} was added to the staging area."

    def _stage_all_files(self, payload):
        files = self.repo.stage_all_files()
        return files, "All files were added to the staging area."

    def _unstage_file(self, payload):
        file = self.repo.unstage_file(self._file(payload))
        return file, f"{file.name} was removed from the staging area."

    def _create_commit(self, payload):
        commit = self.repo.create_commit()
        return commit, f"New commit {commit.short_checksum} was stored in the repository."

    def _revert_commit(self, payload):
        commit: Commit = self.repo.revert_commit(str(payload['commit']))
        return commit, f"Commit {commit.short_checksum} was reverted successfully."

    def __repr__(self) -> str:
        return f"Session(actions={len(self.history)}, repo={self.repo!r})"
