"""Status resolution and rendering queries.

Nothing here is stored: every call compares trees afresh, so a status can
never drift out of sync with the trees it describes.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from gitvis.core.objects import Blob, Commit, DiffStats, File, Status, Tree
from gitvis.core.repository import Repository


@dataclass(frozen=True)
class FileStatus:
    """A file as displayed in one area or commit."""

    file: File
    status: Status
    diff: DiffStats
    blob: Optional[Blob]

    @property
    def changes(self) -> int:
        return self.diff.changes


@dataclass(frozen=True)
class CommitStatus:
    """A commit with the status of each of its files relative to its parent."""

    commit: Commit
    files: List[FileStatus]


def resolve(file: File, tree: Tree, reference: Optional[Tree]) -> FileStatus:
    """
    Resolve status and diff statistics of a file.

    Args:
        file: File to resolve
        tree: Tree the file is displayed in
        reference: Tree to compare against (None means an empty tree)

    Returns:
        FileStatus: Derived status of the file
    """
    return FileStatus(
        file=file,
        status=tree.diff_status(file, reference),
        diff=tree.diff_stats(file, reference),
        blob=tree.get(file),
    )


def working_directory_files(repo: Repository) -> List[FileStatus]:
    """Visible working directory files compared with what the next commit would hold."""
    working = repo.working_directory
    reference = repo.index_tree()

    files = set(working.tree.files()) | set(reference.files())

    return [
        resolve(file, working.tree, reference)
        for file in sorted(files, key=lambda f: f.id)
        if not working.is_hidden(file)
    ]


def staging_area_files(repo: Repository) -> List[FileStatus]:
    """Staged files compared with the head commit."""
    staging = repo.staging_area
    return [resolve(file, staging.tree, repo.head_tree) for file in staging.files()]


def commit_files(repo: Repository, commit: Commit) -> List[FileStatus]:
    """Every file of a commit, plus files it deleted, compared with its parent."""
    parent = repo.parent_of(commit)
    parent_tree = parent.tree if parent is not None else None

    files = set(commit.tree.files())
    if parent_tree is not None:
        files.update(parent_tree.files())

    return [resolve(file, commit.tree, parent_tree) for file in sorted(files, key=lambda f: f.id)]


def changed_files(repo: Repository, commit: Commit) -> List[FileStatus]:
    """Files of a commit whose status is not UNMODIFIED."""
    return [fs for fs in commit_files(repo, commit) if fs.status is not Status.UNMODIFIED]


def commit_log(repo: Repository) -> List[CommitStatus]:
    """All commits in creation order with their resolved file statuses."""
    return [CommitStatus(commit, commit_files(repo, commit)) for commit in repo.commits]


def max_changes(statuses: Iterable[FileStatus]) -> int:
    """Largest change count among the given files (0 for none)."""
    return max((fs.changes for fs in statuses), default=0)


class StatusResolver:
    """
    Query surface for renderers.

    Bundles the module functions around one repository.
    """

    def __init__(self, repo: Repository):
        self.repo = repo

    def working_directory(self) -> List[FileStatus]:
        return working_directory_files(self.repo)

    def staging_area(self) -> List[FileStatus]:
        return staging_area_files(self.repo)

    def commit(self, commit: Commit) -> List[FileStatus]:
        return commit_files(self.repo, commit)

    def log(self) -> List[CommitStatus]:
        return commit_log(self.repo)

    def file(self, file: File) -> FileStatus:
        """Working directory status of a single file."""
        return resolve(file, self.repo.working_directory.tree, self.repo.index_tree())
