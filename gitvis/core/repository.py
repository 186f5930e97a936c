"""Repository management for gitvis."""

from typing import Dict, Iterator, List, Optional, Set, Union

from .areas import StagingArea, WorkingDirectory
from .errors import NotFoundError
from .modifications import ModificationGenerator
from .objects import Commit, File, Status, Tree


class Repository:
    """
    Represents a toy repository.

    A repository composes the working directory, the staging area and a
    linear commit history. It owns the head pointer and orchestrates
    committing and reverting.
    """

    def __init__(self, modifications: Optional[ModificationGenerator] = None):
        """
        Initialize repository.

        Args:
            modifications: Generator for edits without an explicit size
        """
        self.working_directory = WorkingDirectory(modifications)
        self.staging_area = StagingArea()
        self.commits: List[Commit] = []
        self._commits_by_checksum: Dict[str, Commit] = {}

    @property
    def head(self) -> Optional[Commit]:
        """Most recently created commit, or None before the first commit."""
        return self.commits[-1] if self.commits else None

    @property
    def head_tree(self) -> Optional[Tree]:
        head = self.head
        return head.tree if head is not None else None

    def add_file(self, name: Optional[str] = None) -> File:
        """Create a new file in the working directory."""
        return self.working_directory.add_file(name)

    def modify_file(
        self,
        file: File,
        insertions: Optional[int] = None,
        deletions: Optional[int] = None,
    ) -> File:
        """Edit a file in the working directory."""
        return self.working_directory.modify_file(file, insertions, deletions)

    def delete_file(self, file: File) -> File:
        """Delete a file from the working directory."""
        return self.working_directory.delete_file(file)

    def stage_file(self, file: File) -> File:
        """Stage one file; see StagingArea.stage for the rules."""
        return self.staging_area.stage(file, self.working_directory, self.head_tree)

    def stage_all_files(self) -> List[File]:
        """Stage every eligible tracked file. Never raises."""
        return self.staging_area.stage_all(
            self.tracked_files(), self.working_directory, self.head_tree
        )

    def unstage_file(self, file: File) -> File:
        """Take a file back out of the staging area."""
        return self.staging_area.unstage(file, self.working_directory)

    def create_commit(self) -> Commit:
        """
        Record the staged changes as a new commit.

        The new tree is the head tree overlaid with the staging area. Files
        the staging area does not touch keep their blob instances, so they
        compare as unmodified against the parent. An empty staging area
        produces a commit identical to its parent.

        Returns:
            Commit: The new head commit
        """
        tree = self.staging_area.apply(self.head_tree)
        commit = Commit.create(tree, self.head)

        self.commits.append(commit)
        self._commits_by_checksum[commit.checksum] = commit
        self.staging_area.clear()

        return commit

    def revert_commit(self, target: Union[Commit, str, int]) -> Commit:
        """
        Restore the working directory to the content of an earlier commit.

        Walks from head down to and including the target commit. Every file
        touched by a commit on that walk gets the blob the target holds;
        files the target lacks are removed and hidden. History and head stay
        as they are.

        Args:
            target: Commit, checksum (or prefix) or 1-based commit number

        Returns:
            Commit: The target commit

        Raises:
            NotFoundError: If target is not an ancestor of head
        """
        commit = self.get_commit(target) if not isinstance(target, Commit) else target

        span = []
        for ancestor in self.history():
            span.append(ancestor)
            if ancestor is commit:
                break
        else:
            raise NotFoundError(f"Commit is not an ancestor of head: {commit.short_checksum}")

        touched: Set[File] = set()
        for ancestor in span:
            touched.update(self.changed_files(ancestor))

        for file in sorted(touched, key=lambda f: f.id):
            self.working_directory.restore(file, commit.tree.get(file))

        return commit

    def index_tree(self) -> Tree:
        """Head tree with the staging area applied; what the next commit would hold."""
        return self.staging_area.apply(self.head_tree)

    def parent_of(self, commit: Commit) -> Optional[Commit]:
        """Resolve a commit's parent reference."""
        if commit.parent is None:
            return None
        return self._commits_by_checksum.get(commit.parent)

    def history(self, start: Optional[Commit] = None) -> Iterator[Commit]:
        """
        Walk the parent chain.

        Args:
            start: First commit to yield (defaults to head)

        Yields:
            Commits from start back to the first commit
        """
        commit = start if start is not None else self.head

        while commit is not None:
            yield commit
            commit = self.parent_of(commit)

    def changed_files(self, commit: Commit) -> List[File]:
        """Files a commit added, modified or deleted relative to its parent."""
        parent = self.parent_of(commit)
        parent_tree = parent.tree if parent is not None else None

        files = set(commit.tree.files())
        if parent_tree is not None:
            files.update(parent_tree.files())

        return sorted(
            (f for f in files if commit.tree.diff_status(f, parent_tree) is not Status.UNMODIFIED),
            key=lambda f: f.id,
        )

    def get_commit(self, ref: Union[str, int]) -> Commit:
        """
        Find a commit.

        Args:
            ref: Full checksum, checksum prefix (4+ characters) or 1-based number

        Returns:
            Commit: The matching commit

        Raises:
            NotFoundError: If nothing or more than one commit matches
        """
        if isinstance(ref, int):
            if 1 <= ref <= len(self.commits):
                return self.commits[ref - 1]
            raise NotFoundError(f"Commit not found: {ref}")

        if ref.isdigit() and len(ref) < 4:
            return self.get_commit(int(ref))

        matches = [c for c in self.commits if c.checksum.startswith(ref)] if len(ref) >= 4 else []

        if len(matches) != 1:
            raise NotFoundError(f"Commit not found: {ref}")

        return matches[0]

    def get_file(self, name: str) -> File:
        """Look up a file by display name or id."""
        return self.working_directory.get_file(name)

    def tracked_files(self) -> List[File]:
        """Files present in the working directory, the staging area or head."""
        files = set(self.working_directory.tree.files())
        files.update(self.staging_area.files())

        if self.head_tree is not None:
            files.update(self.head_tree.files())

        return sorted(files, key=lambda f: f.id)

    def __repr__(self) -> str:
        """String representation of repository."""
        head = self.head.short_checksum if self.head else None
        return f"Repository(commits={len(self.commits)}, head={head})"
