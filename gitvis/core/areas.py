"""Working directory and staging area.

Each area owns one long-lived mutable tree. Status is never stored on the
areas; it is derived from the trees whenever somebody asks for it.
"""

from typing import Iterable, List, Optional, Set

from .errors import AlreadyStagedError, NotFoundError, NotStageableError
from .modifications import ModificationGenerator
from .objects import Blob, File, Status, Tree


class WorkingDirectory:
    """
    The learner's working copy.

    Files are created, edited and deleted here. Deleting a file only removes
    its tree entry; the File identity lives on so other trees can still
    refer to it.
    """

    def __init__(self, modifications: Optional[ModificationGenerator] = None):
        """
        Initialize empty working directory.

        Args:
            modifications: Generator used when an edit has no explicit size
        """
        self.tree = Tree()
        self.hidden: Set[File] = set()
        self.modifications = modifications or ModificationGenerator()
        self._files: List[File] = []

    @property
    def files(self) -> List[File]:
        """Every file ever created, in creation order."""
        return list(self._files)

    def add_file(self, name: Optional[str] = None) -> File:
        """
        Create a new file with an empty initial blob.

        Args:
            name: Display name (defaults to file<N>)

        Returns:
            File: The new file
        """
        file_id = len(self._files) + 1
        file = File(file_id, name or f"file{file_id}")

        self._files.append(file)
        self.tree.set(file, Blob.empty(file))

        return file

    def modify_file(
        self,
        file: File,
        insertions: Optional[int] = None,
        deletions: Optional[int] = None,
    ) -> File:
        """
        Edit a file, producing a new blob with updated counters.

        Args:
            file: File to edit
            insertions: Inserted lines (random if omitted)
            deletions: Deleted lines (random if omitted)

        Returns:
            File: The edited file

        Raises:
            NotFoundError: If the file is not in the working directory
        """
        blob = self._require(file)

        if insertions is None or deletions is None:
            random_insertions, random_deletions = self.modifications.create()
            if insertions is None:
                insertions = random_insertions
            if deletions is None:
                deletions = random_deletions

        self.tree.set(file, blob.modify(insertions, deletions))
        return file

    def delete_file(self, file: File) -> File:
        """
        Delete a file from the working directory.

        Raises:
            NotFoundError: If the file is not in the working directory
        """
        self._require(file)
        self.tree.remove(file)
        return file

    def restore(self, file: File, blob: Optional[Blob]) -> None:
        """
        Put a blob back into the working tree, or remove the file for None.

        Restored deletions are hidden; restored content is shown.
        """
        if blob is None:
            self.tree.remove(file)
            self.hide(file)
        else:
            self.tree.set(file, blob)
            self.show(file)

    def get_file(self, name: str) -> File:
        """
        Look up a file by display name or numeric id.

        Raises:
            NotFoundError: If no such file was ever created
        """
        for file in self._files:
            if file.name == name or str(file.id) == name:
                return file

        raise NotFoundError(f"File not found: {name}")

    def hide(self, file: File) -> None:
        self.hidden.add(file)

    def show(self, file: File) -> None:
        self.hidden.discard(file)

    def is_hidden(self, file: File) -> bool:
        return file in self.hidden

    def _require(self, file: File) -> Blob:
        blob = self.tree.get(file)
        if blob is None:
            raise NotFoundError(f"File not found in working directory: {file.name}")
        return blob

    def __repr__(self) -> str:
        """String representation."""
        return f"WorkingDirectory(files={len(self.tree)})"


class StagingArea:
    """
    Changes prepared for the next commit.

    Holds a tree of staged blobs plus the set of files staged for removal.
    A file has a staging entry when it appears in either.
    """

    def __init__(self):
        """Initialize empty staging area."""
        self.tree = Tree()
        self.removals: Set[File] = set()

    def has_entry(self, file: File) -> bool:
        """Check whether a file is staged (as content or as a removal)."""
        return file in self.tree or file in self.removals

    def is_staged_removal(self, file: File) -> bool:
        return file in self.removals

    def files(self) -> List[File]:
        """Files with a staging entry, in creation order."""
        return sorted(set(self.tree.files()) | self.removals, key=lambda f: f.id)

    def stage(self, file: File, working: WorkingDirectory, baseline: Optional[Tree]) -> File:
        """
        Stage the working directory state of a file.

        Args:
            file: File to stage
            working: Source working directory
            baseline: Tree of the last commit (None before the first commit)

        Returns:
            File: The staged file

        Raises:
            NotFoundError: If the file is unknown to every area
            AlreadyStagedError: If the staged copy is still up to date
            NotStageableError: If the file has no changes since the last commit
        """
        self._check_stageable(file, working, baseline)

        blob = working.tree.get(file)

        if blob is None:
            self.tree.remove(file)
            # A file the last commit never had needs no removal entry.
            if baseline is not None and file in baseline:
                self.removals.add(file)
            working.hide(file)
            return file

        # Both a first stage and a re-stage after further edits take the
        # working blob's current counters.
        staged = blob.copy()
        self.removals.discard(file)
        self.tree.set(file, staged)

        # The staged snapshot becomes the working directory's new baseline.
        working.tree.set(file, staged)
        return file

    def stage_all(
        self,
        files: Iterable[File],
        working: WorkingDirectory,
        baseline: Optional[Tree],
    ) -> List[File]:
        """
        Stage every eligible file, skipping the rest.

        Returns:
            List of files that were staged
        """
        staged = []

        for file in files:
            try:
                staged.append(self.stage(file, working, baseline))
            except (AlreadyStagedError, NotStageableError, NotFoundError):
                continue

        return staged

    def unstage(self, file: File, working: WorkingDirectory) -> File:
        """
        Remove a file from the staging area.

        The working directory gets its pre-stage blob back so the file shows
        as changed relative to the last commit again.

        Raises:
            NotFoundError: If the file is not staged
        """
        if not self.has_entry(file):
            raise NotFoundError(f"File not staged: {file.name}")

        staged = self.tree.get(file)
        if staged is not None and working.tree.get(file) is staged and staged.previous is not None:
            working.tree.set(file, staged.previous)

        self.tree.remove(file)
        self.removals.discard(file)
        working.show(file)

        return file

    def apply(self, tree: Optional[Tree]) -> Tree:
        """
        Overlay staged changes onto a tree.

        Args:
            tree: Base tree (None for an empty base); left untouched

        Returns:
            Tree: New mutable tree; untouched entries keep their blobs
        """
        result = tree.copy() if tree is not None else Tree()

        for file, blob in self.tree.items():
            result.set(file, blob)

        for file in self.removals:
            result.remove(file)

        return result

    def clear(self) -> None:
        """Drop every staging entry."""
        self.tree.clear()
        self.removals.clear()

    def _check_stageable(self, file: File, working: WorkingDirectory, baseline: Optional[Tree]) -> None:
        blob = working.tree.get(file)
        in_baseline = baseline is not None and file in baseline

        if blob is None and not self.has_entry(file) and not in_baseline:
            raise NotFoundError(f"File not found: {file.name}")

        if self.has_entry(file) and self._unchanged_since_staged(file, blob):
            raise AlreadyStagedError(f"File already staged: {file.name}")

        if working.tree.diff_status(file, baseline) is Status.UNMODIFIED:
            raise NotStageableError(f"Only modified files can be staged: {file.name}")

    def _unchanged_since_staged(self, file: File, blob: Optional[Blob]) -> bool:
        if file in self.removals:
            return blob is None
        return blob is not None and blob is self.tree.get(file)

    def __len__(self) -> int:
        return len(self.tree) + len(self.removals)

    def __repr__(self) -> str:
        """String representation."""
        return f"StagingArea(staged={len(self.tree)}, removals={len(self.removals)})"
