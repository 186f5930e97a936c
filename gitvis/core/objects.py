"""Versioned objects for gitvis: files, blobs, trees and commits."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .errors import FrozenTreeError
from .hash import hash_object, short_hash


class Status(Enum):
    """Status of a file in one tree relative to a reference tree."""

    ADDED = 'added'
    MODIFIED = 'modified'
    DELETED = 'deleted'
    UNMODIFIED = 'unmodified'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DiffStats:
    """Insertions and deletions between two blobs of the same file."""

    insertions: int = 0
    deletions: int = 0

    @property
    def changes(self) -> int:
        """Total number of changed lines, regardless of direction."""
        return abs(self.insertions) + abs(self.deletions)

    def __str__(self) -> str:
        return f"+{self.insertions} -{self.deletions}"


@dataclass(frozen=True, eq=False)
class File:
    """
    Stable identity of a logical file.

    Two File objects are equal only if they are the same object, so a file
    keeps its identity across every blob it ever had.
    """

    id: int
    name: str

    def __repr__(self) -> str:
        """String representation."""
        return f"File(id={self.id}, name={self.name!r})"


@dataclass(frozen=True, eq=False)
class Blob:
    """
    Immutable content snapshot of one file.

    A blob carries cumulative change counters since the file was added and a
    reference to the blob it was derived from. Blobs compare by identity:
    two blobs hold the same content only if they are the same snapshot.
    """

    file: File
    insertions: int = 0
    deletions: int = 0
    previous: Optional['Blob'] = field(default=None, repr=False)

    @classmethod
    def empty(cls, file: File) -> 'Blob':
        """Create the initial blob of a freshly added file."""
        return cls(file)

    def modify(self, insertions: int, deletions: int) -> 'Blob':
        """
        Derive a new blob with additional changes.

        Each running total is clamped so it never goes below zero.

        Args:
            insertions: Lines inserted by this change
            deletions: Lines deleted by this change

        Returns:
            Blob: New snapshot whose predecessor is this blob
        """
        return Blob(
            self.file,
            max(0, self.insertions + insertions),
            max(0, self.deletions + deletions),
            previous=self,
        )

    def copy(self) -> 'Blob':
        """Snapshot with the same counters whose predecessor is this blob."""
        return Blob(self.file, self.insertions, self.deletions, previous=self)

    def diff(self, other: 'Blob') -> DiffStats:
        """
        Compute changes of this blob relative to another blob.

        Args:
            other: Reference blob

        Returns:
            DiffStats: Counter deltas (may be negative if other is newer)
        """
        return DiffStats(
            self.insertions - other.insertions,
            self.deletions - other.deletions,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"Blob(file={self.file.name}, +{self.insertions} -{self.deletions})"


class Tree:
    """
    Mapping of files to their current blob within one area or commit.

    Working directory and staging area trees are mutable. A commit's tree
    is frozen when the commit is built and rejects every mutation.
    """

    def __init__(self, entries: Optional[Dict[File, Blob]] = None):
        """
        Initialize tree.

        Args:
            entries: Optional initial file to blob mapping
        """
        self._entries: Dict[File, Blob] = dict(entries or {})
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> 'Tree':
        """Make the tree permanently read-only and return it."""
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenTreeError("Cannot modify the tree of a commit")

    def get(self, file: File) -> Optional[Blob]:
        """Get the blob of a file, or None if the file is absent."""
        return self._entries.get(file)

    def set(self, file: File, blob: Blob) -> None:
        """Put a blob for a file, replacing any previous one."""
        self._check_mutable()
        self._entries[file] = blob

    def remove(self, file: File) -> None:
        """Remove a file from the tree if present."""
        self._check_mutable()
        self._entries.pop(file, None)

    def clear(self) -> None:
        """Remove all entries."""
        self._check_mutable()
        self._entries.clear()

    def copy(self) -> 'Tree':
        """Mutable copy sharing the same blob instances."""
        return Tree(self._entries)

    def files(self) -> List[File]:
        """Files present in this tree, in creation order."""
        return sorted(self._entries, key=lambda f: f.id)

    def items(self) -> List[tuple]:
        """(file, blob) pairs in creation order."""
        return [(f, self._entries[f]) for f in self.files()]

    def diff_status(self, file: File, reference: Optional['Tree']) -> Status:
        """
        Derive the status of a file in this tree relative to a reference.

        Args:
            file: File to inspect
            reference: Tree to compare against (None means an empty tree)

        Returns:
            Status: DELETED if absent here, ADDED if absent in reference,
            UNMODIFIED if both hold the same blob, otherwise MODIFIED
        """
        blob = self.get(file)
        if blob is None:
            return Status.DELETED

        reference_blob = reference.get(file) if reference is not None else None
        if reference_blob is None:
            return Status.ADDED

        if blob is reference_blob:
            return Status.UNMODIFIED

        return Status.MODIFIED

    def diff_stats(self, file: File, reference: Optional['Tree']) -> DiffStats:
        """
        Compute change counters of a file relative to a reference tree.

        Args:
            file: File to inspect
            reference: Tree to compare against (None means an empty tree)

        Returns:
            DiffStats: Zero if either side lacks the file
        """
        blob = self.get(file)
        reference_blob = reference.get(file) if reference is not None else None

        if blob is None or reference_blob is None:
            return DiffStats()

        return blob.diff(reference_blob)

    def __contains__(self, file: File) -> bool:
        return file in self._entries

    def __iter__(self) -> Iterator[File]:
        return iter(self.files())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        """String representation."""
        state = ", frozen" if self._frozen else ""
        return f"Tree(entries={len(self._entries)}{state})"


class Commit:
    """
    Immutable snapshot of the project.

    A commit captures:
    - Frozen tree of every file and its blob
    - Checksum of its parent commit (None for the first commit)
    - Position in the repository's history
    """

    def __init__(self, tree: Tree, parent: Optional[str], index: int):
        """
        Initialize commit.

        Args:
            tree: Tree snapshot (frozen by the commit)
            parent: Checksum of the parent commit, if any
            index: Creation order index (0 for the first commit)
        """
        self.tree = tree.freeze()
        self.parent = parent
        self.index = index
        self.checksum = hash_object(self.serialize())

    @classmethod
    def create(cls, tree: Tree, parent: Optional['Commit'] = None) -> 'Commit':
        """
        Create a commit on top of a parent.

        Args:
            tree: Tree snapshot for the commit
            parent: Parent commit, or None for the first commit

        Returns:
            Commit: New commit object
        """
        if parent is None:
            return cls(tree, None, 0)

        return cls(tree, parent.checksum, parent.index + 1)

    def serialize(self) -> bytes:
        """
        Serialize commit layout for checksumming.

        Format:
        commit <index>
        parent <parent-checksum>  (omitted for the first commit)
        <file-id> <file-name> +<insertions> -<deletions>  (one per file)

        Returns:
            bytes: Serialized commit data
        """
        lines = [f'commit {self.index}']

        if self.parent is not None:
            lines.append(f'parent {self.parent}')

        for file, blob in self.tree.items():
            lines.append(f'{file.id} {file.name} +{blob.insertions} -{blob.deletions}')

        return '\n'.join(lines).encode()

    @property
    def short_checksum(self) -> str:
        return short_hash(self.checksum)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={short_hash(self.parent)}" if self.parent else ""
        return f"Commit({self.short_checksum}{parent_info}, files={len(self.tree)})"
