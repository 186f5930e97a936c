"""Shared pytest fixtures for gitvis tests."""

import pytest

from gitvis.core.modifications import ModificationGenerator
from gitvis.core.objects import Blob, File, Tree
from gitvis.core.repository import Repository
from gitvis.operations.session import Session


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.gitvisconfig and GITVIS_* variables."""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    for key in ('GITVIS_MODIFY_MAX_INSERTIONS', 'GITVIS_MODIFY_MAX_DELETIONS', 'GITVIS_SESSION_SEED'):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def repo():
    """Empty repository with reproducible random edits."""
    return Repository(ModificationGenerator(seed=1))


@pytest.fixture
def sample_file():
    """A file identity that belongs to no repository."""
    return File(1, 'file1')


@pytest.fixture
def sample_tree(sample_file):
    """Tree holding one empty blob."""
    tree = Tree()
    tree.set(sample_file, Blob.empty(sample_file))
    return tree


@pytest.fixture
def repo_with_commit(repo):
    """Repository whose first commit holds file1 at +2 -0."""
    file = repo.add_file()
    repo.modify_file(file, 2, 0)
    repo.stage_file(file)
    repo.create_commit()
    return repo


@pytest.fixture
def session():
    """Session with reproducible random edits."""
    return Session(ModificationGenerator(seed=7))


def _make_commit(repo, *files):
    """
    Stage the given files and commit.

    Args:
        repo: Repository instance
        files: Files to stage before committing

    Returns:
        Commit: The new commit
    """
    for file in files:
        repo.stage_file(file)
    return repo.create_commit()


def _snapshot(repo):
    """Capture every tree entry of both areas for before/after comparisons."""
    working = repo.working_directory
    staging = repo.staging_area
    return (
        working.tree.items(),
        frozenset(working.hidden),
        staging.tree.items(),
        frozenset(staging.removals),
        list(repo.commits),
    )


@pytest.fixture
def make_commit():
    """Helper that stages files and commits."""
    return _make_commit


@pytest.fixture
def snapshot():
    """Helper that captures repository state."""
    return _snapshot
