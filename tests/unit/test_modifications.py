"""Modification generator tests."""

import pytest

from gitvis.core.modifications import ModificationGenerator


def test_seeded_generators_agree():
    """Test the same seed gives the same sequence."""
    a = ModificationGenerator(seed=5)
    b = ModificationGenerator(seed=5)
    assert [a.create() for _ in range(10)] == [b.create() for _ in range(10)]


def test_create_within_limits():
    """Test drawn sizes respect the limits and change something."""
    generator = ModificationGenerator(4, 2, seed=11)
    for _ in range(50):
        insertions, deletions = generator.create()
        assert 0 <= insertions <= 4
        assert 0 <= deletions <= 2
        assert insertions + deletions > 0


def test_zero_limits():
    """Test zero limits produce empty edits."""
    assert ModificationGenerator(0, 0).create() == (0, 0)


def test_negative_limits():
    """Test negative limits are rejected."""
    with pytest.raises(ValueError):
        ModificationGenerator(-1, 2)
