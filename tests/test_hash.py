"""Hash utilities tests."""

from gitvis.core.hash import hash_object, short_hash


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert len(result) == 40
    assert isinstance(result, str)


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    assert hash_object(b'commit 0') == hash_object(b'commit 0')


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'commit 0') != hash_object(b'commit 1')


def test_short_hash():
    """Test abbreviation keeps the prefix."""
    checksum = hash_object(b'data')
    assert short_hash(checksum) == checksum[:7]
    assert short_hash(checksum, 4) == checksum[:4]
