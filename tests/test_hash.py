"""Hash utilities tests."""

import hashlib
from kit.core.hash import hash_bytes, is_object_id


def test_hash_bytes_empty():
    """Test hashing empty bytes (no envelope, unlike an empty blob id)."""
    assert hash_bytes(b'') == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_bytes_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_bytes(data) == hash_bytes(data)


def test_hash_bytes_different_data():
    """Test different data produces different hashes."""
    assert hash_bytes(b'hello') != hash_bytes(b'world')


def test_hash_bytes_matches_sha1():
    data = b'some content'
    assert hash_bytes(data) == hashlib.sha1(data).hexdigest()


def test_is_object_id():
    assert is_object_id('da39a3ee5e6b4b0d3255bfef95601890afd80709')
    assert not is_object_id('da39a3e')
    assert not is_object_id('DA39A3EE5E6B4B0D3255BFEF95601890AFD80709')
    assert not is_object_id('../../../../../../../../../../etc/passwd!')
