"""Tests for omarchive.core.hashing."""

import hashlib

from omarchive.core.hashing import canonical_json, compute_hash


class TestComputeHash:
    """Tests for compute_hash."""

    def test_deterministic(self):
        """Same values always hash the same."""
        assert compute_hash("CoreContentPack", "1.0") == compute_hash("CoreContentPack", "1.0")

    def test_order_matters(self):
        """Swapping values changes the hash."""
        assert compute_hash("a", "b") != compute_hash("b", "a")

    def test_default_length(self):
        """Default digest is 32 hex characters."""
        assert len(compute_hash("x")) == 32

    def test_custom_length(self):
        """length truncates the full SHA-256 digest."""
        full = hashlib.sha256(b"a|1").hexdigest()
        assert compute_hash("a", 1, length=64) == full
        assert compute_hash("a", 1, length=8) == full[:8]


class TestCanonicalJson:
    """Tests for canonical_json."""

    def test_sorted_compact(self):
        """Keys are sorted and whitespace removed."""
        assert canonical_json({"b": 1, "a": [2, 1]}) == '{"a":[2,1],"b":1}'

    def test_key_order_independent(self):
        """Dicts with the same content serialize identically."""
        assert canonical_json({"x": 1, "y": {"b": 2, "a": 1}}) == canonical_json({"y": {"a": 1, "b": 2}, "x": 1})
