"""
Deterministic hashing for archive content.

Two archives built from the same catalogue and the same starting registry
must be identical apart from their creation time.  ``compute_hash`` gives
the stable digest those checks compare, and ``canonical_json`` gives the
stable text it is computed over.

Examples:
    >>> compute_hash("CoreContentPack", "1.0") == compute_hash("CoreContentPack", "1.0")
    True
    >>> compute_hash("a", "b") != compute_hash("b", "a")
    True
    >>> canonical_json({"b": 1, "a": [2, 1]})
    '{"a":[2,1],"b":1}'

Tags:
    hashing, determinism, fingerprint, omarchive
"""

import hashlib
import json
from typing import Any


def compute_hash(*values: Any, length: int = 32) -> str:
    """
    Compute deterministic hash from values.

    String representations of the values are joined with ``|`` and hashed
    with SHA-256.  Order matters: ``(a, b)`` and ``(b, a)`` differ.

    Args:
        *values: Values to hash (converted to strings)
        length: Hex digest length (default 32 = 128 bits)

    Returns:
        Hex string of specified length
    """
    content = "|".join(str(v) for v in values)
    return hashlib.sha256(content.encode()).hexdigest()[:length]


def canonical_json(value: Any) -> str:
    """Serialize ``value`` with sorted keys and no insignificant whitespace."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
