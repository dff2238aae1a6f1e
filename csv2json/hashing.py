"""
One-way digests for encoded fields.

MD5 is kept for compatibility with records produced by existing agents.
It is a pseudonymization digest only: do not rely on collision resistance.
"""

from __future__ import annotations

import hashlib
from typing import Protocol

from .rules import DIGEST_ALGORITHM, RECORD_ENCODING


class Digester(Protocol):
    def digest(self, value: str) -> str: ...


class MD5Digester:
    """Uppercase hex MD5 of the UTF-8 bytes of a value (32 characters)."""

    def digest(self, value: str) -> str:
        data = value.encode(RECORD_ENCODING)
        return hashlib.new(DIGEST_ALGORITHM, data, usedforsecurity=False).hexdigest().upper()
