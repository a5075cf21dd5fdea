"""Precondition errors raised by the Feistel engine.

Every error is a ``ValueError`` so callers that already guard cipher calls
with ``except ValueError`` keep working.
"""
from __future__ import annotations


class FeistelError(ValueError):
    """Base class for invalid inputs to the Feistel network."""


class InvalidRounds(FeistelError):
    """Round count (or round index) is not an integer in the supported range."""


class InvalidKey(FeistelError):
    """Key is not a bytes-like object."""


class InvalidData(FeistelError):
    """Plaintext or ciphertext is not a bytes-like object."""
