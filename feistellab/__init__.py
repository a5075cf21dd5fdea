"""feistellab: a variable-length, variable-round Feistel network.

Research / education only. Do NOT use in production.
"""

from .cipher import (
    MAX_ROUNDS,
    FeistelError,
    FeistelNetwork,
    InvalidData,
    InvalidKey,
    InvalidRounds,
    decrypt,
    encrypt,
)

__version__ = "0.1.0"

__all__ = [
    "encrypt",
    "decrypt",
    "FeistelNetwork",
    "FeistelError",
    "InvalidData",
    "InvalidKey",
    "InvalidRounds",
    "MAX_ROUNDS",
]
