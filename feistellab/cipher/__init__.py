from .engine import FeistelNetwork, decrypt, encrypt, feistel_round, split_index
from .errors import FeistelError, InvalidData, InvalidKey, InvalidRounds
from .key_schedule import MAX_ROUNDS, derive_subkey, key_schedule
from .round_function import hash_round_function, make_round_function

__all__ = [
    "FeistelNetwork",
    "encrypt",
    "decrypt",
    "feistel_round",
    "split_index",
    "FeistelError",
    "InvalidData",
    "InvalidKey",
    "InvalidRounds",
    "MAX_ROUNDS",
    "derive_subkey",
    "key_schedule",
    "hash_round_function",
    "make_round_function",
]
