import hashlib
import logging

import pytest

from feistellab.cipher.engine import FeistelNetwork, decrypt, encrypt, feistel_round, split_index
from feistellab.cipher.errors import FeistelError, InvalidData, InvalidKey, InvalidRounds
from feistellab.cipher.key_schedule import MAX_ROUNDS, iter_subkeys


def _zero_prf(data: bytes, subkey: bytes) -> bytes:
    return bytes(len(data))


# ---------------------------------------------------------------------------
# Split policy
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "length,rounds,decrypting,expected",
    [
        (4, 0, False, 2),
        (4, 3, True, 2),
        (33, 3, False, 16),
        (33, 3, True, 16),
        (33, 4, False, 16),
        (33, 4, True, 17),
        (33, 0, True, 17),
        (0, 2, True, 0),
        (1, 2, True, 1),
        (1, 1, True, 0),
    ],
)
def test_split_index(length, rounds, decrypting, expected):
    assert split_index(length, rounds, decrypting=decrypting) == expected


def test_odd_length_half_sizes_alternate():
    """After an odd number of rounds Left is the longer half; after an even number, Right."""
    net = FeistelNetwork()
    pt = bytes(range(33))
    left, right = pt[:16], pt[16:]
    for rounds, subkey in enumerate(iter_subkeys(b"key", 4), start=1):
        left, right = feistel_round(left, right, subkey, net.round_function)
        if rounds % 2:
            assert (len(left), len(right)) == (17, 16)
        else:
            assert (len(left), len(right)) == (16, 17)


# ---------------------------------------------------------------------------
# Round step
# ---------------------------------------------------------------------------

def test_feistel_round_balanced():
    left, right = b"\x01\x02", b"\x03\x04"
    new_left, new_right = feistel_round(left, right, b"k", lambda d, k: b"\xff\x0f")
    assert new_left == right
    assert new_right == bytes([0x01 ^ 0xFF, 0x02 ^ 0x0F])


def test_feistel_round_longer_left_keeps_trailing_byte():
    left, right = b"\x10\x20\x30", b"\x01\x02"
    new_left, new_right = feistel_round(left, right, b"", lambda d, k: b"\x01\x01")
    assert new_left == right
    assert new_right == b"\x11\x21\x30"


def test_feistel_round_shorter_left():
    left, right = b"\x10", b"\x01\x02"
    _, new_right = feistel_round(left, right, b"", lambda d, k: b"\xff\xff")
    assert new_right == b"\xef"


# ---------------------------------------------------------------------------
# Known answers
# ---------------------------------------------------------------------------

def test_single_round_known_answer():
    pt = bytes([0x01, 0x02, 0x03, 0x04])
    key = b"\x01"
    # popcount(key) = 1, round 0 -> rotate by 1 -> subkey 0x02
    tmp = hashlib.sha256(b"\x02" + bytes([0x03, 0x04])).digest()[:2]
    expected = bytes([0x01 ^ tmp[0], 0x02 ^ tmp[1], 0x03, 0x04])
    assert encrypt(pt, key, 1) == expected
    assert decrypt(expected, key, 1) == pt


@pytest.mark.parametrize("length", [0, 1, 2, 7, 8, 33])
def test_zero_round_function_parity(length):
    """With F = 0 odd round counts are the identity and even ones swap halves."""
    net = FeistelNetwork(round_function=_zero_prf)
    pt = bytes(range(length))
    half = length // 2
    assert net.encrypt(pt, b"k", 3) == pt
    assert net.encrypt(pt, b"k", 4) == pt[half:] + pt[:half]


def test_decrypt_replays_subkeys_in_reverse():
    seen = []

    def recording_schedule(key, rounds, direction):
        for sk in iter_subkeys(key, rounds, direction):
            seen.append((direction, sk))
            yield sk

    net = FeistelNetwork(key_schedule=recording_schedule)
    ct = net.encrypt(b"0123456789", b"abc", 5)
    assert net.decrypt(ct, b"abc", 5) == b"0123456789"

    fwd = [sk for d, sk in seen if d == "forward"]
    rev = [sk for d, sk in seen if d == "reverse"]
    assert len(fwd) == len(rev) == 5
    assert rev == list(reversed(fwd))


def test_custom_round_function_roundtrip():
    def xor_prf(data: bytes, subkey: bytes) -> bytes:
        return bytes(b ^ (subkey[i % len(subkey)] if subkey else 0x5A) for i, b in enumerate(data))

    net = FeistelNetwork(round_function=xor_prf)
    pt = b"pluggable round function"
    ct = net.encrypt(pt, b"key", 7)
    assert net.decrypt(ct, b"key", 7) == pt


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("bad_rounds", [-1, MAX_ROUNDS + 1, 1.5, False, None])
def test_invalid_rounds(bad_rounds):
    with pytest.raises(InvalidRounds):
        encrypt(b"data", b"key", bad_rounds)
    with pytest.raises(InvalidRounds):
        decrypt(b"data", b"key", bad_rounds)


@pytest.mark.parametrize("bad_key", ["key", None, 123, [1, 2, 3]])
def test_invalid_key(bad_key):
    with pytest.raises(InvalidKey):
        encrypt(b"data", bad_key, 2)


@pytest.mark.parametrize("bad_data", ["text", None, 42])
def test_invalid_data(bad_data):
    with pytest.raises(InvalidData):
        encrypt(bad_data, b"key", 2)
    with pytest.raises(InvalidData):
        decrypt(bad_data, b"key", 2)


def test_errors_are_value_errors():
    assert issubclass(InvalidRounds, FeistelError)
    assert issubclass(FeistelError, ValueError)
    with pytest.raises(ValueError):
        encrypt(b"data", b"key", -3)


def test_debug_logging_omits_key(caplog):
    with caplog.at_level(logging.DEBUG, logger="feistellab.cipher.engine"):
        encrypt(b"hello world", b"topsecret", 3)
    assert "encrypt: 11 bytes, 3 rounds" in caplog.text
    assert "topsecret" not in caplog.text
