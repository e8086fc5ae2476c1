import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eccfield.sha2 import Sha224, Sha256, sha224, sha256


def test_sha256_abc_known_digest():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha224_abc_known_digest():
    assert sha224(b"abc").hex() == (
        "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"
    )


@pytest.mark.parametrize("length", [0, 1, 54, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200])
def test_sha256_boundary_lengths_match_hashlib(length):
    data = bytes(range(256))[:length] if length <= 256 else b""
    data = (bytes(range(256)) * 2)[:length]
    assert sha256(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 130])
def test_sha224_boundary_lengths_match_hashlib(length):
    data = (b"eccfield" * 40)[:length]
    assert sha224(data) == hashlib.sha224(data).digest()


def test_digest_sizes():
    assert len(sha256(b"x")) == 32
    assert len(sha224(b"x")) == 28


@given(st.binary(max_size=300))
def test_sha256_matches_hashlib(data):
    assert sha256(data) == hashlib.sha256(data).digest()


@given(st.binary(max_size=300))
def test_sha224_matches_hashlib(data):
    assert sha224(data) == hashlib.sha224(data).digest()


@given(st.binary(max_size=400))
def test_streaming_blocks_matches_one_shot(data):
    state = Sha256()
    full = len(data) - len(data) % 64
    for start in range(0, full, 64):
        state.update(data[start : start + 64])
    state.final(data[full:], len(data))
    assert state.digest() == sha256(data)


def test_final_accepts_several_remaining_blocks():
    data = bytes(150)
    state = Sha224()
    state.update(data[:64])
    state.final(data[64:], len(data))
    assert state.digest() == hashlib.sha224(data).digest()


@pytest.mark.parametrize("size", [0, 63, 65])
def test_update_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        Sha256().update(bytes(size))


def test_final_rejects_inconsistent_length():
    with pytest.raises(ValueError):
        Sha256().final(b"abc", 10)


def test_final_rejects_total_shorter_than_message():
    with pytest.raises(ValueError):
        Sha224().final(b"abcdef", 3)