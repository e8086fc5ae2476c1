import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from eccfield.sha1 import Sha1, sha1


def test_abc_digest():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_empty_digest():
    assert sha1(b"") == hashlib.sha1(b"").digest()


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200])
def test_padding_boundaries(length):
    data = bytes(range(256))[:length] if length <= 256 else b""
    assert sha1(data) == hashlib.sha1(data).digest()


@settings(max_examples=80)
@given(st.binary(max_size=300))
def test_matches_reference(data):
    assert sha1(data) == hashlib.sha1(data).digest()


@settings(max_examples=40)
@given(st.binary(max_size=300))
def test_blockwise_equals_one_shot(data):
    state = Sha1()
    full = len(data) // 64 * 64
    for start in range(0, full, 64):
        state.update(data[start : start + 64])
    state.final(data[full:], len(data))
    assert state.digest() == sha1(data)


def test_final_accepts_whole_blocks_in_remainder():
    data = b"x" * 150
    state = Sha1()
    state.update(data[:64])
    state.final(data[64:], len(data))
    assert state.digest() == hashlib.sha1(data).digest()


def test_digest_has_twenty_bytes():
    assert len(sha1(b"data")) == Sha1.digest_size == 20


@pytest.mark.parametrize("size", [0, 63, 65])
def test_update_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        Sha1().update(bytes(size))


@pytest.mark.parametrize("remaining,total", [(b"abc", 2), (b"abc", 10)])
def test_final_rejects_inconsistent_length(remaining, total):
    with pytest.raises(ValueError):
        Sha1().final(remaining, total)