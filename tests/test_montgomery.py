import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from eccfield.field import PrimeData
from eccfield.montgomery import (
    compute_n0,
    compute_r,
    compute_r_squared,
    cr_mont_multiply,
    mont_exponent,
    mont_inverse_binary,
    mont_inverse_fermat,
    mont_multiply,
    montgomery_to_normal,
    mult_two_mont,
    normal_to_montgomery,
)

P256 = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
MERSENNE_127 = (1 << 127) - 1


def _mont(prime, word_bits=32):
    pd = PrimeData(prime, word_bits=word_bits)
    pd.r_squared = compute_r_squared(pd)
    pd.n0 = compute_n0(pd)
    pd.gfp_one = compute_r(pd)
    pd.montgomery_domain = True
    return pd


CONFIGS = [
    (251, 8),
    (10007, 16),
    (65537, 32),
    (MERSENNE_127, 64),
    (P256, 32),
]


@pytest.mark.parametrize("prime,word_bits", CONFIGS)
def test_n0_is_negative_inverse(prime, word_bits):
    pd = _mont(prime, word_bits)
    assert (pd.n0 * prime + 1) % (1 << word_bits) == 0


def test_n0_for_p256_is_one():
    assert compute_n0(PrimeData(P256)) == 1


@pytest.mark.parametrize("prime,word_bits", CONFIGS)
def test_r_represents_one(prime, word_bits):
    pd = _mont(prime, word_bits)
    assert montgomery_to_normal(compute_r(pd), pd) == 1
    assert normal_to_montgomery(1, pd) == compute_r(pd)


@pytest.mark.parametrize("prime,word_bits", CONFIGS)
def test_r_squared_is_square_of_r(prime, word_bits):
    pd = _mont(prime, word_bits)
    r = compute_r(pd)
    assert compute_r_squared(pd) == r * r % prime


@settings(max_examples=60)
@given(st.integers(min_value=0, max_value=P256 - 1))
def test_round_trip_p256(value):
    pd = _mont(P256)
    assert montgomery_to_normal(normal_to_montgomery(value, pd), pd) == value


@settings(max_examples=60)
@given(
    st.integers(min_value=0, max_value=P256 - 1),
    st.integers(min_value=0, max_value=P256 - 1),
)
def test_multiply_in_domain(a, b):
    pd = _mont(P256)
    product = mont_multiply(normal_to_montgomery(a, pd), normal_to_montgomery(b, pd), pd)
    assert montgomery_to_normal(product, pd) == a * b % P256


@pytest.mark.parametrize("prime,word_bits", CONFIGS)
def test_multiply_result_is_reduced(prime, word_bits):
    pd = _mont(prime, word_bits)
    top = prime - 1
    result = mont_multiply(top, top, pd)
    assert 0 <= result < prime
    assert result * compute_r(pd) % prime == top * top % prime


@settings(max_examples=60)
@given(
    st.integers(min_value=0, max_value=MERSENNE_127 - 1),
    st.integers(min_value=0, max_value=MERSENNE_127 - 1),
)
def test_cr_multiply_matches_plain(a, b):
    pd = _mont(MERSENNE_127, 64)
    assert cr_mont_multiply(a, b, pd) == mont_multiply(a, b, pd)


@settings(max_examples=60)
@given(
    st.integers(min_value=0, max_value=P256 - 1),
    st.integers(min_value=0, max_value=P256 - 1),
)
def test_mult_two_mont_gives_normal_product(a, b):
    pd = _mont(P256)
    assert mult_two_mont(a, b, pd, pd.r_squared) == a * b % P256


@pytest.mark.parametrize("prime,word_bits", CONFIGS)
@pytest.mark.parametrize("value", [1, 2, 3, 5, 100])
def test_inverse_binary(prime, word_bits, value):
    pd = _mont(prime, word_bits)
    a = value % prime
    inverse = mont_inverse_binary(normal_to_montgomery(a, pd), pd)
    assert montgomery_to_normal(inverse, pd) * a % prime == 1


@settings(max_examples=40)
@given(st.integers(min_value=1, max_value=P256 - 1))
def test_inverse_binary_p256(a):
    pd = _mont(P256)
    inverse = mont_inverse_binary(normal_to_montgomery(a, pd), pd)
    assert montgomery_to_normal(inverse, pd) * a % P256 == 1


@settings(max_examples=20)
@given(st.integers(min_value=1, max_value=P256 - 1))
def test_inverse_fermat_agrees_with_binary(a):
    pd = _mont(P256)
    mont_a = normal_to_montgomery(a, pd)
    assert mont_inverse_fermat(mont_a, pd) == mont_inverse_binary(mont_a, pd)


def test_inverse_binary_of_zero_raises():
    pd = _mont(P256)
    with pytest.raises(ZeroDivisionError):
        mont_inverse_binary(0, pd)


def test_inverse_fermat_of_zero_is_zero():
    pd = _mont(10007, 16)
    assert mont_inverse_fermat(0, pd) == 0


@settings(max_examples=40)
@given(
    st.integers(min_value=0, max_value=10006),
    st.integers(min_value=0, max_value=50000),
)
def test_exponent(a, exponent):
    pd = _mont(10007, 16)
    result = mont_exponent(normal_to_montgomery(a, pd), exponent, pd)
    assert montgomery_to_normal(result, pd) == pow(a, exponent, 10007)


def test_exponent_zero_gives_one():
    pd = _mont(P256)
    assert mont_exponent(normal_to_montgomery(7, pd), 0, pd) == pd.gfp_one


def test_negative_exponent_rejected():
    pd = _mont(P256)
    with pytest.raises(ValueError):
        mont_exponent(1, -1, pd)


def test_unset_constants_are_derived():
    configured = _mont(P256)
    bare = PrimeData(P256)
    a, b = 123456789, 987654321
    assert mont_multiply(a, b, bare) == mont_multiply(a, b, configured)
    assert normal_to_montgomery(a, bare) == normal_to_montgomery(a, configured)