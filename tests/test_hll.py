import math
import random

import pytest

from hllcompare.hll import (
    HLL,
    compute_bias_correction_value,
    large_range_correction,
    linear_counting_estimate,
)
from hllcompare.universalhash import UniversalHashFunction, UniversalHashFunctionsFamily


def identity_hll(bits=4):
    return HLL(bits, hash_function=UniversalHashFunction(64, 1 << 64, 0))


@pytest.mark.parametrize("m,expected", [(16, 0.673), (32, 0.697), (64, 0.709)])
def test_precomputed_bias_values(m, expected):
    assert compute_bias_correction_value(m) == expected


def test_bias_formula_for_large_bucket_counts():
    m = 1 << 20
    assert compute_bias_correction_value(m) / float(m * m) == pytest.approx(0.7213, rel=1e-5)


def test_linear_counting_bounds():
    assert linear_counting_estimate(64, 64) == 0.0
    values = [linear_counting_estimate(64, e) for e in (64, 32, 16, 1)]
    assert values == sorted(values)


def test_large_range_correction_edges():
    assert large_range_correction(2.0**32) == math.inf
    assert math.isnan(large_range_correction(2.0**33))
    assert large_range_correction(1000.0) >= 1000.0


def test_fresh_sketch():
    hll = HLL(6)
    assert hll.buckets == bytes(64)
    assert hll.num_buckets == 64
    assert hll.get_cardinality() == 0.0


def test_read_data_sets_rank():
    hll = identity_hll()
    hll.read_data((3 << 60) | 1)
    assert hll.buckets[3] == 63
    assert sum(1 for b in hll.buckets if b) == 1


def test_read_data_keeps_maximum():
    hll = identity_hll()
    hll.read_data((3 << 60) | (1 << 10))
    first = hll.buckets[3]
    hll.read_data((3 << 60) | 1)
    assert hll.buckets[3] == 63
    hll.read_data((3 << 60) | (1 << 10))
    assert hll.buckets[3] == 63
    assert first < 63


def test_read_stream_only_lowers():
    hll = identity_hll()
    hll.read_stream(iter([(3 << 60) | 1, (5 << 60) | 1]))
    assert hll.buckets == bytes(16)
    hll.read_data((3 << 60) | 1)
    hll.read_stream([(3 << 60) | (1 << 10)])
    lowered = hll.buckets[3]
    assert lowered < 63
    hll.read_data((3 << 60) | (1 << 10))
    assert hll.buckets[3] == lowered


def test_single_item_estimate_uses_linear_counting():
    hll = HLL(4, UniversalHashFunctionsFamily(64, random.Random(3)).construct_new_hash_function_with_random_seeds())
    hll.read_data(12345)
    assert hll.get_cardinality() == pytest.approx(linear_counting_estimate(16, 15))


def test_estimate_grows_with_data():
    hf = UniversalHashFunctionsFamily(64, random.Random(9)).construct_new_hash_function_with_random_seeds()
    hll = HLL(8, hf)
    previous = hll.get_cardinality()
    for n in (10, 100):
        for v in range(n):
            hll.read_data(v)
        current = hll.get_cardinality()
        assert current > previous
        previous = current


@pytest.mark.parametrize("bits", [0, 64])
def test_invalid_bucket_bits(bits):
    with pytest.raises(ValueError):
        HLL(bits)