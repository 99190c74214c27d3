"""The original HyperLogLog cardinality estimator."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .universalhash import UniversalHashFunction, UniversalHashFunctionsFamily

_HASH_BITS = 64
_TWO_POW_32 = 2.0**32


def compute_bias_correction_value(num_buckets: int) -> float:
    """Bias correction factor used in the raw estimate."""
    if num_buckets == 16:
        return 0.673
    if num_buckets == 32:
        return 0.697
    if num_buckets == 64:
        return 0.709
    return (0.7213 / (1.0 + 1.079 / num_buckets)) * float(num_buckets**2)


def linear_counting_estimate(num_buckets: int, num_empty_buckets: int) -> float:
    """Linear counting estimate from the number of empty buckets."""
    return num_buckets * math.log(num_buckets / num_empty_buckets)


def large_range_correction(raw_estimate: float) -> float:
    """Correction for estimates close to the 32-bit hash space."""
    argument = 1.0 - raw_estimate / _TWO_POW_32
    if argument == 0.0:
        return math.inf
    if argument < 0.0:
        return math.nan
    return -_TWO_POW_32 * math.log(argument)


def _leading_zeros(value: int) -> int:
    return _HASH_BITS - value.bit_length()


class HLL:
    """HyperLogLog sketch with 2**num_bucket_bits buckets over 64-bit hashes."""

    def __init__(self, num_bucket_bits: int, hash_function: UniversalHashFunction | None = None) -> None:
        if not 1 <= num_bucket_bits < _HASH_BITS:
            raise ValueError(f"num_bucket_bits must be in 1..{_HASH_BITS - 1}, got {num_bucket_bits}")
        self.num_bucket_bits = num_bucket_bits
        self.num_buckets = 1 << num_bucket_bits
        self.bias_correction_value = compute_bias_correction_value(self.num_buckets)
        # Ranks never exceed 64, so a byte per bucket is enough.
        self._buckets = bytearray(self.num_buckets)
        if hash_function is None:
            hash_function = UniversalHashFunctionsFamily(_HASH_BITS).construct_new_hash_function_with_random_seeds()
        self.hash_function = hash_function
        self._data_mask = (1 << (_HASH_BITS - num_bucket_bits)) - 1

    @property
    def buckets(self) -> bytes:
        """A snapshot of the bucket ranks."""
        return bytes(self._buckets)

    def _split(self, data: int) -> tuple[int, int]:
        hashed = self.hash_function.hash64(data)
        return hashed >> (_HASH_BITS - self.num_bucket_bits), hashed & self._data_mask

    def read_data(self, data: int) -> None:
        """Add one value, raising its bucket to the new rank when larger."""
        bucket_idx, data_bits = self._split(data)
        leading_zeros = _leading_zeros(data_bits)
        if leading_zeros > self._buckets[bucket_idx]:
            self._buckets[bucket_idx] = leading_zeros

    def read_stream(self, input_stream: Iterable[int]) -> None:
        """Fold a stream in, lowering each touched bucket to a smaller rank only."""
        for data in input_stream:
            bucket_idx, data_bits = self._split(data)
            leading_zeros = _leading_zeros(data_bits)
            if leading_zeros < self._buckets[bucket_idx]:
                self._buckets[bucket_idx] = leading_zeros

    def get_cardinality(self) -> float:
        """Estimate the number of distinct values read so far."""
        harmonic_sum = math.fsum(2.0**-rank for rank in self._buckets)
        raw_estimate = self.bias_correction_value * (1.0 / harmonic_sum)
        return self._correct(raw_estimate)

    def _correct(self, raw_estimate: float) -> float:
        if raw_estimate < 2.5 * self.num_buckets:
            num_empty = self._buckets.count(0)
            if num_empty:
                return linear_counting_estimate(self.num_buckets, num_empty)
            return raw_estimate
        if raw_estimate > _TWO_POW_32 / 30.0:
            return large_range_correction(raw_estimate)
        return raw_estimate