"""Multiply-shift universal hash functions over 64-bit inputs."""

from __future__ import annotations

import random
from dataclasses import dataclass

_INPUT_BITS_2X = 64 * 2
_MASK_128 = (1 << 128) - 1
_MASK_64 = (1 << 64) - 1
_MASK_32 = (1 << 32) - 1


@dataclass(frozen=True)
class UniversalHashFunction:
    """One member of the multiply-shift family: ((a * x + b) mod 2**128) >> (128 - bits)."""

    hash_results_num_bits: int
    seed_a: int
    seed_b: int

    def __post_init__(self) -> None:
        if not 1 <= self.hash_results_num_bits <= _INPUT_BITS_2X:
            raise ValueError(
                f"hash_results_num_bits must be in 1..{_INPUT_BITS_2X}, "
                f"got {self.hash_results_num_bits}"
            )
        for name in ("seed_a", "seed_b"):
            seed = getattr(self, name)
            if not 0 <= seed <= _MASK_128:
                raise ValueError(f"{name} must be an unsigned 128-bit integer")

    def hash(self, val: int) -> int:
        """Hash ``val`` to a 128-bit wide result."""
        return self.hash128(val)

    def hash128(self, val: int) -> int:
        """Hash an unsigned 64-bit value; arithmetic wraps at 128 bits."""
        if not 0 <= val <= _MASK_64:
            raise ValueError(f"value must be an unsigned 64-bit integer, got {val}")
        product = (self.seed_a * val + self.seed_b) & _MASK_128
        return product >> (_INPUT_BITS_2X - self.hash_results_num_bits)

    def hash64(self, val: int) -> int:
        """The low 64 bits of :meth:`hash128`."""
        return self.hash128(val) & _MASK_64

    def hash32(self, val: int) -> int:
        """The low 32 bits of :meth:`hash128`."""
        return self.hash64(val) & _MASK_32


class UniversalHashFunctionsFamily:
    """Factory of multiply-shift hash functions with a fixed output width."""

    def __init__(self, hash_results_num_bits: int, rng: random.Random | None = None) -> None:
        self.hash_results_num_bits = hash_results_num_bits
        self._rng = rng if rng is not None else random.Random()

    def construct_new_hash_function(self, seed_a: int, seed_b: int) -> UniversalHashFunction:
        """Build a hash function from explicit seeds."""
        return UniversalHashFunction(self.hash_results_num_bits, seed_a, seed_b)

    def construct_new_hash_function_with_random_seeds(self) -> UniversalHashFunction:
        """Build a hash function from two random 128-bit seeds."""
        seed_a = self._rng.getrandbits(128)
        seed_b = self._rng.getrandbits(128)
        return self.construct_new_hash_function(seed_a, seed_b)