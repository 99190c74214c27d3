"""HyperLogLog estimation with multiply-shift universal hashing, and its benchmarks."""

__version__ = "0.1.0"
__all__ = ["universalhash", "hll", "benchmark"]