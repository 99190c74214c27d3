"""Accuracy and speed benchmarks for the HyperLogLog estimator."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Sequence
from decimal import Decimal

from .hll import HLL


def compute_relative_error(approx_val: float, true_val: float) -> float:
    """|approx - true| / |true|, with IEEE results for a zero true value."""
    diff = abs(approx_val - true_val)
    if true_val == 0:
        return math.nan if diff == 0 or math.isnan(diff) else math.inf
    return diff / abs(true_val)


def median(values: Sequence[float]) -> float:
    """Walk the values, following each new minimum, until half of them were counted.

    Returns the value reached then, or the last value if that never happens.
    """
    if not values:
        raise ValueError("median of an empty sequence")
    threshold = len(values) // 2
    count = 0
    current = values[0]
    for value in values:
        if current >= value:
            count += 1
            current = value
        if count >= threshold:
            return current
    return values[-1]


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def benchmark_accuracy_hll(num_bucket_bits: int = 28, max_exponent: int = 9, runs: int = 100) -> list[float]:
    """Median relative error for cardinalities 10**0 .. 10**(max_exponent - 1)."""
    results = []
    for exponent in range(max_exponent):
        true_cardinality = 10**exponent
        errors = []
        for _ in range(runs):
            hll = HLL(num_bucket_bits)
            for data in range(true_cardinality):
                hll.read_data(data)
            errors.append(compute_relative_error(hll.get_cardinality(), float(true_cardinality)))
        results.append(median(errors))
    return results


def run_benchmark_speed(num_bucket_bits: int = 12, num_items: int = 1_000_000_000) -> tuple[float, float, float]:
    """Time reading random values and estimating; returns (read_secs, estimate_secs, estimate)."""
    hll = HLL(num_bucket_bits)
    rng = random.Random()
    start = time.perf_counter()
    for _ in range(num_items):
        hll.read_data(rng.getrandbits(64))
    read_secs = time.perf_counter() - start
    print(f"Finished Reading Stream and Counting in {_format_float(read_secs)} secs")
    start = time.perf_counter()
    estimate = hll.get_cardinality()
    estimate_secs = time.perf_counter() - start
    print(
        f"Finished Cardinality Estimatings in {_format_float(estimate_secs)} secs "
        f"with results = {_format_float(estimate)}!"
    )
    return read_secs, estimate_secs, estimate


def run_benchmark_accuracy(num_bucket_bits: int = 28, num_items: int = 1_000_000_000) -> float:
    """Estimate the cardinality of 0..num_items-1 and report it."""
    hll = HLL(num_bucket_bits)
    for data in range(num_items):
        hll.read_data(data)
    estimate = hll.get_cardinality()
    print(
        f"Finished Cardinality Estimatings with results = {_format_float(estimate)} "
        f"and real cardinality = {num_items}!"
    )
    return estimate


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hllcompare", description="HyperLogLog benchmarks")
    parser.add_argument("benchmark", nargs="?", choices=("hll", "speed", "accuracy"), default="hll")
    parser.add_argument("--bucket-bits", type=int, default=None)
    parser.add_argument("--max-exponent", type=int, default=9)
    parser.add_argument("--runs", type=int, default=100)
    parser.add_argument("--items", type=int, default=1_000_000_000)
    args = parser.parse_args(argv)

    if args.benchmark == "speed":
        run_benchmark_speed(args.bucket_bits if args.bucket_bits is not None else 12, args.items)
    elif args.benchmark == "accuracy":
        run_benchmark_accuracy(args.bucket_bits if args.bucket_bits is not None else 28, args.items)
    else:
        bits = args.bucket_bits if args.bucket_bits is not None else 28
        for error in benchmark_accuracy_hll(bits, args.max_exponent, args.runs):
            print(f"{_format_float(error)}, ")
        print()
    return 0