# hllcompare

This package is a HyperLogLog cardinality estimator. It hashes values with a
multiply-shift universal hash family. It also includes small benchmarks of the
estimator's accuracy and speed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing

`hllcompare.universalhash.UniversalHashFunction(hash_results_num_bits, seed_a, seed_b)`
hashes an unsigned 64-bit value `x` to `((seed_a * x + seed_b) mod 2**128) >> (128 - hash_results_num_bits)`.

- `hash` and `hash128` return that result.
- `hash64` returns its low 64 bits.
- `hash32` returns its low 32 bits.

A `ValueError` is raised in these cases:

- `hash_results_num_bits` is outside 1..128.
- A seed is not an unsigned 128-bit integer.
- An input is not an unsigned 64-bit integer.

`UniversalHashFunctionsFamily(hash_results_num_bits, rng=None)` creates functions with a fixed output width:

- `construct_new_hash_function(seed_a, seed_b)` builds one from explicit seeds.
- `construct_new_hash_function_with_random_seeds()` draws two 128-bit seeds from `rng`. If no `rng` is given, it uses a fresh `random.Random`.

## The estimator

```python
from hllcompare.hll import HLL

sketch = HLL(num_bucket_bits=12)
for item in range(100_000):
    sketch.read_data(item)
print(sketch.get_cardinality())
```

`HLL(num_bucket_bits, hash_function=None)` keeps `2 ** num_bucket_bits` buckets. `num_bucket_bits` must be in 1..63.

If `hash_function` is not given, a random 64-bit multiply-shift function is drawn. For reproducible runs, pass your own function. Each hash is split in two parts:

- The top `num_bucket_bits` bits choose the bucket.
- The remaining bits give a rank. The rank is the number of leading zeros of those bits counted in the full 64-bit word.

Methods and attributes:

- `read_data(value)` raises the chosen bucket to the new rank if the new rank is larger.
- `read_stream(iterable)` goes over an iterable of values. It **lowers** a bucket to the new rank only if the new rank is smaller. Buckets start at zero, so on a fresh sketch it changes nothing. Use `read_data` in a loop to add values.
- `get_cardinality()` returns the estimate. When the raw estimate is below `2.5 * num_buckets` and some buckets are empty, it uses linear counting. When the raw estimate is above `2**32 / 30`, it applies the 2^32 large-range correction. That correction gives `inf` at exactly `2**32` and `nan` beyond.
- `buckets` is a `bytes` snapshot of the bucket ranks.

The module-level helper formulas are also public:

- `compute_bias_correction_value(num_buckets)`
- `linear_counting_estimate(num_buckets, num_empty_buckets)`
- `large_range_correction(raw_estimate)`

## Benchmarks

The command has three modes.

```
hllcompare [hll|speed|accuracy] [--bucket-bits N] [--max-exponent N] [--runs N] [--items N]
```

- `hll` (the default) runs the accuracy sweep. For each cardinality from `10**0` to `10**(max-exponent - 1)`, it fills `--runs` fresh sketches with `0..cardinality-1`. It then prints the `median` of their relative errors, one value per line followed by `", "`, and ends with a blank line. Defaults: 28 bucket bits, max exponent 9, 100 runs.
- `speed` reads `--items` random 64-bit values into a sketch. It prints how long the reads took, then how long the estimate took and the estimate itself. Defaults: 12 bucket bits, 1,000,000,000 items.
- `accuracy` reads the values `0..items-1` into one sketch. It prints the estimate and the true count. Defaults: 28 bucket bits, 1,000,000,000 items.

The defaults are very slow in pure Python. For quick runs, pass smaller values.

The same functions can be called from `hllcompare.benchmark`:

- `benchmark_accuracy_hll(num_bucket_bits, max_exponent, runs)` returns the list of medians.
- `run_benchmark_speed(num_bucket_bits, num_items)` returns `(read_secs, estimate_secs, estimate)`.
- `run_benchmark_accuracy(num_bucket_bits, num_items)` returns the estimate.
- `compute_relative_error(approx_val, true_val)` returns `|approx - true| / |true|`. When the true value is zero, it returns `inf`, or `nan` when the approximation is also zero.
- `median(values)` is not a sorted median. It walks the values, following each new running minimum, until half of the values have been counted. It returns the value reached at that point, or the last value if that point is never reached. It raises `ValueError` on an empty sequence.

## What it does not do

The package has only the original HyperLogLog estimator. It has no HyperLogLog++ or other variants, so the benchmarks measure that one estimator alone and do not compare it against others.