"""
Timing and memory benchmark for :class:`OrderedMap`.

Each operation is run against random integer pairs at exponentially growing
input sizes. Results go to a CSV with one row per (operation, size).
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Optional

from .datastructures import OrderedMap

_logger = logging.getLogger(__name__)

Pairs = list[tuple[int, int]]

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# Number of keys probed by the keyed read/remove operations.
PROBES = 3


# ----------------------------
# Helper functions
# ----------------------------

def generate_random_pairs(size: int, rng: Optional[random.Random] = None) -> Pairs:
    """Generate `size` random key/value pairs (keys may repeat)."""
    rng = rng or random
    return [(rng.randint(0, size * 10), rng.randint(0, 1000000)) for _ in range(size)]


def build_map(data: Pairs) -> OrderedMap[int, int]:
    """Fill a map through upsert so repeated keys collapse as callers would see."""
    m: OrderedMap[int, int] = OrderedMap()
    for k, v in data:
        m.upsert(k, v)
    return m


def measure_operation_time(operation: Callable[[Pairs], object], input_size: int,
                           iterations: int = 5) -> tuple[float, float]:
    """Run the operation `iterations` times; return mean and stdev in ms."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        times.append((time.perf_counter() - start) * 1000)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return statistics.mean(times), std_dev


def measure_space(operation: Callable[[Pairs], OrderedMap], input_size: int,
                  iterations: int = 3) -> float:
    """Approximate bytes held by the map: container, buffer, entries, keys and values."""
    sizes = []
    for _ in range(iterations):
        m = operation(generate_random_pairs(input_size))
        sizes.append(map_footprint(m))
    return statistics.mean(sizes)


def map_footprint(m: OrderedMap) -> int:
    """Bytes of the map shell, its ctypes buffer, every Entry and its key/value."""
    entries = m._entries
    total = sys.getsizeof(m) + sys.getsizeof(entries) + sys.getsizeof(entries._buf)
    for e in entries:
        total += sys.getsizeof(e) + sys.getsizeof(e.key) + sys.getsizeof(e.value)
    return total


# ----------------------------
# Operations to benchmark
# ----------------------------

def op_upsert(data: Pairs) -> OrderedMap[int, int]:
    return build_map(data)


def op_lookup(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    for k, _ in data[:PROBES]:
        m.lookup(k)
    return m


def op_has_key(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    for k, _ in data[:PROBES]:
        m.has_key(k)
    return m


def op_pop(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    for k, _ in data[:PROBES]:
        m.pop(k, None)
    return m


def op_keys(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    m.keys()
    return m


def op_vals(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    m.vals()
    return m


def op_items(data: Pairs) -> OrderedMap[int, int]:
    m = build_map(data)
    m.items()
    return m


OPERATIONS: dict[str, Callable[[Pairs], OrderedMap]] = {
    "upsert": op_upsert,
    "lookup": op_lookup,
    "has_key": op_has_key,
    "pop": op_pop,
    "keys": op_keys,
    "vals": op_vals,
    "items": op_items,
}


# ----------------------------
# Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, rounds: int = 8,
                   iterations: int = 5, operations: Optional[list[str]] = None) -> int:
    """Benchmark the selected operations and write the CSV report.

    Input sizes are ``base_input * 2**i`` for ``i`` in ``range(rounds)``.
    Returns the number of rows written.
    """
    names = operations or list(OPERATIONS)
    unknown = [n for n in names if n not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown operation(s): {', '.join(unknown)}")

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = 0
    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)
        for name in names:
            op = OPERATIONS[name]
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op, size, iterations)
                avg_space = measure_space(op, size)
                writer.writerow([size, name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows += 1
                _logger.info("%-8s size=%-8d avg=%.3fms std=%.3fms space=%.0fB",
                             name, size, avg_time, std_time, avg_space)
    return rows
