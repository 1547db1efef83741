#!/usr/bin/env python3
"""
Verify the sieve against trial division.

Compares:
1. iter_primes (streaming sieve) output
2. prime_flags_below flags
3. primes_below array

against an independent trial-division primality test, and checks that
the stream is strictly increasing and contains no composites.

Trial division is O(N sqrt N); keep N small (default 1e4).
"""

import sys
import time
from math import isqrt
from typing import List

import numpy as np

from .sieve import iter_primes, prime_flags_below, primes_below, validate_bound


def is_prime_trial_division(n: int) -> bool:
    """Reference primality test by trial division."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def trial_division_primes_below(N: int) -> List[int]:
    """All primes < N by trial division."""
    return [n for n in range(2, N) if is_prime_trial_division(n)]


def verify_bound(N: int, verbose: bool = True) -> bool:
    """
    Cross-check every sieve entry point for a single bound.

    Parameters
    ----------
    N : int
        Exclusive upper bound.
    verbose : bool
        Print a report to stderr.

    Returns
    -------
    bool
        True if all checks pass.
    """
    N = validate_bound(N)
    if verbose:
        print(f"\n=== Verifying primes below N={N:,} ===", file=sys.stderr)

    t0 = time.time()
    expected = trial_division_primes_below(N)
    t_ref = time.time() - t0

    t0 = time.time()
    streamed = list(iter_primes(N))
    t_sieve = time.time() - t0

    flags = prime_flags_below(N)
    array = primes_below(N)

    if verbose:
        print(f"  Trial division: {t_ref:.2f}s, {len(expected):,} primes", file=sys.stderr)
        print(f"  Sieve: {t_sieve:.2f}s, {len(streamed):,} primes", file=sys.stderr)

    checks = {
        'stream matches trial division': streamed == expected,
        'array matches trial division': array.tolist() == expected,
        'flags match trial division': np.nonzero(flags)[0].tolist() == expected,
        'stream strictly increasing': all(a < b for a, b in zip(streamed, streamed[1:])),
        'no composites in stream': all(is_prime_trial_division(p) for p in streamed),
    }

    if verbose:
        for name, ok in checks.items():
            mark = '✓' if ok else '✗'
            print(f"  {mark} {name}", file=sys.stderr)
        if not checks['stream matches trial division']:
            missing = sorted(set(expected) - set(streamed))[:10]
            extra = sorted(set(streamed) - set(expected))[:10]
            print(f"    missing: {missing}", file=sys.stderr)
            print(f"    extra:   {extra}", file=sys.stderr)

    return all(checks.values())


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify sieve correctness')
    parser.add_argument('--N', type=float, default=1e4, help='Exclusive bound (default: 1e4)')
    args = parser.parse_args()

    if verify_bound(args.N):
        print("✓ All verifications passed!", file=sys.stderr)
    else:
        print("✗ Some verifications failed!", file=sys.stderr)
        sys.exit(1)
