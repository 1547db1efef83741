"""
Sieve of Eratosthenes over a flat boolean array.

Responsibility: prime generation only. No formatting, no I/O.

The array is_prime holds one flag per integer in [0, N). At completion
is_prime[k] is True iff k is prime. Multiples of each prime p are cleared
starting at p*p; smaller multiples were already cleared by smaller primes.
"""

import sys
from math import isqrt
from typing import Iterator

import numpy as np

# Exclusive upper bound used when no bound is given.
N_MAX = 1_000_000


class InvalidBound(ValueError):
    """Raised when a sieve bound is not an integer in [2, sys.maxsize]."""


def validate_bound(N) -> int:
    """
    Check a sieve bound before anything is allocated.

    Parameters
    ----------
    N : int
        Exclusive upper bound. Integral floats (1e6) are accepted.

    Returns
    -------
    int
        The bound as a plain int.

    Raises
    ------
    InvalidBound
        If N is not integral, is below 2, or cannot be an array length.
    """
    if isinstance(N, bool):
        raise InvalidBound(f"bound must be an integer, got {N!r}")
    if isinstance(N, float):
        if not N.is_integer():
            raise InvalidBound(f"bound must be an integer, got {N!r}")
        N = int(N)
    elif isinstance(N, (int, np.integer)):
        N = int(N)
    else:
        raise InvalidBound(f"bound must be an integer, got {type(N).__name__}")

    if N < 2:
        raise InvalidBound(f"bound must be >= 2, got {N:,}")
    if N > sys.maxsize:
        raise InvalidBound(f"bound {N:,} exceeds addressable size {sys.maxsize:,}")
    return N


def _new_flags(N: int) -> np.ndarray:
    is_prime = np.ones(N, dtype=bool)
    is_prime[0] = is_prime[1] = False
    return is_prime


def iter_primes(N: int = N_MAX) -> Iterator[int]:
    """
    Yield every prime below N, each one as soon as it is confirmed.

    Sieving is interleaved with the output: when the scan reaches i and
    is_prime[i] is still set, i is yielded and its multiples from i*i
    onward are cleared before the scan moves on.

    Parameters
    ----------
    N : int
        Exclusive upper bound (default N_MAX).

    Returns
    -------
    iterator of int
        Primes in strictly increasing order.

    Raises
    ------
    InvalidBound
        At call time, not on first iteration.
    """
    return _sieve_stream(validate_bound(N))


def _sieve_stream(N: int) -> Iterator[int]:
    is_prime = _new_flags(N)
    # Past this point i*i >= N, so there is nothing left to clear.
    last_marker = isqrt(N - 1)

    for i in range(2, N):
        if not is_prime[i]:
            continue
        if i <= last_marker:
            is_prime[i * i::i] = False
        yield i


def prime_flags_below(N: int = N_MAX) -> np.ndarray:
    """
    Return boolean array where flags[k] is True iff k is prime.

    Parameters
    ----------
    N : int
        Upper bound (exclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N.
    """
    N = validate_bound(N)
    flags = _new_flags(N)
    for p in range(2, isqrt(N - 1) + 1):
        if flags[p]:
            flags[p * p::p] = False
    return flags


def primes_below(N: int = N_MAX) -> np.ndarray:
    """
    Return array of all primes < N.

    Parameters
    ----------
    N : int
        Upper bound (exclusive).

    Returns
    -------
    np.ndarray
        Array of primes, ascending.
    """
    flags = prime_flags_below(N)
    return np.nonzero(flags)[0]


def prime_count_below(N: int = N_MAX) -> int:
    """Number of primes < N."""
    return int(np.count_nonzero(prime_flags_below(N)))
