"""
Tests for the sieve engine.

Every entry point is checked against trial division for small bounds,
plus the boundary bounds 2, 3, 10 and 50 and the full default run.
"""

import sys

import numpy as np
import pytest

from eratosthenes.sieve import (
    N_MAX,
    InvalidBound,
    iter_primes,
    prime_count_below,
    prime_flags_below,
    primes_below,
    validate_bound,
)
from eratosthenes.verify import is_prime_trial_division, trial_division_primes_below


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25, 49]


class TestBoundaryBounds:
    """Smallest bounds and the documented examples."""

    def test_bound_two_is_empty(self):
        assert list(iter_primes(2)) == []
        assert primes_below(2).tolist() == []

    def test_bound_three(self):
        assert list(iter_primes(3)) == [2]

    def test_bound_ten(self):
        assert list(iter_primes(10)) == [2, 3, 5, 7]

    def test_bound_is_exclusive(self):
        """A prime equal to the bound is not included."""
        assert list(iter_primes(11)) == [2, 3, 5, 7]
        assert list(iter_primes(12)) == [2, 3, 5, 7, 11]

    def test_flags_length_is_bound(self):
        for N in (2, 3, 10, 97):
            flags = prime_flags_below(N)
            assert len(flags) == N, f"prime_flags_below({N}) should have length {N}"
            assert flags.dtype == bool


class TestAgainstTrialDivision:
    """Sieve output equals trial division for every bound up to 1000."""

    def test_stream_matches_for_all_small_bounds(self):
        expected_all = trial_division_primes_below(1000)
        for N in range(2, 1001):
            expected = [p for p in expected_all if p < N]
            got = list(iter_primes(N))
            assert got == expected, f"iter_primes({N}) mismatch"

    @pytest.mark.parametrize("N", [2, 3, 4, 25, 49, 50, 100, 121, 1000])
    def test_array_and_flags_match(self, N):
        expected = trial_division_primes_below(N)
        assert primes_below(N).tolist() == expected
        assert np.nonzero(prime_flags_below(N))[0].tolist() == expected

    def test_known_primes_and_composites(self):
        flags = prime_flags_below(100)
        for p in SMALL_PRIMES:
            assert flags[p], f"{p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"{n} should not be prime"
        assert not flags[0]
        assert not flags[1]


class TestStreamProperties:
    """Ordering, composites and idempotence of the streaming sieve."""

    def test_strictly_increasing(self):
        primes = list(iter_primes(10_000))
        assert all(a < b for a, b in zip(primes, primes[1:]))

    def test_no_composites(self):
        for p in iter_primes(5_000):
            assert is_prime_trial_division(p), f"{p} is composite"

    def test_idempotent(self):
        assert list(iter_primes(5_000)) == list(iter_primes(5_000))

    def test_stream_is_lazy(self):
        """The first prime is available before the scan finishes."""
        stream = iter_primes(N_MAX)
        assert next(stream) == 2
        assert next(stream) == 3

    def test_stream_agrees_with_count(self):
        assert sum(1 for _ in iter_primes(10_000)) == prime_count_below(10_000) == 1229


class TestEliminationStartsAtSquare:
    """Multiples of p are cleared from p*p, not 2p."""

    def test_49_cleared_by_seven(self, monkeypatch):
        """With N=50, processing 7 clears exactly [49]."""
        import eratosthenes.sieve as sieve_mod

        cleared = {}
        real_new_flags = sieve_mod._new_flags

        class RecordingFlags(np.ndarray):
            def __setitem__(self, key, value):
                if isinstance(key, slice) and value is False:
                    cleared.setdefault(key.step, key.start)
                super().__setitem__(key, value)

        def recording_new_flags(N):
            return real_new_flags(N).view(RecordingFlags)

        monkeypatch.setattr(sieve_mod, '_new_flags', recording_new_flags)
        primes = list(sieve_mod.iter_primes(50))

        assert cleared == {2: 4, 3: 9, 5: 25, 7: 49}, f"unexpected start indices {cleared}"
        assert 49 not in primes
        assert primes == trial_division_primes_below(50)

    def test_primes_above_sqrt_clear_nothing(self, monkeypatch):
        """11 > sqrt(99), so no slice is cleared for it when N=100."""
        import eratosthenes.sieve as sieve_mod

        steps = []
        real_new_flags = sieve_mod._new_flags

        class RecordingFlags(np.ndarray):
            def __setitem__(self, key, value):
                if isinstance(key, slice):
                    steps.append(key.step)
                super().__setitem__(key, value)

        monkeypatch.setattr(sieve_mod, '_new_flags',
                            lambda N: real_new_flags(N).view(RecordingFlags))
        list(sieve_mod.iter_primes(100))

        assert steps == [2, 3, 5, 7]


class TestDefaultBound:
    """The full run below N_MAX."""

    def test_n_max_value(self):
        assert N_MAX == 1_000_000

    def test_default_count_and_last(self):
        primes = primes_below()
        assert len(primes) == 78498
        assert primes[-1] == 999983
        assert primes[0] == 2

    def test_stream_matches_array_at_default(self):
        assert np.array_equal(np.fromiter(iter_primes(), dtype=np.int64), primes_below())


class TestValidateBound:
    """Invalid bounds fail before allocation."""

    @pytest.mark.parametrize("bad", [1, 0, -5, 2.5, True, False, "10", None, 1e-3])
    def test_rejected(self, bad):
        with pytest.raises(InvalidBound):
            validate_bound(bad)

    def test_too_large(self):
        with pytest.raises(InvalidBound):
            validate_bound(sys.maxsize + 1)

    def test_accepted(self):
        assert validate_bound(2) == 2
        assert validate_bound(1e6) == 1_000_000
        assert validate_bound(np.int64(10)) == 10
        assert type(validate_bound(np.int64(10))) is int

    def test_invalid_bound_is_value_error(self):
        assert issubclass(InvalidBound, ValueError)

    def test_iter_primes_raises_at_call(self):
        with pytest.raises(InvalidBound):
            iter_primes(1)

    @pytest.mark.parametrize("fn", [prime_flags_below, primes_below, prime_count_below])
    def test_array_functions_raise(self, fn):
        with pytest.raises(InvalidBound):
            fn(0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
