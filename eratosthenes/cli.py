"""
Command line entry point.

With no arguments, prints every prime below N_MAX to stdout, tab
separated and newline terminated. Progress and timings (--verbose) go
to stderr so stdout carries only the primes.

Usage:
    primes
    primes --N 1e3
    primes --config config/default.yaml --verbose
    primes --N 1e5 --count
    primes --N 1e4 --verify
"""

import argparse
import sys
import time
from typing import List, Optional

from .config import load_config
from .output import validate_separator, write_primes
from .sieve import iter_primes, prime_count_below, validate_bound
from .verify import verify_bound


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Print all primes below a bound (sieve of Eratosthenes)')
    parser.add_argument('--N', type=float, default=None,
                        help='Exclusive bound, e.g. 1e6 (default: from config, else 1,000,000)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--sep', type=str, default=None,
                        help='Whitespace separator between primes (default: tab)')
    parser.add_argument('--count', action='store_true',
                        help='Print only the number of primes below the bound')
    parser.add_argument('--verify', action='store_true',
                        help='Check the sieve against trial division instead of printing')
    parser.add_argument('--verbose', action='store_true',
                        help='Report progress and timings on stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        N = validate_bound(args.N) if args.N is not None else config['bound']
        sep = validate_separator(args.sep) if args.sep is not None else config['separator']
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    if args.verbose:
        print("=" * 60, file=sys.stderr)
        print(f"Sieve of Eratosthenes: N = {N:,}", file=sys.stderr)
        print("=" * 60, file=sys.stderr)

    start = time.time()

    if args.verify:
        ok = verify_bound(N, verbose=args.verbose)
        print("PASS" if ok else "FAIL")
        return 0 if ok else 1

    if args.count:
        count = prime_count_below(N)
        print(count)
    else:
        count = write_primes(iter_primes(N), sys.stdout, sep)

    if args.verbose:
        print(f"  {count:,} primes in {time.time() - start:.2f}s", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
