"""
Text output for prime streams.

Primes are written as they arrive, separated by a single character
(tab by default), and the stream is closed off with one newline.
"""

import sys
from typing import Iterable, TextIO

DEFAULT_SEPARATOR = '\t'


def validate_separator(sep) -> str:
    """
    Check that a separator is non-empty whitespace.

    Raises
    ------
    ValueError
        If sep is not a string, is empty, or contains non-whitespace.
    """
    if not isinstance(sep, str) or not sep or not sep.isspace():
        raise ValueError(f"separator must be non-empty whitespace, got {sep!r}")
    return sep


def write_primes(primes: Iterable[int], stream: TextIO = None,
                 sep: str = DEFAULT_SEPARATOR) -> int:
    """
    Write primes to a text stream.

    Parameters
    ----------
    primes : iterable of int
        Values to write. Consumed lazily, so a generator is written
        while it is still producing.
    stream : file-like, optional
        Destination (default sys.stdout).
    sep : str
        Separator placed between consecutive values.

    Returns
    -------
    int
        Number of values written.
    """
    if stream is None:
        stream = sys.stdout

    validate_separator(sep)

    count = 0
    for p in primes:
        if count:
            stream.write(sep)
        stream.write(str(p))
        count += 1
    stream.write('\n')
    return count


def format_primes(primes: Iterable[int], sep: str = DEFAULT_SEPARATOR) -> str:
    """Join primes into one line of text, without the trailing newline."""
    validate_separator(sep)
    return sep.join(str(int(p)) for p in primes)
