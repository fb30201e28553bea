"""Prime sieve built as a chain of filtering stages."""

import sys

from .fmt import fprintf

_FIRST = 2
_LIMIT = 36
_INT_SIZE = 4


def primes_sieve(numbers):
    """Yield the head of each sieve stage fed with *numbers*.

    Each stage keeps its first value and passes on only the values not
    divisible by it. Fed 2, 3, 4, ... this yields the primes.
    """
    remaining = list(numbers)
    while remaining:
        head, *rest = remaining
        yield head
        remaining = [n for n in rest if n % head != 0]


def main(argv=None):
    """Print the primes below 36, one stage at a time."""
    out = sys.stdout
    for prime in primes_sieve(range(_FIRST, _LIMIT)):
        fprintf(out, "res1 == %d \n", _INT_SIZE)
        fprintf(out, "primes %d \n", prime)
    fprintf(out, "res1 == %d \n", 0)
    fprintf(out, "Done \n")
    return 0