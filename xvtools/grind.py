"""Park-Miller pseudo-random numbers used to drive random stress runs."""

_MODULUS = 0x7FFFFFFF
_U64 = (1 << 64) - 1


def do_rand(ctx):
    """Return the successor of state *ctx*, in [0, 0x7ffffffd].

    Computes (7**5 * x) mod (2**31 - 1) without overflowing 31 bits,
    where x is *ctx* moved into [1, 0x7ffffffe]. The result is also the
    next state.
    """
    x = (ctx & _U64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += _MODULUS
    return x - 1


class Rand:
    """A generator holding its own state, starting from *seed*."""

    def __init__(self, seed=1):
        self.state = seed & _U64

    def next(self):
        """Advance the state and return the new value."""
        self.state = do_rand(self.state)
        return self.state