"""Minimal formatted output understanding %d, %l, %x, %p, %s and %c."""

import sys

_DIGITS = "0123456789ABCDEF"


def _to_int32(value):
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _printint(value, base, signed):
    xx = _to_int32(value)
    negative = signed and xx < 0
    x = -xx if negative else xx & 0xFFFFFFFF
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _printptr(value):
    return "0x" + format(int(value) & ((1 << 64) - 1), "016X")


def format_message(fmt, *args):
    """Render *fmt* with *args* and return the resulting text.

    %l values pass through a 32-bit integer, so only their low 32 bits
    are printed, as unsigned. A lone trailing % prints nothing.
    """
    remaining = iter(args)

    def take(conv):
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conv}") from None

    out = []
    pending = False
    for ch in fmt:
        if not pending:
            if ch == "%":
                pending = True
            else:
                out.append(ch)
            continue
        pending = False
        if ch == "d":
            out.append(_printint(take(ch), 10, True))
        elif ch == "l":
            out.append(_printint(take(ch), 10, False))
        elif ch == "x":
            out.append(_printint(take(ch), 16, False))
        elif ch == "p":
            out.append(_printptr(take(ch)))
        elif ch == "s":
            s = take(ch)
            out.append("(null)" if s is None else str(s))
        elif ch == "c":
            c = take(ch)
            out.append(c[:1] if isinstance(c, str) else chr(int(c) & 0xFF))
        elif ch == "%":
            out.append("%")
        else:
            out.append("%" + ch)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write the formatted message to the text *stream*."""
    stream.write(format_message(fmt, *args))


def printf(fmt, *args):
    """Write the formatted message to standard output."""
    fprintf(sys.stdout, fmt, *args)