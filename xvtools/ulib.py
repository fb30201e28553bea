"""Small helpers for parsing numbers and reading lines."""

import io


def atoi(s):
    """Parse the leading decimal digits of *s* as a 32-bit signed int.

    No sign or leading whitespace is accepted; parsing stops at the
    first non-digit and an empty prefix gives 0.
    """
    n = 0
    for ch in s:
        if not "0" <= ch <= "9":
            break
        n = n * 10 + (ord(ch) - ord("0"))
    return ((n + (1 << 31)) % (1 << 32)) - (1 << 31)


def read_line(stream, size):
    """Read one line of at most ``size - 1`` characters from *stream*.

    Reading stops after a newline or carriage return, which is kept,
    or at end of input. The result is bytes for binary streams and
    str otherwise.
    """
    chunks = []
    while len(chunks) + 1 < size:
        c = stream.read(1)
        if not c:
            break
        chunks.append(c)
        if c in ("\n", "\r", b"\n", b"\r"):
            break
    if chunks:
        return chunks[0][:0].join(chunks)
    binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
    return b"" if binary else ""