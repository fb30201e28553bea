"""Count lines, words and characters."""

import sys
from dataclasses import dataclass

from .fmt import printf

# The terminating NUL of the separator string also counts as a separator.
_WHITESPACE = frozenset(" \r\t\n\v\0")


@dataclass(frozen=True)
class Counts:
    """Line, word and character totals."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(data):
    """Count the lines, words and characters of *data* (bytes or str)."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    lines = words = 0
    inword = False
    for ch in data:
        if ch == "\n":
            lines += 1
        if ch in _WHITESPACE:
            inword = False
        elif not inword:
            words += 1
            inword = True
    return Counts(lines, words, len(data))


def _report(stream, name):
    try:
        data = stream.read()
    except OSError:
        printf("wc: read error\n")
        return False
    c = count(data)
    printf("%d %d %d %s\n", c.lines, c.words, c.chars, name)
    return True


def main(argv=None):
    """Run wc with *argv* (arguments after the command name)."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0 if _report(getattr(sys.stdin, "buffer", sys.stdin), "") else 1

    for path in argv:
        try:
            handle = open(path, "rb")
        except OSError:
            printf("wc: cannot open %s\n", path)
            return 1
        with handle:
            if not _report(handle, path):
                return 1
    return 0