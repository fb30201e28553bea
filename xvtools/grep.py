"""Line filter supporting the ^ . * $ regular-expression operators."""

import os
import sys

from .fmt import fprintf

_BUF_SIZE = 1024


class _Latin1Reader:
    """Present a binary stream as text, one character per byte."""

    def __init__(self, stream):
        self._stream = stream

    def read(self, size):
        return self._stream.read(size).decode("latin-1")


class _Latin1Writer:
    """Write text to a binary stream, one byte per character."""

    def __init__(self, stream):
        self._stream = stream

    def write(self, text):
        self._stream.write(text.encode("latin-1"))


def _matchhere(pattern, pi, text, ti):
    while True:
        if pi == len(pattern):
            return True
        if pi + 1 < len(pattern) and pattern[pi + 1] == "*":
            return _matchstar(pattern[pi], pattern, pi + 2, text, ti)
        if pattern[pi] == "$" and pi + 1 == len(pattern):
            return ti == len(text)
        if ti < len(text) and pattern[pi] in (".", text[ti]):
            pi += 1
            ti += 1
            continue
        return False


def _matchstar(c, pattern, pi, text, ti):
    while True:
        if _matchhere(pattern, pi, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def match(pattern, text):
    """Return True if *pattern* matches somewhere in *text*."""
    if pattern.startswith("^"):
        return _matchhere(pattern, 1, text, 0)
    return any(_matchhere(pattern, 0, text, start) for start in range(len(text) + 1))


def grep(pattern, stream, out):
    """Write each newline-terminated line of *stream* matching *pattern*.

    Lines are read through a buffer of 1024 characters; a line that
    does not fit stops the search, and a final line without a newline
    is never printed. Returns the number of lines written.
    """
    written = 0
    pending = ""
    while True:
        chunk = stream.read(_BUF_SIZE - 1 - len(pending))
        if not chunk:
            break
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")
                written += 1
    return written


def main(argv=None):
    """Run grep with *argv* (arguments after the command name)."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "usage: grep pattern [file ...]\n")
        return 1
    pattern = os.fsencode(argv[0]).decode("latin-1")
    sys.stdout.flush()
    out = _Latin1Writer(getattr(sys.stdout, "buffer", sys.stdout))

    if len(argv) == 1:
        grep(pattern, _Latin1Reader(getattr(sys.stdin, "buffer", sys.stdin)), out)
        return 0

    for path in argv[1:]:
        try:
            handle = open(path, "rb")
        except OSError:
            fprintf(sys.stdout, "grep: cannot open %s\n", path)
            return 1
        with handle:
            grep(pattern, _Latin1Reader(handle), out)
    return 0