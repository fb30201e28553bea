"""Small file and process utilities: cat, echo, kill, ln, mkdir, rm, sleep."""

import contextlib
import os
import signal
import sys
import time

from .fmt import fprintf, printf
from .ulib import atoi

_CHUNK = 512
_MAX_SLEEP_ARG = 256
TICK_SECONDS = 0.1


def _binary_out():
    sys.stdout.flush()
    return getattr(sys.stdout, "buffer", sys.stdout)


def cat(src, dst):
    """Copy binary *src* to *dst* in 512-byte chunks.

    Raises OSError naming the failing side on a read or write error.
    """
    while True:
        try:
            chunk = src.read(_CHUNK)
        except OSError as exc:
            raise OSError("cat: read error") from exc
        if not chunk:
            return
        try:
            written = dst.write(chunk)
        except OSError as exc:
            raise OSError("cat: write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")


def echo(args):
    """Return *args* joined by spaces with a newline, or "" for none."""
    if not args:
        return ""
    return " ".join(args) + "\n"


def cat_main(argv=None):
    """Concatenate the named files, or standard input, to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    out = _binary_out()
    try:
        if not argv:
            cat(getattr(sys.stdin, "buffer", sys.stdin), out)
            return 0
        for path in argv:
            try:
                handle = open(path, "rb")
            except OSError:
                fprintf(sys.stderr, "cat: cannot open %s\n", path)
                return 1
            with handle:
                cat(handle, out)
    except OSError as exc:
        fprintf(sys.stderr, "%s\n", str(exc))
        return 1
    finally:
        out.flush()
    return 0


def echo_main(argv=None):
    """Print the arguments."""
    if argv is None:
        argv = sys.argv[1:]
    sys.stdout.write(echo(argv))
    return 0


def kill_main(argv=None):
    """Send a termination signal to each listed process id."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "usage: kill pid...\n")
        return 1
    for arg in argv:
        pid = atoi(arg)
        # Non-positive ids name no single process.
        if pid <= 0:
            continue
        with contextlib.suppress(OSError):
            os.kill(pid, signal.SIGTERM)
    return 0


def ln_main(argv=None):
    """Create a hard link: ln old new."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 2:
        fprintf(sys.stderr, "Usage: ln old new\n")
        return 1
    old, new = argv
    try:
        os.link(old, new)
    except OSError:
        fprintf(sys.stderr, "link %s %s: failed\n", old, new)
    return 0


def mkdir_main(argv=None):
    """Create each directory, stopping at the first failure."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "Usage: mkdir files...\n")
        return 1
    for path in argv:
        try:
            os.mkdir(path)
        except OSError:
            fprintf(sys.stderr, "mkdir: %s failed to create\n", path)
            break
    return 0


def _unlink(path):
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def rm_main(argv=None):
    """Remove each file or empty directory, stopping at the first failure."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "Usage: rm files...\n")
        return 1
    for path in argv:
        try:
            _unlink(path)
        except OSError:
            fprintf(sys.stderr, "rm: %s failed to delete\n", path)
            break
    return 0


def sleep_main(argv=None):
    """Pause for the given number of clock ticks."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        fprintf(sys.stderr, "Only allow to input 1 argument in Sleep!! \n")
        return 1
    arg = argv[0]
    if len(arg) > _MAX_SLEEP_ARG:
        fprintf(sys.stderr, "Argument Too Long, Please input arg less than 256 Bytes!  \n")
        return 1
    # The final character is not checked; an empty argument always fails.
    checked = arg[:-1] if arg else "\0"
    if any(not "0" <= ch <= "9" for ch in checked):
        fprintf(sys.stderr, "Argument only can input the numbers! \n")
        return 0
    time.sleep(max(atoi(arg), 0) * TICK_SECONDS)
    return 0


def _g(x):
    return x + 3


def _f(x):
    return _g(x)


def call_main(argv=None):
    """Print the result of a small chain of calls."""
    printf("%d %d\n", _f(8) + 1, 13)
    return 0