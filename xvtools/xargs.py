"""Build a command's argument list from words read on standard input."""

from .layout import MAXARG

_ARG_LIMIT = 1024
_BLANKS = " \t"


def split_arguments(data):
    """Split *data* into extra arguments.

    Spaces and tabs separate arguments. A newline is dropped unless it
    follows a separator, in which case it starts a new argument. The
    result always holds at least one, possibly empty, argument. Bytes
    are decoded as Latin-1. Raises ValueError for an argument of 1024
    characters or more.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    args = [[]]
    blanks = False
    for ch in data:
        if ch in _BLANKS:
            blanks = True
            continue
        if blanks:
            blanks = False
            args.append([ch])
            continue
        if ch == "\n":
            continue
        if len(args[-1]) >= _ARG_LIMIT - 1:
            raise ValueError("the argument is too long")
        args[-1].append(ch)
    return ["".join(chars) for chars in args]


def build_argv(command, data):
    """Return *command* followed by the arguments split from *data*.

    Raises ValueError when *command* is empty or the list would hold
    more than MAXARG entries.
    """
    command = list(command)
    if not command:
        raise ValueError("Usage: xargs <Options> ")
    argv = command + split_arguments(data)
    if len(argv) > MAXARG:
        raise ValueError(f"too many arguments: {len(argv)} > {MAXARG}")
    return argv