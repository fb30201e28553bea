"""Argument handling for running a command with system-call tracing."""

from .ulib import atoi

_USAGE = "useage:trace <sys_call bits_32bits> <Commond> "


class TraceUsageError(ValueError):
    """Raised when the trace arguments are malformed."""


def parse_trace_args(argv):
    """Split *argv* (arguments after the command name) into mask and command.

    The mask may hold only the digits 1 to 8; it is read as a 32-bit
    unsigned value. Returns ``(mask, command_argv)``.
    """
    args = list(argv)
    if len(args) < 2:
        raise TraceUsageError(_USAGE)
    mask_text = args[0]
    if any(not "0" < ch < "9" for ch in mask_text):
        raise TraceUsageError("Please trace_mask_bits can only be numbers ")
    return atoi(mask_text) & 0xFFFFFFFF, args[1:]