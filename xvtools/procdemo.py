"""Small demonstrations of cooperating tasks: ping-pong, file stress, early exit."""

import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from .coreutils import TICK_SECONDS
from .fmt import fprintf

_STRESS_WORKERS = 5
_STRESS_BLOCKS = 20
_STRESS_BLOCK_SIZE = 512


def pingpong(out):
    """Exchange one byte each way over a pipe between two tasks.

    The parent sends the low byte of its process id, the child answers
    with the low byte of its own thread id; each side reports what it
    received on *out*. Returns the (ping, pong) bytes received.
    """
    read_fd, write_fd = os.pipe()
    received = {}

    def child():
        ping = os.read(read_fd, 1)[0]
        received["ping"] = ping
        fprintf(out, "%d: received ping \n", ping)
        os.write(write_fd, bytes([threading.get_native_id() & 0xFF]))

    try:
        worker = threading.Thread(target=child)
        worker.start()
        os.write(write_fd, bytes([os.getpid() & 0xFF]))
        worker.join()
        pong = os.read(read_fd, 1)[0]
        fprintf(out, "%d: received pong \n", pong)
    finally:
        os.close(read_fd)
        os.close(write_fd)
    return received["ping"], pong


def stressfs(directory, out):
    """Have five tasks each write then read back a file in *directory*.

    Each task writes twenty 512-byte blocks of "a" to ``stressfs<i>``.
    Returns the paths written, in task order.
    """
    lock = threading.Lock()
    data = b"a" * _STRESS_BLOCK_SIZE

    def say(fmt, *args):
        with lock:
            fprintf(out, fmt, *args)

    def worker(i):
        say("write %d\n", i)
        path = os.path.join(directory, f"stressfs{i}")
        fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o666)
        with os.fdopen(fd, "r+b") as handle:
            for _ in range(_STRESS_BLOCKS):
                handle.write(data)
        say("read\n")
        with open(path, "rb") as handle:
            for _ in range(_STRESS_BLOCKS):
                handle.read(_STRESS_BLOCK_SIZE)
        return path

    say("stressfs starting\n")
    with ThreadPoolExecutor(max_workers=_STRESS_WORKERS) as pool:
        return list(pool.map(worker, range(_STRESS_WORKERS)))


def zombie(delay=5 * TICK_SECONDS):
    """Start a child that ends at once, then wait *delay* seconds.

    Returns True if the child had already finished when the wait ended.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")
    child = threading.Thread(target=lambda: None)
    child.start()
    time.sleep(delay)
    finished_first = not child.is_alive()
    child.join()
    return finished_first