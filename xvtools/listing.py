"""Directory listing and recursive file search."""

import enum
import os
import stat
import sys

from .fmt import fprintf

DIRSIZ = 14
_BUF_SIZE = 512
_MAX_ARG = 256


class FileType(enum.IntEnum):
    """Kinds of file reported in listings."""

    DIR = 1
    FILE = 2
    DEVICE = 3


def _file_type(st):
    if stat.S_ISDIR(st.st_mode):
        return FileType.DIR
    if stat.S_ISREG(st.st_mode):
        return FileType.FILE
    return FileType.DEVICE


def _entries(path):
    return [".", ".."] + sorted(os.listdir(path))


def fmtname(path):
    """Return the last path component, blank-padded to DIRSIZ."""
    name = path[path.rfind("/") + 1:]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def ls(path, out):
    """Write a listing of *path* to *out*: name, type, inode and size."""
    try:
        st = os.stat(path)
    except OSError:
        fprintf(sys.stderr, "ls: cannot open %s\n", path)
        return
    kind = _file_type(st)
    if kind is not FileType.DIR:
        fprintf(out, "%s %d %d %l\n", fmtname(path), kind, st.st_ino, st.st_size)
        return
    if len(path) + 1 + DIRSIZ + 1 > _BUF_SIZE:
        fprintf(out, "ls: path too long\n")
        return
    try:
        entries = _entries(path)
    except OSError:
        fprintf(sys.stderr, "ls: cannot open %s\n", path)
        return
    for entry in entries:
        child = path + "/" + entry
        try:
            st = os.stat(child)
        except OSError:
            fprintf(out, "ls: cannot stat %s\n", child)
            continue
        fprintf(out, "%s %d %d %d\n", fmtname(child), _file_type(st), st.st_ino, st.st_size)


def _search(path, name, out):
    try:
        st = os.stat(path)
    except OSError:
        raise OSError(f"Find: cannot open {path}") from None
    if _file_type(st) is not FileType.DIR:
        return
    if len(path) + 1 + DIRSIZ + 1 > _BUF_SIZE:
        fprintf(out, "Find: Path is too Long \n")
        return
    try:
        entries = _entries(path)
    except OSError:
        raise OSError(f"Find: cannot open {path}") from None
    for entry in entries:
        child = path + "/" + entry
        try:
            st = os.stat(child)
        except OSError:
            fprintf(out, "ls: cannot stat %s\n", child)
            continue
        kind = _file_type(st)
        if kind is FileType.FILE:
            if child[child.rfind("/") + 1:] == name:
                fprintf(out, "%s\n", child)
        elif kind is FileType.DIR:
            # Skips "." and "..", and any directory whose name ends in a dot.
            if child.endswith("."):
                continue
            try:
                _search(child, name, out)
            except OSError as exc:
                fprintf(sys.stderr, "%s\n", str(exc))


def find(path, name, out):
    """Write to *out* every regular file named *name* below *path*.

    Raises OSError if *path* itself cannot be opened.
    """
    _search(path, name, out)


def ls_main(argv=None):
    """List each path, or the current directory."""
    if argv is None:
        argv = sys.argv[1:]
    for path in argv or ["."]:
        ls(path, sys.stdout)
    return 0


def _run_find(path, name):
    try:
        find(path, name, sys.stdout)
    except OSError as exc:
        fprintf(sys.stderr, "%s\n", str(exc))
        fprintf(sys.stderr, "Find Fail \n")
        return 1
    return 0


def find_main(argv=None):
    """Run find with [path] name."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        fprintf(sys.stderr, "Please Input File Name You want to Find \n")
        return 1
    if len(argv) == 1:
        if len(argv[0]) > _MAX_ARG:
            fprintf(sys.stderr, "The File Name is too Long \n")
            return 1
        return _run_find(".", argv[0])
    if len(argv) > 2:
        fprintf(sys.stderr, "The Find Can only accept [Path] [File_Name] \n")
        fprintf(sys.stderr, "It don`t Support more Than 2 arguments now \n")
        return 1
    path, name = argv
    if len(path) > _MAX_ARG:
        fprintf(sys.stderr, "The File Path is too Long \n")
        return 1
    if len(name) > _MAX_ARG:
        fprintf(sys.stderr, "The File Name is too Long \n")
        return 1
    return _run_find(path, name)