"""Build a file-system image holding a root directory and the given files.

Disk layout, one block per sector:
[ boot block | superblock | log | inode blocks | free bitmap | data blocks ]
"""

import struct
import sys
from dataclasses import dataclass, field
from typing import List

from .layout import FSSIZE, LOGSIZE
from .listing import DIRSIZ, FileType

BSIZE = 1024
FSMAGIC = 0x10203040
ROOTINO = 1
NDIRECT = 12
NINDIRECT = BSIZE // 4
MAXFILE = NDIRECT + NINDIRECT
NINODES = 200

T_DIR = int(FileType.DIR)
T_FILE = int(FileType.FILE)
T_DEVICE = int(FileType.DEVICE)

_SUPERBLOCK = struct.Struct("<8I")
_DINODE = struct.Struct(f"<4hI{NDIRECT + 1}I")
_DIRENT = struct.Struct(f"<H{DIRSIZ}s")
_INDIRECT = struct.Struct(f"<{NINDIRECT}I")

SUPERBLOCK_SIZE = _SUPERBLOCK.size
DINODE_SIZE = _DINODE.size
DIRENT_SIZE = _DIRENT.size
IPB = BSIZE // DINODE_SIZE


@dataclass
class Superblock:
    """Describes where each region of the image starts."""

    magic: int = FSMAGIC
    size: int = 0
    nblocks: int = 0
    ninodes: int = 0
    nlog: int = 0
    logstart: int = 0
    inodestart: int = 0
    bmapstart: int = 0

    def pack(self):
        """Return the little-endian on-disk form."""
        return _SUPERBLOCK.pack(
            self.magic, self.size, self.nblocks, self.ninodes,
            self.nlog, self.logstart, self.inodestart, self.bmapstart,
        )

    @classmethod
    def unpack(cls, data):
        """Read a superblock from the start of *data*."""
        return cls(*_SUPERBLOCK.unpack_from(data))


@dataclass
class Dinode:
    """An on-disk inode."""

    type: int = 0
    major: int = 0
    minor: int = 0
    nlink: int = 0
    size: int = 0
    addrs: List[int] = field(default_factory=lambda: [0] * (NDIRECT + 1))

    def pack(self):
        """Return the little-endian on-disk form."""
        if len(self.addrs) != NDIRECT + 1:
            raise ValueError(f"an inode holds exactly {NDIRECT + 1} addresses")
        return _DINODE.pack(self.type, self.major, self.minor, self.nlink, self.size, *self.addrs)

    @classmethod
    def unpack(cls, data):
        """Read an inode from the start of *data*."""
        type_, major, minor, nlink, size, *addrs = _DINODE.unpack_from(data)
        return cls(type_, major, minor, nlink, size, list(addrs))


def _dirent(inum, name):
    return _DIRENT.pack(inum, name[:DIRSIZ])


class ImageBuilder:
    """Writes an empty image at *path* and fills it inode by inode."""

    def __init__(self, path):
        self.nbitmap = FSSIZE // (BSIZE * 8) + 1
        self.ninodeblocks = NINODES // IPB + 1
        self.nlog = LOGSIZE
        self.nmeta = 2 + self.nlog + self.ninodeblocks + self.nbitmap
        self.nblocks = FSSIZE - self.nmeta
        self.sb = Superblock(
            magic=FSMAGIC,
            size=FSSIZE,
            nblocks=self.nblocks,
            ninodes=NINODES,
            nlog=self.nlog,
            logstart=2,
            inodestart=2 + self.nlog,
            bmapstart=2 + self.nlog + self.ninodeblocks,
        )
        print(
            f"nmeta {self.nmeta} (boot, super, log blocks {self.nlog} "
            f"inode blocks {self.ninodeblocks}, bitmap blocks {self.nbitmap}) "
            f"blocks {self.nblocks} total {FSSIZE}"
        )
        self.freeinode = 1
        self.freeblock = self.nmeta
        self._file = open(path, "w+b")
        try:
            zeroes = bytes(BSIZE)
            for sec in range(FSSIZE):
                self._wsect(sec, zeroes)
            self._wsect(1, self.sb.pack().ljust(BSIZE, b"\0"))
        except BaseException:
            self._file.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _wsect(self, sec, data):
        self._file.seek(sec * BSIZE)
        self._file.write(bytes(data).ljust(BSIZE, b"\0")[:BSIZE])

    def _rsect(self, sec):
        self._file.seek(sec * BSIZE)
        data = self._file.read(BSIZE)
        if len(data) != BSIZE:
            raise OSError(f"read: short read of sector {sec}")
        return data

    def _iblock(self, inum):
        return inum // IPB + self.sb.inodestart

    def _next_block(self):
        block = self.freeblock
        self.freeblock += 1
        return block

    def winode(self, inum, din):
        """Store *din* as inode *inum*."""
        bn = self._iblock(inum)
        buf = bytearray(self._rsect(bn))
        off = (inum % IPB) * DINODE_SIZE
        buf[off:off + DINODE_SIZE] = din.pack()
        self._wsect(bn, buf)

    def rinode(self, inum):
        """Return inode *inum*."""
        buf = self._rsect(self._iblock(inum))
        off = (inum % IPB) * DINODE_SIZE
        return Dinode.unpack(buf[off:off + DINODE_SIZE])

    def ialloc(self, kind):
        """Allocate the next inode with type *kind* and return its number."""
        inum = self.freeinode
        self.freeinode += 1
        self.winode(inum, Dinode(type=int(kind), nlink=1, size=0))
        return inum

    def iappend(self, inum, data):
        """Append *data* to the end of inode *inum*.

        Raises ValueError when the file would exceed MAXFILE blocks.
        """
        data = bytes(data)
        din = self.rinode(inum)
        off = din.size
        pos = 0
        while pos < len(data):
            fbn = off // BSIZE
            if fbn >= MAXFILE:
                raise ValueError(f"inode {inum} would exceed {MAXFILE} blocks")
            if fbn < NDIRECT:
                if din.addrs[fbn] == 0:
                    din.addrs[fbn] = self._next_block()
                block = din.addrs[fbn]
            else:
                if din.addrs[NDIRECT] == 0:
                    din.addrs[NDIRECT] = self._next_block()
                indirect = list(_INDIRECT.unpack(self._rsect(din.addrs[NDIRECT])))
                if indirect[fbn - NDIRECT] == 0:
                    indirect[fbn - NDIRECT] = self._next_block()
                    self._wsect(din.addrs[NDIRECT], _INDIRECT.pack(*indirect))
                block = indirect[fbn - NDIRECT]
            n1 = min(len(data) - pos, (fbn + 1) * BSIZE - off)
            buf = bytearray(self._rsect(block))
            start = off - fbn * BSIZE
            buf[start:start + n1] = data[pos:pos + n1]
            self._wsect(block, buf)
            pos += n1
            off += n1
        din.size = off
        self.winode(inum, din)

    def balloc(self, used):
        """Mark the first *used* blocks as in use in the free bitmap."""
        print(f"balloc: first {used} blocks have been allocated")
        if used >= BSIZE * 8:
            raise ValueError(f"{used} blocks do not fit in one bitmap block")
        used = max(used, 0)
        bitmap = bytearray(BSIZE)
        full, rest = divmod(used, 8)
        bitmap[:full] = b"\xff" * full
        if rest:
            bitmap[full] = (1 << rest) - 1
        print(f"balloc: write bitmap block at sector {self.sb.bmapstart}")
        self._wsect(self.sb.bmapstart, bitmap)

    def close(self):
        """Close the image file."""
        self._file.close()


def build_image(image_path, files):
    """Write an image at *image_path* whose root directory holds *files*.

    A leading "user/" and then a leading "_" are dropped from each name.
    Returns the image's superblock.
    """
    with ImageBuilder(image_path) as builder:
        rootino = builder.ialloc(T_DIR)
        if rootino != ROOTINO:
            raise RuntimeError(f"root inode is {rootino}, not {ROOTINO}")
        builder.iappend(rootino, _dirent(rootino, b"."))
        builder.iappend(rootino, _dirent(rootino, b".."))

        for path in files:
            shortname = path[5:] if path.startswith("user/") else path
            if "/" in shortname:
                raise ValueError(f"{path}: only files in one directory may be added")
            with open(path, "rb") as handle:
                if shortname.startswith("_"):
                    shortname = shortname[1:]
                inum = builder.ialloc(T_FILE)
                name = shortname.encode("utf-8", "surrogateescape")
                builder.iappend(rootino, _dirent(inum, name))
                for chunk in iter(lambda: handle.read(BSIZE), b""):
                    builder.iappend(inum, chunk)

        din = builder.rinode(rootino)
        din.size = (din.size // BSIZE + 1) * BSIZE
        builder.winode(rootino, din)

        builder.balloc(builder.freeblock)
        return builder.sb


def main(argv=None):
    """Run mkfs with *argv*: image path followed by the files to add."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write("Usage: mkfs fs.img files...\n")
        return 1
    try:
        build_image(argv[0], argv[1:])
    except (OSError, ValueError, RuntimeError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0