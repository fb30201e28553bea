"""A simulated first-fit free-list allocator over a growable heap."""

HEADER_SIZE = 16
MIN_CORE_UNITS = 4096

_BASE = -1


class Heap:
    """Allocator handing out byte addresses inside a heap of *limit* bytes.

    The heap grows in chunks of at least ``MIN_CORE_UNITS`` headers.
    Freed blocks are kept in an address-ordered circular list and are
    merged with their neighbours.
    """

    def __init__(self, limit):
        if limit < 0:
            raise ValueError("heap limit must not be negative")
        self.limit = limit
        self._brk = 0
        self._size = {}
        self._next = {}
        self._freep = None
        self._allocated = set()

    def _sbrk(self, nbytes):
        if self._brk + nbytes > self.limit:
            return None
        old = self._brk
        self._brk += nbytes
        return old

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_CORE_UNITS)
        start = self._sbrk(nunits * HEADER_SIZE)
        if start is None:
            return None
        header = start // HEADER_SIZE
        self._size[header] = nunits
        self._insert(header)
        return self._freep

    def _insert(self, bp):
        nxt = self._next
        size = self._size
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]

        q = nxt[p]
        if bp + size[bp] == q:
            size[bp] += size[q]
            nxt[bp] = nxt[q]
            del size[q], nxt[q]
        else:
            nxt[bp] = q

        if p + size[p] == bp:
            size[p] += size[bp]
            nxt[p] = nxt[bp]
            del size[bp], nxt[bp]
        else:
            nxt[p] = bp
        self._freep = p

    def malloc(self, nbytes):
        """Allocate *nbytes* and return the address of the block.

        Raises MemoryError when the heap cannot grow far enough.
        """
        if nbytes < 0:
            raise ValueError("cannot allocate a negative size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE

        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
                if p is None:
                    raise MemoryError(f"cannot allocate {nbytes} bytes")
            prevp, p = p, self._next[p]

    def free(self, addr):
        """Return the block at *addr* to the free list."""
        if addr % HEADER_SIZE:
            raise ValueError(f"address {addr} was not allocated")
        header = addr // HEADER_SIZE - 1
        if header not in self._allocated:
            raise ValueError(f"address {addr} was not allocated")
        self._allocated.remove(header)
        self._insert(header)

    def free_blocks(self):
        """Return the free blocks as (address, size in bytes), by address."""
        return sorted(
            (header * HEADER_SIZE, units * HEADER_SIZE)
            for header, units in self._size.items()
            if header != _BASE and header in self._next
        )