"""Small teaching-system utilities: text and file tools, a shell parser, an allocator and a disk image builder."""

__version__ = "0.1.0"