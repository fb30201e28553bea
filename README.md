# xvtools

Small, dependency-free command-line utilities and helper libraries in the
style of a tiny teaching operating system's user programs: a minimal `grep`,
`wc`, `cat`, `ls` and `find`, a shell command-line parser, a prime sieve, an
`xargs` argument splitter, a simulated `malloc`, and a builder for the
system's disk image format.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command is installed with an `xv-` prefix so it never shadows your
system's own tools.

| Command      | What it does                                                        |
|--------------|---------------------------------------------------------------------|
| `xv-cat`     | copy files (or standard input) to standard output                   |
| `xv-echo`    | print its arguments separated by spaces                             |
| `xv-grep`    | print lines matching a pattern built from `^ . * $` and literals    |
| `xv-wc`      | print line, word and byte counts                                    |
| `xv-ls`      | list a path with name, type number, inode number and size           |
| `xv-find`    | print every regular file with a given name under a directory        |
| `xv-ln`      | create a hard link: `xv-ln old new`                                 |
| `xv-mkdir`   | create directories, stopping at the first failure                   |
| `xv-rm`      | remove files or empty directories, stopping at the first failure    |
| `xv-kill`    | send SIGTERM to each positive process id given                      |
| `xv-sleep`   | sleep for a number of ticks (one tick is 0.1 seconds)               |
| `xv-call`    | print `12 13`, the result of a tiny call chain                      |
| `xv-primes`  | print the primes below 36, one sieve stage at a time                |
| `xv-mkfs`    | build a disk image from a list of files                             |

Examples:

```
xv-grep '^ab*c$' notes.txt
xv-wc README.md
xv-find . README.md
xv-mkfs fs.img README.md
```

Notes on behaviour:

- `xv-grep` only prints newline-terminated lines; a last line without a
  newline is not printed.
- `xv-find` takes `name` or `path name`; it skips `.`, `..` and any
  directory whose name ends in a dot.
- `xv-mkfs` drops a leading `user/` and then a leading `_` from each file
  name and places the file in the image's root directory; names that still
  contain `/` are rejected. Files may hold at most `MAXFILE` blocks.

## Library use

```python
from xvtools.grep import match
from xvtools.fmt import format_message
from xvtools.layout import pg_round_up, px
from xvtools.shell import parse_command
from xvtools.umalloc import Heap

match("^ab*c$", "abbbc")           # True
format_message("%d %s", -5, "ok")  # "-5 ok"
pg_round_up(4097)                  # 8192
px(0, 0x1000)                      # 1

cmd = parse_command("cat < in.txt | grep x > out.txt")

heap = Heap(1 << 20)
addr = heap.malloc(100)
heap.free(addr)
```

Modules:

- `xvtools.layout` – system limits (`NPROC`, `MAXARG`, `FSSIZE`, …), register
  bit masks and Sv39 page-table arithmetic: `pg_round_up`, `pg_round_down`,
  `pa2pte`, `pte2pa`, `pte_flags`, `px`, `make_satp`.
- `xvtools.fmt` – a small printf dialect (`%d %l %x %p %s %c %%`):
  `format_message`, `fprintf`, `printf`.
- `xvtools.ulib` – `atoi` (leading digits, 32-bit wrap) and `read_line`.
- `xvtools.umalloc` – `Heap`, a first-fit free-list allocator over a
  simulated heap; `malloc` raises `MemoryError` when the heap cannot grow,
  `free_blocks` lists the free blocks.
- `xvtools.grep` – `match`, `grep`, `main`.
- `xvtools.wc` – `count` returning a `Counts(lines, words, chars)`, `main`.
- `xvtools.coreutils` – `cat`, `echo` and the `*_main` command functions.
- `xvtools.listing` – `fmtname`, `ls`, `find`, `ls_main`, `find_main`.
- `xvtools.shell` – `parse_command` turns a line into a tree of `ExecCmd`,
  `RedirCmd` (with a `RedirMode`), `PipeCmd`, `ListCmd` and `BackCmd` and
  raises `ShellSyntaxError` on bad input; `cd_target` recognises `cd` lines.
- `xvtools.primes` – `primes_sieve`, a generator of sieve-stage heads.
- `xvtools.xargs` – `split_arguments` and `build_argv`.
- `xvtools.mkfs` – `ImageBuilder`, `Superblock`, `Dinode` and `build_image`.
- `xvtools.grind` – the Park–Miller generator `Rand` and `do_rand`.
- `xvtools.trace` – `parse_trace_args` and `TraceUsageError`.
- `xvtools.procdemo` – `pingpong`, `stressfs` and `zombie`, small demos of
  cooperating tasks built on threads and pipes.

## What it does not do

- There is no interactive shell: `xvtools.shell` parses command lines but
  does not run them.
- No `xargs` or `trace` command is installed: those modules build argument
  lists and start no programs.
- `xvtools.grind` provides only its random-number generator, not a stress
  run against a file system.
- `xvtools.mkfs` writes images; it does not read, mount or check them.