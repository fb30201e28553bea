"""Parser for the command language of the small shell.

Commands are words separated by whitespace, combined with ``<``, ``>``
and ``>>`` redirections, ``|`` pipes, ``;`` lists, ``&`` background
jobs and parenthesised blocks.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

MAXARGS = 10

_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"
_END = ""
_WORD = "a"
_APPEND_TOKEN = "+"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message, leftover=None):
        super().__init__(message)
        self.leftover = leftover


class RedirMode(enum.Enum):
    """How a redirected file is opened."""

    READ = "read"
    WRITE = "write"
    APPEND = "append"


@dataclass
class ExecCmd:
    """Run a program with arguments; ``argv[0]`` names the program."""

    argv: List[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run *cmd* with descriptor *fd* connected to *file*."""

    cmd: "Command"
    file: str
    mode: RedirMode
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of *left* to the input of *right*."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run *left*, wait for it, then run *right*."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run *cmd* without waiting for it."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class _Parser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self._skip_space()
        return self.pos < len(self.text) and self.text[self.pos] in toks

    def gettoken(self):
        self._skip_space()
        text = self.text
        start = self.pos
        if self.pos == len(text):
            tok = _END
        else:
            c = text[self.pos]
            if c in "|();&<":
                self.pos += 1
                tok = c
            elif c == ">":
                self.pos += 1
                if self.pos < len(text) and text[self.pos] == ">":
                    self.pos += 1
                    tok = _APPEND_TOKEN
                else:
                    tok = ">"
            else:
                tok = _WORD
                while (
                    self.pos < len(text)
                    and text[self.pos] not in _WHITESPACE
                    and text[self.pos] not in _SYMBOLS
                ):
                    self.pos += 1
        word = text[start:self.pos]
        self._skip_space()
        return tok, word

    def parseline(self):
        cmd = self.parsepipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCmd(cmd, self.parseline())
        return cmd

    def parsepipe(self):
        cmd = self.parseexec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCmd(cmd, self.parsepipe())
        return cmd

    def parseredirs(self, cmd):
        while self.peek("<>"):
            tok, _ = self.gettoken()
            kind, name = self.gettoken()
            if kind != _WORD:
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, name, RedirMode.READ, 0)
            elif tok == ">":
                cmd = RedirCmd(cmd, name, RedirMode.WRITE, 1)
            else:
                cmd = RedirCmd(cmd, name, RedirMode.APPEND, 1)
        return cmd

    def parseblock(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.parseline()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self.parseredirs(cmd)

    def parseexec(self):
        if self.peek("("):
            return self.parseblock()
        exec_cmd = ExecCmd()
        ret = self.parseredirs(exec_cmd)
        while not self.peek("|)&;"):
            tok, word = self.gettoken()
            if tok == _END:
                break
            if tok != _WORD:
                raise ShellSyntaxError("syntax")
            exec_cmd.argv.append(word)
            if len(exec_cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.parseredirs(ret)
        return ret


def parse_command(line):
    """Parse *line* into a command tree.

    Raises ShellSyntaxError for malformed input; text left over after
    a complete command is kept in the error's ``leftover`` attribute.
    """
    parser = _Parser(line)
    cmd = parser.parseline()
    parser.peek("")
    if parser.pos != len(line):
        leftover = line[parser.pos:]
        raise ShellSyntaxError(f"syntax (leftovers: {leftover})", leftover=leftover)
    return cmd


def cd_target(line) -> Optional[str]:
    """Return the directory of a ``cd`` line, or None for other lines.

    The line's final character, normally its newline, is dropped.
    """
    if not line.startswith("cd "):
        return None
    return line[3:len(line) - 1]