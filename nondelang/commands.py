"""Command model.

A program is a flat list of commands. Each command is an immutable dataclass
holding its operands and the source line it came from. The set of command
classes is closed: the interpreter dispatches on them with ``match`` and every
keyword in :class:`nondelang.operations.Op` has exactly one class here.


File: commands.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from nondelang.labels import LabelTable
from nondelang.operations import Op


@dataclass(frozen=True)
class Operand:
    """A command argument: either a variable reference or a literal value."""

    text: str
    literal: bool

    def __str__(self) -> str:
        if not self.literal:
            return self.text
        escaped = self.text.replace('\\', '\\\\').replace('"', '\\"')
        escaped = escaped.replace('\n', '\\n').replace('\t', '\\t')
        return f'"{escaped}"'


class Command:
    """Base class for every command variant."""

    op: ClassVar[Op]
    line: int

    def operands(self) -> tuple:
        raise NotImplementedError

    def __str__(self) -> str:
        return " ".join([self.op.value, *map(str, self.operands())]) + ";"


@dataclass(frozen=True)
class Print(Command):
    op: ClassVar[Op] = Op.PRINT

    arg: Operand
    line: int

    def operands(self) -> tuple:
        return (self.arg,)


@dataclass(frozen=True)
class Set(Command):
    op: ClassVar[Op] = Op.SET

    dest: str
    arg: Operand
    line: int

    def operands(self) -> tuple:
        return (self.dest, self.arg)


@dataclass(frozen=True)
class BinaryCommand(Command):
    """Shared shape of the arithmetic and comparison commands."""

    dest: str
    lhs: Operand
    rhs: Operand
    line: int

    def operands(self) -> tuple:
        return (self.dest, self.lhs, self.rhs)


@dataclass(frozen=True)
class Add(BinaryCommand):
    op: ClassVar[Op] = Op.ADD


@dataclass(frozen=True)
class Sub(BinaryCommand):
    op: ClassVar[Op] = Op.SUB


@dataclass(frozen=True)
class Mult(BinaryCommand):
    op: ClassVar[Op] = Op.MULT


@dataclass(frozen=True)
class Div(BinaryCommand):
    op: ClassVar[Op] = Op.DIV


@dataclass(frozen=True)
class Mod(BinaryCommand):
    op: ClassVar[Op] = Op.MOD


@dataclass(frozen=True)
class Eq(BinaryCommand):
    op: ClassVar[Op] = Op.EQ


@dataclass(frozen=True)
class Less(BinaryCommand):
    op: ClassVar[Op] = Op.LESS


@dataclass(frozen=True)
class Goto(Command):
    op: ClassVar[Op] = Op.GOTO

    label: str
    line: int

    def operands(self) -> tuple:
        return (self.label,)


@dataclass(frozen=True)
class If(Command):
    op: ClassVar[Op] = Op.IF

    cond: Operand
    label: str
    line: int

    def operands(self) -> tuple:
        return (self.cond, self.label)


BINARY_COMMANDS: dict[Op, type[BinaryCommand]] = {
    cls.op: cls for cls in (Add, Sub, Mult, Div, Mod, Eq, Less)
}


@dataclass
class Program:
    """The loaded script: its commands in order and where its labels point."""

    commands: list[Command] = field(default_factory=list)
    labels: LabelTable = field(default_factory=LabelTable)

    def __len__(self) -> int:
        return len(self.commands)

    def listing(self) -> str:
        """
        Render the program back as source, one command per line, with each
        label on its own line ahead of the command it points at.
        """
        by_index: dict[int, list[str]] = {}
        for name, index in self.labels:
            by_index.setdefault(index, []).append(name)
        lines = []
        for index in range(len(self.commands) + 1):
            for name in by_index.get(index, []):
                lines.append(f"{name}:")
            if index < len(self.commands):
                lines.append(f"    {self.commands[index]}")
        return "\n".join(lines)
