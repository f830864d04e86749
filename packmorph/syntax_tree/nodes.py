"""
AST Node definitions for the command parser.

This module defines all node types used in the abstract syntax tree
representation of parsed package manager commands. Nodes are immutable;
sequences are stored as tuples.
"""

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Union

from packmorph.constants import CommandType, PackageManager
from packmorph.flags import FlagCategory


class ASTNode(ABC):
    """Base class for all AST nodes."""

    start: int = 0  # Offset of the first source character covered
    end: int = 0  # Offset one past the last source character covered

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class ManagerNode(ASTNode):
    """The package manager invocation (`npx` is recorded as npm)."""

    value: PackageManager
    invocation: str
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        return f"Manager({self.invocation})"


@dataclass(frozen=True)
class SubcommandNode(ASTNode):
    """The verb following the manager name."""

    value: str
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        return f"Subcommand({self.value})"


@dataclass(frozen=True)
class FlagNode(ASTNode):
    """A flag, with its category resolved once at parse time."""

    value: str
    category: FlagCategory = FlagCategory.UNKNOWN
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        return f"Flag({self.value}, {self.category.value})"


@dataclass(frozen=True)
class ArgumentNode(ASTNode):
    """A package, script, template or pass-through argument."""

    value: str
    was_quoted: bool = False
    quote_char: str | None = None
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        if self.was_quoted:
            return f"Argument({self.quote_char}{self.value}{self.quote_char})"
        return f"Argument({self.value})"


@dataclass(frozen=True)
class InstallCommandNode(ASTNode):
    """`<manager> install|i|add [flags] [packages]`, or `yarn global add`."""

    command_type: ClassVar[CommandType] = CommandType.INSTALL

    manager: ManagerNode
    subcommand: SubcommandNode
    flags: tuple[FlagNode, ...] = ()
    packages: tuple[ArgumentNode, ...] = ()
    has_separator: bool = False
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        parts = [str(self.manager), str(self.subcommand)]
        parts.extend(str(flag) for flag in self.flags)
        parts.extend(str(pkg) for pkg in self.packages)
        return f"InstallCommand({', '.join(parts)})"


@dataclass(frozen=True)
class ExecCommandNode(ASTNode):
    """`npx|bunx|pnpm dlx|yarn dlx [flags] <package> [args]`."""

    command_type: ClassVar[CommandType] = CommandType.EXEC

    manager: ManagerNode
    package: ArgumentNode
    subcommand: SubcommandNode | None = None
    flags: tuple[FlagNode, ...] = ()
    args: tuple[ArgumentNode, ...] = ()
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        parts = [str(self.manager)]
        if self.subcommand:
            parts.append(str(self.subcommand))
        parts.extend(str(flag) for flag in self.flags)
        parts.append(str(self.package))
        parts.extend(str(arg) for arg in self.args)
        return f"ExecCommand({', '.join(parts)})"


@dataclass(frozen=True)
class RunCommandNode(ASTNode):
    """`<manager> run <script> [args]`."""

    command_type: ClassVar[CommandType] = CommandType.RUN

    manager: ManagerNode
    subcommand: SubcommandNode
    script: ArgumentNode
    args: tuple[ArgumentNode, ...] = ()
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        args_str = ", ".join(str(arg) for arg in self.args)
        return f"RunCommand({self.manager}, {self.script}, [{args_str}])"


@dataclass(frozen=True)
class CreateCommandNode(ASTNode):
    """`<manager> create <template> [--] [args]`."""

    command_type: ClassVar[CommandType] = CommandType.CREATE

    manager: ManagerNode
    subcommand: SubcommandNode
    template: ArgumentNode
    additional_args: tuple[ArgumentNode, ...] = ()
    has_separator: bool = False
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        args_str = ", ".join(str(arg) for arg in self.additional_args)
        return f"CreateCommand({self.manager}, {self.template}, [{args_str}])"


CommandNode = Union[InstallCommandNode, ExecCommandNode, RunCommandNode, CreateCommandNode]
