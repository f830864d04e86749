"""
Result types returned by the conversion entry points.

Every public call returns either a SuccessResult (four generated commands
plus structured metadata) or an ErrorResult carrying an ErrorReason.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from packmorph.constants import CommandType, PackageManager


class ErrorReason(str, Enum):
    """Failure codes. The set of values is part of the public contract."""

    NOT_SUPPORTED_COMMAND = "not-supported-command"
    PARSE_ERROR = "parse-error"
    DISABLED_COMMAND_TYPE = "disabled-command-type"
    MIXED_PACKAGE_MANAGERS = "mixed-package-managers"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InstallMeta:
    """Parsed fields of an install/add command."""

    manager: PackageManager
    packages: list[str] = field(default_factory=list)
    dev: bool = False
    global_: bool = False
    exact: bool = False
    optional: bool = False
    peer: bool = False
    frozen: bool = False
    unknown_flags: list[str] = field(default_factory=list)
    type: CommandType = CommandType.INSTALL

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "manager": self.manager.value,
            "packages": list(self.packages),
            "dev": self.dev,
            "global": self.global_,
            "exact": self.exact,
            "optional": self.optional,
            "peer": self.peer,
            "frozen": self.frozen,
            "unknown_flags": list(self.unknown_flags),
        }


@dataclass(frozen=True)
class ExecMeta:
    """Parsed fields of an npx / dlx / bunx command."""

    manager: PackageManager
    package: str
    args: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)
    type: CommandType = CommandType.EXEC

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "manager": self.manager.value,
            "package": self.package,
            "args": list(self.args),
            "flags": list(self.flags),
        }


@dataclass(frozen=True)
class RunMeta:
    """Parsed fields of a run command."""

    manager: PackageManager
    script: str
    args: list[str] = field(default_factory=list)
    type: CommandType = CommandType.RUN

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "manager": self.manager.value,
            "script": self.script,
            "args": list(self.args),
        }


@dataclass(frozen=True)
class CreateMeta:
    """Parsed fields of a create command."""

    manager: PackageManager
    template: str
    additional_args: list[str] = field(default_factory=list)
    type: CommandType = CommandType.CREATE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "manager": self.manager.value,
            "template": self.template,
            "additional_args": list(self.additional_args),
        }


CommandMeta = Union[InstallMeta, ExecMeta, RunMeta, CreateMeta]


@dataclass(frozen=True)
class SuccessResult:
    """Four generated commands, one per target manager, plus metadata."""

    type: CommandType
    npm: str
    pnpm: str
    yarn: str
    bun: str
    meta: CommandMeta
    ok: bool = field(default=True, init=False)

    def command_for(self, manager: PackageManager | str) -> str:
        """Return the generated command for `manager`."""
        return getattr(self, PackageManager(manager).value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": True,
            "type": self.type.value,
            "npm": self.npm,
            "pnpm": self.pnpm,
            "yarn": self.yarn,
            "bun": self.bun,
            "meta": self.meta.to_dict(),
        }


@dataclass(frozen=True)
class ErrorResult:
    """A failed conversion."""

    reason: ErrorReason
    ok: bool = field(default=False, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "reason": self.reason.value}


PackmorphResult = Union[SuccessResult, ErrorResult]


@dataclass(frozen=True)
class LineConversion:
    """One converted line of a multi-line block."""

    original: str
    result: SuccessResult


@dataclass(frozen=True)
class MultiLineResult:
    """
    A converted multi-line block.

    Each manager's string is the whole block with every convertible line
    substituted; all other lines are reproduced verbatim.
    """

    type: CommandType
    npm: str
    pnpm: str
    yarn: str
    bun: str
    commands: list[LineConversion] = field(default_factory=list)
    ok: bool = field(default=True, init=False)

    def command_for(self, manager: PackageManager | str) -> str:
        return getattr(self, PackageManager(manager).value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": True,
            "type": self.type.value,
            "npm": self.npm,
            "pnpm": self.pnpm,
            "yarn": self.yarn,
            "bun": self.bun,
            "commands": [
                {"original": line.original, "result": line.result.to_dict()}
                for line in self.commands
            ],
        }


PackmorphMultiLineResult = Union[MultiLineResult, ErrorResult]
