"""
Constants shared by the lexer, parser and transformer.

This module defines the supported package managers, the command classes
the pipeline understands, and the patterns used to reject shell
composition before tokenizing.
"""

import re
from enum import Enum


class PackageManager(str, Enum):
    """The four package managers commands are translated between."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value


class CommandType(str, Enum):
    """Command classes recognized by the parser."""

    INSTALL = "install"
    EXEC = "exec"
    RUN = "run"
    CREATE = "create"

    def __str__(self) -> str:
        return self.value


# Leading words that start a recognized invocation, mapped to their manager
MANAGER_INVOCATIONS: dict[str, PackageManager] = {
    "npm": PackageManager.NPM,
    "pnpm": PackageManager.PNPM,
    "yarn": PackageManager.YARN,
    "bun": PackageManager.BUN,
    "npx": PackageManager.NPM,
    "bunx": PackageManager.BUN,
}

# Exec shorthands that skip the subcommand token entirely
EXEC_SHORTHANDS = frozenset({"npx", "bunx"})

# Managers that accept `<manager> dlx <package>`
DLX_MANAGERS = frozenset({PackageManager.PNPM, PackageManager.YARN})

INSTALL_SUBCOMMANDS = frozenset({"install", "i", "add"})

SEPARATOR = "--"

# Shell composition guards. A parenthesized group is allowed only when a
# manager invocation follows it, e.g. `(cd app) npm install`.
INVALID_COMMAND_PATTERNS: dict[str, re.Pattern[str]] = {
    "standard": re.compile(r"[;\n]|&&|\|\||(\(.*\)(?!\s*(npm|pnpm|yarn|bun)))"),
    "exec": re.compile(r"[;\n]|&&|\|\||(\(.*\)(?!\s*(npx|pnpm|yarn|bunx)))"),
}
