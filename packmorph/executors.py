"""
Command Executors - Entry point for converting commands.

This module provides the CommandConverter class that users interact
with to convert a single command line, plus the `packmorph` function
that also routes multi-line blocks.
"""

import logging
from typing import Any

from packmorph.options import PackmorphOptions
from packmorph.parser.command_parser import CommandParser, ParserError
from packmorph.results import (
    ErrorReason,
    ErrorResult,
    PackmorphMultiLineResult,
    PackmorphResult,
)
from packmorph.syntax_tree.nodes import CommandNode
from packmorph.syntax_tree.transformer import ASTTransformer
from packmorph.validator import validate_command


class CommandConverter:
    """
    Main converter for a single command line.

    Usage:
        converter = CommandConverter("npm install -D vitest")
        result = converter.convert()
        result.pnpm  # "pnpm add -D vitest"
    """

    def __init__(
        self,
        cmd: str,
        options: PackmorphOptions | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the converter.

        Args:
            cmd: The command string to convert
            options: Enabled command classes; install only when omitted
            logger: Logger for rejected and converted commands
        """
        if not isinstance(cmd, str):
            raise TypeError(f"Command must be a string, got {type(cmd).__name__}")
        self.cmd = cmd
        self.options = options or PackmorphOptions()
        self.logger = logger or logging.getLogger("packmorph.converter")
        self._ast: CommandNode | None = None
        self._transformer = ASTTransformer()

    def parse(self) -> CommandNode:
        """
        Validate and parse the command string into an AST.

        Returns:
            The parsed CommandNode

        Raises:
            ParserError: If the command is rejected or malformed
        """
        if self._ast is None:
            reason = validate_command(self.cmd)
            if reason is not None:
                raise ParserError("Command rejected before tokenizing", reason)
            parser = CommandParser(self.cmd.strip())
            self._ast = parser.parse()
        return self._ast

    def convert(self) -> PackmorphResult:
        """
        Convert the command and return the result.

        Returns:
            A SuccessResult, or an ErrorResult describing why the command
            could not be converted
        """
        try:
            ast = self.parse()
        except ParserError as e:
            self.logger.debug("Rejected %r: %s (%s)", self.cmd, e.reason, e)
            return ErrorResult(e.reason)

        if not self.options.is_enabled(ast.command_type):
            self.logger.debug("Rejected %r: %s command disabled", self.cmd, ast.command_type)
            return ErrorResult(ErrorReason.DISABLED_COMMAND_TYPE)

        result = self._transformer.transform(ast)
        self.logger.debug(
            "Converted %s command from %s: %r", result.type, ast.manager.value, self.cmd
        )
        return result


def parse_and_transform(line: str, options: PackmorphOptions | None = None) -> PackmorphResult:
    """Convert a single command line. Never raises for string input."""
    return CommandConverter(line, options).convert()


def packmorph(
    command: str, options: PackmorphOptions | None = None, **overrides: Any
) -> PackmorphResult | PackmorphMultiLineResult:
    """
    Convert package manager commands between npm, pnpm, yarn and bun.

    Args:
        command: The command (or block of commands) to convert
        options: Conversion options; defaults enable install commands only
        **overrides: Option fields applied on top of `options`

    Returns:
        A SuccessResult or ErrorResult; a MultiLineResult or ErrorResult
        when `parse_multi_line` is set

    Example:
        >>> packmorph("npx prettier .", parse_exec=True).pnpm
        'pnpm dlx prettier .'
    """
    opts = options or PackmorphOptions()
    if overrides:
        opts = opts.replace(**overrides)

    if opts.parse_multi_line:
        from packmorph.multiline import MultiLineConverter

        return MultiLineConverter(opts).convert(command)

    return parse_and_transform(command, opts)
