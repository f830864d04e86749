"""
Command Parser - Recursive descent parser for package manager commands.

This module parses command lines into AST nodes, handling:
- The manager invocation (npm, pnpm, yarn, bun, npx, bunx)
- Dispatch on the subcommand (install/i/add, dlx, run, create, yarn global add)
- Flags, packages and pass-through arguments for each command shape
"""

from packmorph.constants import (
    DLX_MANAGERS,
    EXEC_SHORTHANDS,
    INSTALL_SUBCOMMANDS,
    MANAGER_INVOCATIONS,
    PackageManager,
)
from packmorph.flags import FlagCategory, classify_flag
from packmorph.lexer import CommandLexer, Token, TokenType
from packmorph.results import ErrorReason
from packmorph.syntax_tree.nodes import (
    ArgumentNode,
    CommandNode,
    CreateCommandNode,
    ExecCommandNode,
    FlagNode,
    InstallCommandNode,
    ManagerNode,
    RunCommandNode,
    SubcommandNode,
)


class ParserError(Exception):
    """Exception raised for parser errors."""

    def __init__(
        self,
        message: str,
        reason: ErrorReason = ErrorReason.PARSE_ERROR,
        token: Token | None = None,
    ):
        self.reason = reason
        self.token = token
        if token:
            super().__init__(f"{message} at position {token.start}")
        else:
            super().__init__(message)


class CommandParser:
    """
    Recursive descent parser for package manager commands.

    Grammar (simplified):
        command      := exec_short | manager subcommand_body
        exec_short   := ("npx" | "bunx") exec_body
        subcommand_body := "dlx" exec_body
                     | ("install" | "i" | "add") install_body
                     | "global" "add" install_body        (yarn only)
                     | "run" run_body
                     | "create" create_body
        install_body := (FLAG | SEPARATOR | ARGUMENT)*
        exec_body    := FLAG* ARGUMENT token*
        run_body     := token token*
        create_body  := token (SEPARATOR | token)*

    A missing required token raises ParserError with PARSE_ERROR; an input
    that is not one of these shapes raises it with NOT_SUPPORTED_COMMAND.
    """

    def __init__(self, source: str):
        self.source = source
        self.lexer = CommandLexer(source)
        self.tokens: list[Token] = []
        self.pos = 0

    def parse(self) -> CommandNode:
        """Parse the command string into an AST."""
        self.tokens = self.lexer.tokenize()
        self.pos = 0
        return self._parse_command()

    def _current_token(self) -> Token:
        """Get the current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # Return EOF token

    def _advance(self) -> Token:
        """Advance and return the current token."""
        token = self._current_token()
        if not self._at_end():
            self.pos += 1
        return token

    def _match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self._current_token().type in token_types

    def _at_end(self) -> bool:
        return self._match(TokenType.EOF)

    def _last_end(self, default: int) -> int:
        """End offset of the most recently consumed token."""
        if self.pos == 0:
            return default
        return self.tokens[self.pos - 1].end

    def _parse_command(self) -> CommandNode:
        """Parse a complete command and dispatch on its shape."""
        if self._at_end():
            raise ParserError(
                "Expected package manager", ErrorReason.NOT_SUPPORTED_COMMAND, self._current_token()
            )

        manager = self._parse_manager()

        if self._at_end():
            raise ParserError("Expected subcommand", ErrorReason.PARSE_ERROR, self._current_token())

        if manager.invocation in EXEC_SHORTHANDS:
            return self._parse_exec_command(manager)

        subcommand = self._parse_subcommand()
        verb = subcommand.value

        if verb == "dlx":
            if manager.value not in DLX_MANAGERS:
                raise ParserError(
                    f"{manager.value} has no dlx subcommand",
                    ErrorReason.NOT_SUPPORTED_COMMAND,
                    self.tokens[self.pos - 1],
                )
            return self._parse_exec_command(manager, subcommand)
        if verb in INSTALL_SUBCOMMANDS:
            return self._parse_install_command(manager, subcommand)
        if verb == "run":
            return self._parse_run_command(manager, subcommand)
        if verb == "create":
            return self._parse_create_command(manager, subcommand)
        if verb == "global" and manager.value == PackageManager.YARN:
            return self._parse_yarn_global_add(manager, subcommand)

        raise ParserError(
            f"Unsupported subcommand {verb!r}",
            ErrorReason.NOT_SUPPORTED_COMMAND,
            self.tokens[self.pos - 1],
        )

    def _parse_manager(self) -> ManagerNode:
        """Parse the manager invocation: npm, pnpm, yarn, bun, npx or bunx."""
        token = self._current_token()
        manager = MANAGER_INVOCATIONS.get(token.value)
        if manager is None:
            raise ParserError(
                f"Unknown package manager {token.value!r}",
                ErrorReason.NOT_SUPPORTED_COMMAND,
                token,
            )
        self._advance()
        return ManagerNode(value=manager, invocation=token.value, start=token.start, end=token.end)

    def _parse_subcommand(self) -> SubcommandNode:
        token = self._advance()
        return SubcommandNode(value=token.value, start=token.start, end=token.end)

    def _parse_flag(self) -> FlagNode:
        token = self._advance()
        return FlagNode(
            value=token.value,
            category=classify_flag(token.value),
            start=token.start,
            end=token.end,
        )

    def _parse_argument(self) -> ArgumentNode:
        token = self._advance()
        return ArgumentNode(
            value=token.value,
            was_quoted=token.was_quoted,
            quote_char=token.quote_char,
            start=token.start,
            end=token.end,
        )

    def _parse_install_body(self) -> tuple[list[FlagNode], list[ArgumentNode], bool]:
        """
        Parse install flags and packages.

        Every flag occurrence is kept in order, duplicates included. A
        separator may appear anywhere except as the final token.
        """
        flags: list[FlagNode] = []
        packages: list[ArgumentNode] = []
        has_separator = False

        while not self._at_end():
            if self._match(TokenType.SEPARATOR):
                separator = self._advance()
                has_separator = True
                if self._at_end():
                    raise ParserError("Dangling separator", ErrorReason.PARSE_ERROR, separator)
                continue

            if self._match(TokenType.FLAG):
                flags.append(self._parse_flag())
            else:
                packages.append(self._parse_argument())

        return flags, packages, has_separator

    def _parse_install_command(
        self, manager: ManagerNode, subcommand: SubcommandNode
    ) -> InstallCommandNode:
        """Parse: <manager> install|i|add [flags] [packages]"""
        flags, packages, has_separator = self._parse_install_body()
        return InstallCommandNode(
            manager=manager,
            subcommand=subcommand,
            flags=tuple(flags),
            packages=tuple(packages),
            has_separator=has_separator,
            start=manager.start,
            end=self._last_end(manager.end),
        )

    def _parse_yarn_global_add(
        self, manager: ManagerNode, global_subcommand: SubcommandNode
    ) -> InstallCommandNode:
        """Parse: yarn global add [flags] [packages]"""
        if self._current_token().value != "add":
            raise ParserError(
                "Expected 'add' after 'yarn global'",
                ErrorReason.NOT_SUPPORTED_COMMAND,
                self._current_token(),
            )
        add_subcommand = self._parse_subcommand()

        # `global` stands in for an explicit --global flag
        implicit_global = FlagNode(
            value="--global",
            category=FlagCategory.GLOBAL,
            start=global_subcommand.start,
            end=global_subcommand.end,
        )
        flags, packages, has_separator = self._parse_install_body()

        return InstallCommandNode(
            manager=manager,
            subcommand=add_subcommand,
            flags=(implicit_global, *flags),
            packages=tuple(packages),
            has_separator=has_separator,
            start=manager.start,
            end=self._last_end(manager.end),
        )

    def _parse_exec_command(
        self, manager: ManagerNode, subcommand: SubcommandNode | None = None
    ) -> ExecCommandNode:
        """
        Parse: [flags] <package> [args]

        Flags are only collected before the package; everything after it is
        passed through as an argument.
        """
        flags: list[FlagNode] = []
        args: list[ArgumentNode] = []
        package: ArgumentNode | None = None

        while not self._at_end():
            if package is None:
                if self._match(TokenType.FLAG):
                    flags.append(self._parse_flag())
                else:
                    package = self._parse_argument()
            else:
                args.append(self._parse_argument())

        if package is None:
            raise ParserError("Expected package name", ErrorReason.PARSE_ERROR, self._current_token())

        return ExecCommandNode(
            manager=manager,
            package=package,
            subcommand=subcommand,
            flags=tuple(flags),
            args=tuple(args),
            start=manager.start,
            end=self._last_end(manager.end),
        )

    def _parse_run_command(self, manager: ManagerNode, subcommand: SubcommandNode) -> RunCommandNode:
        """Parse: <manager> run <script> [args]"""
        if self._at_end():
            raise ParserError("Expected script name", ErrorReason.PARSE_ERROR, self._current_token())

        script = self._parse_argument()
        args: list[ArgumentNode] = []
        while not self._at_end():
            args.append(self._parse_argument())

        return RunCommandNode(
            manager=manager,
            subcommand=subcommand,
            script=script,
            args=tuple(args),
            start=manager.start,
            end=self._last_end(manager.end),
        )

    def _parse_create_command(
        self, manager: ManagerNode, subcommand: SubcommandNode
    ) -> CreateCommandNode:
        """Parse: <manager> create <template> [--] [args]"""
        if self._at_end():
            raise ParserError("Expected template name", ErrorReason.PARSE_ERROR, self._current_token())

        template = self._parse_argument()
        additional_args: list[ArgumentNode] = []
        has_separator = False

        while not self._at_end():
            if self._match(TokenType.SEPARATOR):
                self._advance()
                has_separator = True
                continue
            additional_args.append(self._parse_argument())

        return CreateCommandNode(
            manager=manager,
            subcommand=subcommand,
            template=template,
            additional_args=tuple(additional_args),
            has_separator=has_separator,
            start=manager.start,
            end=self._last_end(manager.end),
        )


def parse_command(source: str) -> CommandNode:
    """Parse `source` with a fresh parser. Raises ParserError."""
    return CommandParser(source).parse()
