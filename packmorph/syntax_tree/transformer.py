"""
AST Transformer for converting command nodes into per-manager commands.

This module walks a parsed CommandNode and produces the equivalent npm,
pnpm, yarn and bun command strings together with the structured metadata.
No validation happens here; the parser only hands over well-formed trees.
"""

from packmorph.constants import PackageManager
from packmorph.flags import FLAG_RULES, FROZEN_LOCKFILE_FLAG, FlagCategory
from packmorph.quoting import build_command, quote_argument
from packmorph.results import (
    CommandMeta,
    CreateMeta,
    ExecMeta,
    InstallMeta,
    RunMeta,
    SuccessResult,
)
from packmorph.syntax_tree.nodes import (
    ArgumentNode,
    CommandNode,
    CreateCommandNode,
    ExecCommandNode,
    FlagNode,
    InstallCommandNode,
    RunCommandNode,
)

# Managers whose own flag spelling is carried over to npm and pnpm output
SPELLING_PRESERVING_MANAGERS = frozenset({PackageManager.NPM, PackageManager.PNPM})

EXEC_PREFIXES: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npx"],
    PackageManager.PNPM: ["pnpm", "dlx"],
    PackageManager.YARN: ["yarn", "dlx"],
    PackageManager.BUN: ["bunx"],
}


def render_node(node: ArgumentNode | FlagNode) -> str:
    """Printed form of a leaf node. Flags are always verbatim."""
    if isinstance(node, ArgumentNode):
        return quote_argument(node.value, node.was_quoted, node.quote_char)
    return node.value


class ASTTransformer:
    """
    Transforms command nodes into generated commands.

    Usage:
        result = ASTTransformer().transform(CommandParser("npm i -D vitest").parse())
        result.yarn  # "yarn add --dev vitest"
    """

    def transform(self, node: CommandNode) -> SuccessResult:
        """
        Generate the four target commands for `node`.

        Args:
            node: A parsed command node

        Returns:
            The SuccessResult for the command

        Raises:
            TypeError: If `node` is not a command node
        """
        if isinstance(node, InstallCommandNode):
            return self.transform_install(node)
        if isinstance(node, ExecCommandNode):
            return self.transform_exec(node)
        if isinstance(node, RunCommandNode):
            return self.transform_run(node)
        if isinstance(node, CreateCommandNode):
            return self.transform_create(node)
        raise TypeError(f"Cannot transform {type(node).__name__}")

    def transform_install(self, node: InstallCommandNode) -> SuccessResult:
        """
        Transform an install command.

        npm/pnpm keep the user's flag spelling (when the source manager is
        npm or pnpm) and any unknown flags; yarn/bun get canonical spellings
        and drop what they cannot express.
        """
        manager = node.manager.value
        packages = [pkg.value for pkg in node.packages]
        rendered_packages = [render_node(pkg) for pkg in node.packages]
        has_packages = bool(packages)

        enabled: set[FlagCategory] = set()
        raw_flags: list[str] = []
        unknown_flags: list[str] = []
        for flag in node.flags:
            raw_flags.append(flag.value)
            if flag.category == FlagCategory.UNKNOWN:
                unknown_flags.append(flag.value)
            else:
                enabled.add(flag.category)

        is_global = FlagCategory.GLOBAL in enabled
        is_frozen = FlagCategory.FROZEN in enabled

        npm_parts = ["npm", "install"]
        pnpm_parts = ["pnpm", "add"] if has_packages else ["pnpm", "install"]
        if not has_packages:
            yarn_parts = ["yarn", "install"]
        elif is_global:
            yarn_parts = ["yarn", "global", "add"]
        else:
            yarn_parts = ["yarn", "add"]
        bun_parts = ["bun", "add"] if has_packages else ["bun", "install"]

        preserve = manager in SPELLING_PRESERVING_MANAGERS
        for rule in FLAG_RULES:
            if rule.category not in enabled:
                continue
            spelling = rule.npm_spelling(raw_flags, preserve)
            npm_parts.append(spelling)
            pnpm_parts.append(spelling)
            if rule.yarn:
                yarn_parts.append(rule.yarn)
            if rule.bun:
                bun_parts.append(rule.bun)

        if is_frozen:
            npm_parts.append(FROZEN_LOCKFILE_FLAG)
            pnpm_parts.append(FROZEN_LOCKFILE_FLAG)
            # yarn only accepts it on a plain install; bun has no equivalent
            if not has_packages:
                yarn_parts.append(FROZEN_LOCKFILE_FLAG)

        npm_parts.extend(unknown_flags)
        pnpm_parts.extend(unknown_flags)

        meta = InstallMeta(
            manager=manager,
            packages=packages,
            dev=FlagCategory.DEV in enabled,
            global_=is_global,
            exact=FlagCategory.EXACT in enabled,
            optional=FlagCategory.OPTIONAL in enabled,
            peer=FlagCategory.PEER in enabled,
            frozen=is_frozen,
            unknown_flags=unknown_flags,
        )
        return SuccessResult(
            type=node.command_type,
            npm=build_command([npm_parts, rendered_packages]),
            pnpm=build_command([pnpm_parts, rendered_packages]),
            yarn=build_command([yarn_parts, rendered_packages]),
            bun=build_command([bun_parts, rendered_packages]),
            meta=meta,
        )

    def transform_exec(self, node: ExecCommandNode) -> SuccessResult:
        """Transform an exec command. Flags and arguments pass through verbatim."""
        flags = [render_node(flag) for flag in node.flags]
        package = render_node(node.package)
        args = [render_node(arg) for arg in node.args]

        commands = {
            manager: build_command([prefix, flags, [package], args])
            for manager, prefix in EXEC_PREFIXES.items()
        }
        meta = ExecMeta(
            manager=node.manager.value,
            package=node.package.value,
            args=[arg.value for arg in node.args],
            flags=[flag.value for flag in node.flags],
        )
        return self._result(node, commands, meta)

    def transform_run(self, node: RunCommandNode) -> SuccessResult:
        """Transform a run command. Everything after the script is opaque."""
        script = render_node(node.script)
        args = [render_node(arg) for arg in node.args]

        commands = {
            manager: build_command([manager.value, "run", script, args])
            for manager in PackageManager
        }
        meta = RunMeta(
            manager=node.manager.value,
            script=node.script.value,
            args=[arg.value for arg in node.args],
        )
        return self._result(node, commands, meta)

    def transform_create(self, node: CreateCommandNode) -> SuccessResult:
        """
        Transform a create command.

        npm needs `--` before arguments meant for the scaffolding tool, so it
        is always inserted there when arguments exist. A bare `--` from the
        input is kept for npm only.
        """
        template = render_node(node.template)
        additional_args = [render_node(arg) for arg in node.additional_args]

        commands = {}
        for manager in PackageManager:
            parts = [manager.value, "create", template]
            if manager == PackageManager.NPM and (additional_args or node.has_separator):
                parts.append("--")
            parts.extend(additional_args)
            commands[manager] = build_command(parts)

        meta = CreateMeta(
            manager=node.manager.value,
            template=node.template.value,
            additional_args=[arg.value for arg in node.additional_args],
        )
        return self._result(node, commands, meta)

    @staticmethod
    def _result(
        node: CommandNode, commands: dict[PackageManager, str], meta: CommandMeta
    ) -> SuccessResult:
        return SuccessResult(
            type=node.command_type,
            npm=commands[PackageManager.NPM],
            pnpm=commands[PackageManager.PNPM],
            yarn=commands[PackageManager.YARN],
            bun=commands[PackageManager.BUN],
            meta=meta,
        )
