"""
Syntax tree for parsed package manager commands.

Exports the node types produced by the parser and the transformer that
turns them into per-manager commands.

Note: Named 'syntax_tree' instead of 'ast' to avoid conflict with Python's built-in ast module.
"""

from packmorph.syntax_tree.nodes import (
    ASTNode,
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
from packmorph.syntax_tree.transformer import ASTTransformer

__all__ = [
    "ASTNode",
    "ArgumentNode",
    "CommandNode",
    "CreateCommandNode",
    "ExecCommandNode",
    "FlagNode",
    "InstallCommandNode",
    "ManagerNode",
    "RunCommandNode",
    "SubcommandNode",
    "ASTTransformer",
]
