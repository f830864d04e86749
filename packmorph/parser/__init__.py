"""
Parser module for command syntax analysis.

This module provides the recursive descent parser that converts
tokenized command lines into AST nodes.
"""

from packmorph.parser.command_parser import CommandParser, ParserError, parse_command

__all__ = [
    "CommandParser",
    "ParserError",
    "parse_command",
]
