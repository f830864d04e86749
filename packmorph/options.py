"""
Conversion options.

Selects which command classes the converter accepts and whether the input
is treated as a multi-line block.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from packmorph.constants import CommandType

# Spellings accepted by from_dict in addition to the field names
_ALIASES = {
    "parseInstall": "parse_install",
    "parseExec": "parse_exec",
    "parseRun": "parse_run",
    "parseCreate": "parse_create",
    "parseMultiLine": "parse_multi_line",
}


@dataclass(frozen=True)
class PackmorphOptions:
    """
    Which command classes to convert.

    Only install commands are enabled by default. A structurally valid
    command of a disabled class is reported as `disabled-command-type`.
    """

    parse_install: bool = True
    parse_exec: bool = False
    parse_run: bool = False
    parse_create: bool = False
    parse_multi_line: bool = False

    def is_enabled(self, command_type: CommandType) -> bool:
        """Check whether `command_type` may be converted."""
        return {
            CommandType.INSTALL: self.parse_install,
            CommandType.EXEC: self.parse_exec,
            CommandType.RUN: self.parse_run,
            CommandType.CREATE: self.parse_create,
        }[CommandType(command_type)]

    def enabled_types(self) -> list[CommandType]:
        return [command_type for command_type in CommandType if self.is_enabled(command_type)]

    def replace(self, **overrides: Any) -> "PackmorphOptions":
        """Return a copy with `overrides` applied."""
        return dataclasses.replace(self, **overrides)

    @classmethod
    def all_enabled(cls) -> "PackmorphOptions":
        """Options with every command class turned on."""
        return cls(parse_install=True, parse_exec=True, parse_run=True, parse_create=True)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "PackmorphOptions":
        """
        Build options from a mapping.

        Args:
            mapping: Field names (`parse_exec`) or their camelCase
                spellings (`parseExec`) mapped to booleans

        Returns:
            A new options object; missing keys keep their defaults

        Raises:
            ValueError: If a key is not a known option or a value is not a boolean
        """
        field_names = {f.name for f in dataclasses.fields(cls)}
        values: dict[str, bool] = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in field_names:
                raise ValueError(f"Unknown option: {key}")
            if not isinstance(value, bool):
                raise ValueError(f"Option {key} must be a boolean, got {value!r}")
            values[name] = value
        return cls(**values)
