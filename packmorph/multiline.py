"""
Multi-line batching.

Converts a block of shell lines (a README snippet, a setup script) line by
line. Lines that are not convertible commands are reproduced verbatim, so
the four output blocks keep the layout of the input.
"""

import logging

from packmorph.constants import PackageManager
from packmorph.executors import CommandConverter
from packmorph.options import PackmorphOptions
from packmorph.results import (
    ErrorReason,
    ErrorResult,
    LineConversion,
    MultiLineResult,
    PackmorphMultiLineResult,
    SuccessResult,
)


class MultiLineConverter:
    """
    Converts a block of commands that must all use the same manager.

    Usage:
        result = MultiLineConverter(PackmorphOptions.all_enabled()).convert(
            "# setup\\nnpm install\\nnpm run dev"
        )
        result.bun  # "# setup\\nbun install\\nbun run dev"
    """

    def __init__(self, options: PackmorphOptions | None = None, logger: logging.Logger | None = None):
        self.options = options or PackmorphOptions()
        self.logger = logger or logging.getLogger("packmorph.multiline")

    def convert(self, text: str) -> PackmorphMultiLineResult:
        """
        Convert every line of `text`.

        Args:
            text: Lines separated by newlines

        Returns:
            A MultiLineResult, or an ErrorResult with
            `mixed-package-managers` when converted lines name different
            managers, or `not-supported-command` when no line converted
        """
        if not isinstance(text, str):
            raise TypeError(f"Command must be a string, got {type(text).__name__}")

        outputs: dict[PackageManager, list[str]] = {manager: [] for manager in PackageManager}
        conversions: list[LineConversion] = []
        detected_manager: PackageManager | None = None

        for lineno, line in enumerate(text.split("\n"), start=1):
            trimmed = line.strip()
            result = self._convert_line(lineno, trimmed)
            if result is None:
                for lines in outputs.values():
                    lines.append(line)
                continue

            manager = result.meta.manager
            if detected_manager is None:
                detected_manager = manager
            elif manager != detected_manager:
                self.logger.info(
                    "Line %d uses %s but the block started with %s", lineno, manager, detected_manager
                )
                return ErrorResult(ErrorReason.MIXED_PACKAGE_MANAGERS)

            leading = line[: len(line) - len(line.lstrip())]
            trailing = line[len(line.rstrip()):]
            for target, lines in outputs.items():
                lines.append(f"{leading}{result.command_for(target)}{trailing}")
            conversions.append(LineConversion(original=trimmed, result=result))

        if not conversions:
            return ErrorResult(ErrorReason.NOT_SUPPORTED_COMMAND)

        return MultiLineResult(
            type=conversions[0].result.type,
            npm="\n".join(outputs[PackageManager.NPM]),
            pnpm="\n".join(outputs[PackageManager.PNPM]),
            yarn="\n".join(outputs[PackageManager.YARN]),
            bun="\n".join(outputs[PackageManager.BUN]),
            commands=conversions,
        )

    def _convert_line(self, lineno: int, trimmed: str) -> SuccessResult | None:
        """Convert one stripped line; None means copy it through unchanged."""
        if not trimmed or trimmed.startswith("#"):
            return None

        result = CommandConverter(trimmed, self.options, self.logger).convert()
        if not result.ok:
            self.logger.debug("Keeping line %d as is: %s", lineno, result.reason)
            return None
        return result
