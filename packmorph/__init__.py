"""
Packmorph - Translate package manager commands between npm, pnpm, yarn and bun.

This package parses a package manager command line into a syntax tree
and generates the equivalent command for each of the four managers.

Usage:
    from packmorph import packmorph

    result = packmorph("npm install -D vitest")
    result.yarn  # "yarn add --dev vitest"

    # Other command classes are opt-in
    packmorph("npx prettier .", parse_exec=True).pnpm  # "pnpm dlx prettier ."
"""

# Lazy imports to avoid circular import issues
def __getattr__(name: str):
    if name in ("packmorph", "parse_and_transform", "CommandConverter"):
        from packmorph import executors
        return getattr(executors, name)
    if name == "MultiLineConverter":
        from packmorph.multiline import MultiLineConverter
        return MultiLineConverter
    if name == "PackmorphOptions":
        from packmorph.options import PackmorphOptions
        return PackmorphOptions
    if name in ("PackageManager", "CommandType"):
        from packmorph import constants
        return getattr(constants, name)
    if name in (
        "ErrorReason",
        "ErrorResult",
        "SuccessResult",
        "MultiLineResult",
        "LineConversion",
        "InstallMeta",
        "ExecMeta",
        "RunMeta",
        "CreateMeta",
    ):
        from packmorph import results
        return getattr(results, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "packmorph",
    "parse_and_transform",
    "CommandConverter",
    "MultiLineConverter",
    "PackmorphOptions",
    "PackageManager",
    "CommandType",
    "ErrorReason",
    "ErrorResult",
    "SuccessResult",
    "MultiLineResult",
    "LineConversion",
    "InstallMeta",
    "ExecMeta",
    "RunMeta",
    "CreateMeta",
]

__version__ = "0.1.0"
