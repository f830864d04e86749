"""
Flag classification for install commands.

Maps the recognized flag spellings to semantic categories and describes,
per category, how each target manager spells the flag.
"""

from dataclasses import dataclass
from enum import Enum


class FlagCategory(str, Enum):
    """Semantic meaning of an install flag, independent of spelling."""

    DEV = "dev"
    GLOBAL = "global"
    EXACT = "exact"
    OPTIONAL = "optional"
    PEER = "peer"
    FROZEN = "frozen"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Exact, case-sensitive spellings. No prefix or abbreviation matching.
FLAG_MAP: dict[str, FlagCategory] = {
    "-D": FlagCategory.DEV,
    "--save-dev": FlagCategory.DEV,
    "--dev": FlagCategory.DEV,
    "-d": FlagCategory.DEV,
    "-g": FlagCategory.GLOBAL,
    "--global": FlagCategory.GLOBAL,
    "-E": FlagCategory.EXACT,
    "--save-exact": FlagCategory.EXACT,
    "--exact": FlagCategory.EXACT,
    "-O": FlagCategory.OPTIONAL,
    "--save-optional": FlagCategory.OPTIONAL,
    "--optional": FlagCategory.OPTIONAL,
    "-P": FlagCategory.PEER,
    "--save-peer": FlagCategory.PEER,
    "--peer": FlagCategory.PEER,
    "--frozen-lockfile": FlagCategory.FROZEN,
}

FROZEN_LOCKFILE_FLAG = "--frozen-lockfile"


def classify_flag(flag: str) -> FlagCategory:
    """Return the semantic category of `flag`, or UNKNOWN if unmapped."""
    return FLAG_MAP.get(flag, FlagCategory.UNKNOWN)


@dataclass(frozen=True)
class FlagRule:
    """
    How one flag category is emitted for each target manager.

    npm and pnpm receive the user's own spelling when it is one of
    `variants` (first match wins), otherwise `fallback`. yarn and bun always
    receive their fixed spelling, or nothing when it is None.
    """

    category: FlagCategory
    variants: tuple[str, ...]
    fallback: str
    yarn: str | None = None
    bun: str | None = None

    def npm_spelling(self, raw_flags: list[str], preserve: bool) -> str:
        """Pick the spelling used in npm and pnpm output."""
        if preserve:
            for variant in self.variants:
                if variant in raw_flags:
                    return variant
        return self.fallback


# Emission order of the categories in generated install commands. Frozen is
# handled separately because its yarn form depends on package presence.
FLAG_RULES: tuple[FlagRule, ...] = (
    FlagRule(
        FlagCategory.DEV,
        variants=("-D", "--save-dev", "--dev", "-d"),
        fallback="-D",
        yarn="--dev",
        bun="--dev",
    ),
    FlagRule(
        FlagCategory.GLOBAL,
        variants=("-g", "--global"),
        fallback="-g",
        # yarn expresses global through `yarn global add`
        bun="-g",
    ),
    FlagRule(
        FlagCategory.EXACT,
        variants=("-E", "--save-exact", "--exact"),
        fallback="-E",
        yarn="--exact",
        bun="--exact",
    ),
    FlagRule(
        FlagCategory.OPTIONAL,
        variants=("-O", "--save-optional", "--optional"),
        fallback="-O",
    ),
    FlagRule(
        FlagCategory.PEER,
        variants=("-P", "--save-peer", "--peer"),
        fallback="-P",
    ),
)
