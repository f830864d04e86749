"""
Tests for install flag classification and spelling rules.
"""

import pytest

from packmorph.flags import FLAG_RULES, FlagCategory, classify_flag


@pytest.mark.parametrize(
    "flag,category",
    [
        ("-D", FlagCategory.DEV),
        ("--save-dev", FlagCategory.DEV),
        ("--dev", FlagCategory.DEV),
        ("-d", FlagCategory.DEV),
        ("-g", FlagCategory.GLOBAL),
        ("--global", FlagCategory.GLOBAL),
        ("-E", FlagCategory.EXACT),
        ("--save-exact", FlagCategory.EXACT),
        ("--exact", FlagCategory.EXACT),
        ("-O", FlagCategory.OPTIONAL),
        ("--save-optional", FlagCategory.OPTIONAL),
        ("--optional", FlagCategory.OPTIONAL),
        ("-P", FlagCategory.PEER),
        ("--save-peer", FlagCategory.PEER),
        ("--peer", FlagCategory.PEER),
        ("--frozen-lockfile", FlagCategory.FROZEN),
    ],
)
def test_known_flags(flag, category):
    assert classify_flag(flag) == category


@pytest.mark.parametrize("flag", ["-e", "-G", "--save-dev=true", "--sav", "--legacy-peer-deps"])
def test_unknown_flags(flag):
    """Matching is exact and case-sensitive."""
    assert classify_flag(flag) == FlagCategory.UNKNOWN


class TestFlagRules:
    """Tests for per-category spelling rules."""

    def rule(self, category):
        return next(rule for rule in FLAG_RULES if rule.category == category)

    def test_rule_order(self):
        assert [rule.category for rule in FLAG_RULES] == [
            FlagCategory.DEV,
            FlagCategory.GLOBAL,
            FlagCategory.EXACT,
            FlagCategory.OPTIONAL,
            FlagCategory.PEER,
        ]

    def test_preserves_user_spelling(self):
        assert self.rule(FlagCategory.DEV).npm_spelling(["--save-dev"], preserve=True) == "--save-dev"

    def test_first_variant_wins(self):
        """Variant order, not input order, decides between two spellings."""
        rule = self.rule(FlagCategory.DEV)
        assert rule.npm_spelling(["--save-dev", "-D"], preserve=True) == "-D"

    def test_fallback_when_not_preserving(self):
        assert self.rule(FlagCategory.EXACT).npm_spelling(["--exact"], preserve=False) == "-E"

    def test_yarn_has_no_global_flag(self):
        assert self.rule(FlagCategory.GLOBAL).yarn is None
        assert self.rule(FlagCategory.GLOBAL).bun == "-g"

    def test_optional_and_peer_are_npm_only(self):
        for category in (FlagCategory.OPTIONAL, FlagCategory.PEER):
            assert self.rule(category).yarn is None
            assert self.rule(category).bun is None
