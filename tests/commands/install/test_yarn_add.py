"""
Tests for yarn add/install commands.
"""

from packmorph import packmorph
from packmorph.constants import PackageManager


class TestBasic:
    def test_add(self, convert):
        assert convert("yarn add react") == {
            "npm": "npm install react",
            "pnpm": "pnpm add react",
            "yarn": "yarn add react",
            "bun": "bun add react",
        }

    def test_multiple_packages(self):
        result = packmorph("yarn add react react-dom")
        assert result.meta.packages == ["react", "react-dom"]
        assert result.meta.manager == PackageManager.YARN

    def test_install(self, convert):
        assert convert("yarn install") == {
            "npm": "npm install",
            "pnpm": "pnpm install",
            "yarn": "yarn install",
            "bun": "bun install",
        }


class TestFlags:
    """yarn sources get canonical short spellings for npm and pnpm."""

    def test_long_dev(self, convert):
        assert convert("yarn add --dev typescript") == {
            "npm": "npm install -D typescript",
            "pnpm": "pnpm add -D typescript",
            "yarn": "yarn add --dev typescript",
            "bun": "bun add --dev typescript",
        }

    def test_short_dev(self, convert):
        assert convert("yarn add -D typescript")["yarn"] == "yarn add --dev typescript"

    def test_exact(self, convert):
        result = convert("yarn add --exact react")
        assert result["npm"] == "npm install -E react"
        assert result["yarn"] == "yarn add --exact react"

    def test_unknown_flag_dropped_from_yarn(self, convert):
        result = convert("yarn add --ignore-scripts left-pad")
        assert result["yarn"] == "yarn add left-pad"
        assert result["npm"] == "npm install --ignore-scripts left-pad"


class TestGlobalAdd:
    """Tests for `yarn global add`."""

    def test_global_add(self, convert):
        assert convert("yarn global add eslint") == {
            "npm": "npm install -g eslint",
            "pnpm": "pnpm add -g eslint",
            "yarn": "yarn global add eslint",
            "bun": "bun add -g eslint",
        }

    def test_meta_global(self):
        meta = packmorph("yarn global add eslint").meta
        assert meta.global_
        assert meta.unknown_flags == []

    def test_global_add_with_dev(self, convert):
        assert convert("yarn global add --dev x")["yarn"] == "yarn global add --dev x"

    def test_global_without_add(self):
        assert packmorph("yarn global list").reason == "not-supported-command"
