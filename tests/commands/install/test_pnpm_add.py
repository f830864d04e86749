"""
Tests for pnpm add/install commands.
"""

from packmorph import packmorph
from packmorph.constants import PackageManager


class TestBasic:
    def test_add(self, convert):
        assert convert("pnpm add react") == {
            "npm": "npm install react",
            "pnpm": "pnpm add react",
            "yarn": "yarn add react",
            "bun": "bun add react",
        }

    def test_install_without_packages(self, convert):
        assert convert("pnpm install")["yarn"] == "yarn install"

    def test_install_with_packages_becomes_add(self, convert):
        """`pnpm install <pkg>` and `pnpm i <pkg>` are normalized to add."""
        assert convert("pnpm i zod")["pnpm"] == "pnpm add zod"

    def test_meta_manager(self):
        assert packmorph("pnpm add react").meta.manager == PackageManager.PNPM


class TestFlags:
    """pnpm is a spelling-preserving source, like npm."""

    def test_dev(self, convert):
        assert convert("pnpm add -D vitest") == {
            "npm": "npm install -D vitest",
            "pnpm": "pnpm add -D vitest",
            "yarn": "yarn add --dev vitest",
            "bun": "bun add --dev vitest",
        }

    def test_long_dev_preserved(self, convert):
        assert convert("pnpm add --save-dev vitest")["npm"] == "npm install --save-dev vitest"

    def test_global(self, convert):
        result = convert("pnpm add --global pm2")
        assert result["pnpm"] == "pnpm add --global pm2"
        assert result["yarn"] == "yarn global add pm2"

    def test_frozen_lockfile(self, convert):
        assert convert("pnpm install --frozen-lockfile") == {
            "npm": "npm install --frozen-lockfile",
            "pnpm": "pnpm install --frozen-lockfile",
            "yarn": "yarn install --frozen-lockfile",
            "bun": "bun install",
        }
