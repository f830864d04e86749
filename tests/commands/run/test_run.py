"""
Tests for run commands.
"""

import pytest

from packmorph import packmorph
from packmorph.constants import CommandType


class TestRun:
    @pytest.mark.parametrize("manager", ["npm", "pnpm", "yarn", "bun"])
    def test_same_script_for_every_manager(self, convert, manager):
        assert convert(f"{manager} run dev") == {
            "npm": "npm run dev",
            "pnpm": "pnpm run dev",
            "yarn": "yarn run dev",
            "bun": "bun run dev",
        }

    def test_args_after_separator(self, convert):
        result = convert("npm run test -- --coverage")
        assert result["npm"] == "npm run test -- --coverage"
        assert result["yarn"] == "yarn run test -- --coverage"

    def test_args_without_separator(self, convert):
        assert convert("yarn run build --watch")["npm"] == "npm run build --watch"

    def test_quoted_script(self, convert):
        assert convert("npm run 'lint:fix'")["bun"] == "bun run 'lint:fix'"

    def test_meta(self):
        result = packmorph("pnpm run test -- --coverage", parse_run=True)
        assert result.type == CommandType.RUN
        assert result.meta.script == "test"
        assert result.meta.args == ["--", "--coverage"]
        assert result.to_dict()["meta"] == {
            "type": "run",
            "manager": "pnpm",
            "script": "test",
            "args": ["--", "--coverage"],
        }

    def test_missing_script(self):
        assert packmorph("npm run", parse_run=True).reason == "parse-error"
