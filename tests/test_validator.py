"""
Tests for shell composition checks run before tokenizing.
"""

import pytest

from packmorph.constants import INVALID_COMMAND_PATTERNS
from packmorph.results import ErrorReason
from packmorph.validator import select_pattern, validate_command


@pytest.mark.parametrize(
    "cmd",
    [
        "npm install react",
        "  pnpm add -D vitest  ",
        "(cd app) npm install",
        "npm install 'react@>=18 <19'",
    ],
)
def test_accepted(cmd):
    assert validate_command(cmd) is None


@pytest.mark.parametrize(
    "cmd",
    [
        "",
        "   ",
        "npm install react; rm -rf /",
        "npm install react && npm run dev",
        "npm install react || true",
        "npm install react\nnpm run dev",
        "(npm install react)",
        "$(npm bin)/eslint",
    ],
)
def test_rejected(cmd):
    assert validate_command(cmd) == ErrorReason.NOT_SUPPORTED_COMMAND


class TestPatternSelection:
    """Tests for choosing between the standard and exec patterns."""

    @pytest.mark.parametrize("cmd", ["npx prettier .", "bunx cowsay", "pnpm dlx create-vite"])
    def test_exec_pattern(self, cmd):
        assert select_pattern(cmd) is INVALID_COMMAND_PATTERNS["exec"]

    @pytest.mark.parametrize("cmd", ["npm install", "yarn add react", "npm"])
    def test_standard_pattern(self, cmd):
        assert select_pattern(cmd) is INVALID_COMMAND_PATTERNS["standard"]

    def test_explicit_pattern(self):
        """An explicit pattern overrides the selection."""
        cmd = "(cd app) npx prettier ."
        assert validate_command(cmd, INVALID_COMMAND_PATTERNS["exec"]) is None
        assert validate_command(cmd, INVALID_COMMAND_PATTERNS["standard"]) is not None
