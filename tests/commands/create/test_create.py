"""
Tests for create commands and npm's `--` separator.
"""

from packmorph import packmorph
from packmorph.constants import CommandType, PackageManager


class TestSeparator:
    """npm needs `--` before arguments meant for the scaffolding tool."""

    def test_inserted_for_npm(self, convert):
        assert convert("npm create vite my-app") == {
            "npm": "npm create vite -- my-app",
            "pnpm": "pnpm create vite my-app",
            "yarn": "yarn create vite my-app",
            "bun": "bun create vite my-app",
        }

    def test_existing_separator_not_doubled(self, convert):
        assert convert("npm create vite@latest my-app -- --template react-ts") == {
            "npm": "npm create vite@latest -- my-app --template react-ts",
            "pnpm": "pnpm create vite@latest my-app --template react-ts",
            "yarn": "yarn create vite@latest my-app --template react-ts",
            "bun": "bun create vite@latest my-app --template react-ts",
        }

    def test_from_other_managers(self, convert):
        assert convert("pnpm create astro my-site")["npm"] == "npm create astro -- my-site"

    def test_no_arguments(self, convert):
        assert convert("yarn create next-app") == {
            "npm": "npm create next-app",
            "pnpm": "pnpm create next-app",
            "yarn": "yarn create next-app",
            "bun": "bun create next-app",
        }

    def test_bare_trailing_separator(self, convert):
        """A `--` with nothing after it is kept for npm only."""
        result = convert("npm create vite --")
        assert result["npm"] == "npm create vite --"
        assert result["pnpm"] == "pnpm create vite"


class TestMeta:
    def test_fields(self):
        result = packmorph("bun create vite my-app -- --template vue", parse_create=True)
        assert result.type == CommandType.CREATE
        assert result.meta.manager == PackageManager.BUN
        assert result.meta.template == "vite"
        assert result.meta.additional_args == ["my-app", "--template", "vue"]

    def test_missing_template(self):
        assert packmorph("npm create", parse_create=True).reason == "parse-error"

    def test_quoted_argument(self, convert):
        assert convert('npm create vite "my app"')["npm"] == 'npm create vite -- "my app"'
