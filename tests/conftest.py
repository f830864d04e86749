"""
Pytest configuration and shared fixtures for packmorph tests.
"""

import pytest

from packmorph.constants import PackageManager
from packmorph.executors import packmorph
from packmorph.options import PackmorphOptions


@pytest.fixture
def all_options():
    """Options with install, exec, run and create all enabled."""
    return PackmorphOptions.all_enabled()


@pytest.fixture
def multi_line_options():
    """All command classes enabled, input treated as a block of lines."""
    return PackmorphOptions.all_enabled().replace(parse_multi_line=True)


@pytest.fixture
def convert(all_options):
    """
    Convert a command with every command class enabled and return the
    four generated commands as a dict keyed by manager name.
    """

    def _convert(cmd: str) -> dict[str, str]:
        result = packmorph(cmd, all_options)
        assert result.ok, f"{cmd!r} failed: {getattr(result, 'reason', None)}"
        return {manager.value: result.command_for(manager) for manager in PackageManager}

    return _convert
