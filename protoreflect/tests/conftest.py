"""Unit tests configuration file."""

from pathlib import Path

import pytest

SAMPLE_SOURCE = Path(__file__).parent / "sample.py"


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def gen_code():
    """Execute the generated sample source into a fresh namespace.

    Every call yields new message and builder classes, unrelated to the
    ones imported from protoreflect.tests.sample.
    """

    def _gen_code():
        gbl = {"__name__": "generated_sample"}
        exec(SAMPLE_SOURCE.read_text(encoding="utf-8"), gbl)
        return gbl

    return _gen_code
