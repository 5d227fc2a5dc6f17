"""Global pytest configuration.

Registers the fixture plugin ``sample_graphs`` (``tests/sample_graphs.py``).
The module is not imported here so pytest can apply assertion rewriting to it;
it is importable because pytest puts this directory on ``sys.path`` when it
loads this conftest.
"""

from __future__ import annotations

import pytest

from pathgraph.logging import disable_debug_logging

pytest_plugins: list[str] = ["sample_graphs"]


@pytest.fixture(autouse=True)
def _default_log_level():
    """Start and end every test with debug logging off."""
    disable_debug_logging()
    yield
    disable_debug_logging()
