"""Pytest configuration for the unicodescalar test suite.

Hypothesis profiles:
- dev: default locally, 500 examples
- ci: selected by CI=true, 50 derandomized examples

HYPOTHESIS_PROFILE=<name> overrides the detection.

Tests marked @pytest.mark.fuzz sweep whole planes of the code space and
are skipped unless requested with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)

_default_profile = "ci" if os.environ.get("CI") == "true" else "dev"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", _default_profile))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: full code space sweeps (run with -m fuzz)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the marker expression names them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
