"""Pytest configuration and fixtures."""

import logging

import pytest
import yaml


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by CLI invocations.

    The CLI calls logging.basicConfig(), which would otherwise leak a
    handler (and level) into later tests.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a configuration mapping to a YAML file."""

    def _write(data, name="analysis.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path

    return _write
