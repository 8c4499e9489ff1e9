"""Shared pytest fixtures."""

import pytest

from mdoc_frontmatter.config.settings import set_config


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make every test build its own global configuration."""
    set_config(None)
    yield
    set_config(None)
