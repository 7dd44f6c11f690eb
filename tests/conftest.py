"""
Pytest configuration and fixtures for confstore tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from confstore.config import ConfigStore, reset_default_store
from confstore.logging import reset_context


BASIC_CONFIG = """\
test:
  alfa: 5
  omega: "009"
bla: fin
"""


@pytest.fixture
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture
def config_dir(tmp_path):
    """Return an empty directory to hold config files."""
    directory = tmp_path / 'config'
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(config_dir):
    """Return a helper that writes <alias>.yaml into config_dir."""
    def _write(alias: str, content: str) -> Path:
        path = config_dir / f'{alias}.yaml'
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def config_file(write_config):
    """Write the basic config.yaml used by most tests."""
    return write_config('config', BASIC_CONFIG)


@pytest.fixture
def store(config_dir, config_file):
    """Return a store initialised on config_dir with config.yaml present."""
    return ConfigStore(config_dir)


@pytest.fixture(autouse=True)
def clean_state():
    """Reset shared logging context and the default store around each test."""
    reset_context()
    reset_default_store()
    yield
    reset_context()
    reset_default_store()
