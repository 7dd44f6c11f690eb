"""
Test the shared default store.

Tests for the module-level functions in confstore.config.
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from confstore import config
from confstore.exceptions import ConfigFileNotFoundError, InvalidArgumentError, InvalidKeyError


@pytest.fixture
def shared(config_dir, config_file):
    """Initialise the shared store on the test config directory."""
    config.init(config_dir)
    return config.get_default_store()


class TestDefaultStore:
    """Tests for the module-level facade."""

    @pytest.mark.unit
    def test_same_instance(self):
        """Test that the shared store is created once."""
        assert config.get_default_store() is config.get_default_store()

    @pytest.mark.unit
    def test_reset_creates_new_instance(self):
        """Test that reset_default_store() replaces the store."""
        before = config.get_default_store()

        assert config.reset_default_store() is not before

    @pytest.mark.unit
    def test_uninitialised(self):
        """Test that the facade requires init()."""
        with pytest.raises(InvalidArgumentError):
            config.get('config.bla')

    @pytest.mark.integration
    def test_facade_operations(self, shared):
        """Test every operation through the facade."""
        assert config.get('config.test.alfa') == 5
        assert config.get('config.test.beta', 'fallback') == 'fallback'
        assert config.item_exist('config.test.alfa')
        assert not config.item_exist('config.test.beta')

        assert config.set('config.base', 'blablabla') == 'blablabla'
        config.set_item('config.testbase', '%base%/algo')
        assert config.get_replaced('config.testbase') == 'blablabla/algo'

        config.set('config.userpwd', {'user': 'pwd'})
        assert config.get_to_user_pwd('config.userpwd') == 'user:pwd'

        assert config.sweep()['test.omega'] == '009'
        assert config.get_all('config')['base'] == 'blablabla'

    @pytest.mark.unit
    def test_clear_cache(self, shared):
        """Test that clear_cache() drops in-memory changes."""
        config.set('config.adam', 'word')
        config.clear_cache()

        with pytest.raises(InvalidKeyError):
            config.get('config.adam')

    @pytest.mark.unit
    def test_missing_file_after_clear(self, shared, config_file):
        """Test that a removed file is reported once the cache is cleared."""
        config.clear_cache()
        config_file.unlink()

        with pytest.raises(ConfigFileNotFoundError):
            config.get('config.x')
