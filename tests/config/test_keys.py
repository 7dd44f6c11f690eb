"""
Test item path parsing.
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from confstore.config import parse_item
from confstore.exceptions import InvalidArgumentError


class TestParseItem:
    """Tests for parse_item() function."""

    @pytest.mark.unit
    def test_alias_and_keys(self):
        """Test splitting a three-segment path."""
        path = parse_item('config.test.alfa')

        assert path.item == 'config.test.alfa'
        assert path.alias == 'config'
        assert path.keys == ['test', 'alfa']

    @pytest.mark.unit
    def test_two_segments(self):
        """Test the shortest valid path."""
        assert parse_item('config.bla').keys == ['bla']

    @pytest.mark.unit
    def test_empty_item(self):
        """Test that an empty string is rejected."""
        with pytest.raises(InvalidArgumentError, match='empty'):
            parse_item('')

    @pytest.mark.unit
    def test_single_segment(self):
        """Test that a path without a dot is rejected."""
        with pytest.raises(InvalidArgumentError, match='at least two fields'):
            parse_item('config')
