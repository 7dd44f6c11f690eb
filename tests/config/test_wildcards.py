"""
Test %name% wildcard substitution and "key:value" formatting.
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from confstore.config import format_pair, replace_wildcards


class TestReplaceWildcards:
    """Tests for replace_wildcards() function."""

    @pytest.mark.unit
    def test_replaces_each_token(self):
        """Test that every token is passed to the resolver."""
        values = {'base': '/srv', 'name': 'app'}

        result = replace_wildcards('%base%/%name%/%base%', values.__getitem__)
        assert result == '/srv/app//srv'

    @pytest.mark.unit
    def test_ignores_non_word_tokens(self):
        """Test that only word characters form a token."""
        result = replace_wildcards('100% sure %a.b%', lambda name: 'X')

        assert result == '100% sure %a.b%'

    @pytest.mark.unit
    def test_non_string_unchanged(self):
        """Test that non-strings are returned as-is."""
        assert replace_wildcards(5, lambda name: 'X') == 5
        assert replace_wildcards(None, lambda name: 'X') is None

    @pytest.mark.unit
    def test_values_rendered_with_str(self):
        """Test that resolved values are rendered with str()."""
        values = {'port': 8080, 'debug': True, 'nothing': None}

        result = replace_wildcards('%port%|%debug%|%nothing%', values.__getitem__)
        assert result == '8080|True|None'


class TestFormatPair:
    """Tests for format_pair() function."""

    @pytest.mark.unit
    def test_positions(self):
        """Test formatting each position."""
        mapping = {'user': 'pwd', 'user2': 'pwd2'}

        assert format_pair(mapping) == 'user:pwd'
        assert format_pair(mapping, 1) == 'user2:pwd2'

    @pytest.mark.unit
    def test_out_of_range(self):
        """Test indexes outside the mapping."""
        assert format_pair({'user': 'pwd'}, 1) is None
        assert format_pair({'user': 'pwd'}, -1) is None
        assert format_pair({}, 0) is None
