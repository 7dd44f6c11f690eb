"""
Test tree flattening.

Tests for flatten_tree(), the routine behind ConfigStore.sweep().
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from confstore.config import flatten_tree


class TestFlattenTree:
    """Tests for flatten_tree() function."""

    @pytest.mark.unit
    def test_nested_mappings(self):
        """Test that nested keys are dot-joined."""
        tree = {'test': {'alfa': 5, 'omega': '009'}, 'info': {'password': 'non'}}

        assert flatten_tree(tree) == {
            'test.alfa': 5,
            'test.omega': '009',
            'info.password': 'non',
        }

    @pytest.mark.unit
    def test_deep_nesting(self):
        """Test three levels of nesting."""
        assert flatten_tree({'a': {'b': {'c': 1}}}) == {'a.b.c': 1}

    @pytest.mark.unit
    def test_lists_encoded_as_json(self):
        """Test that lists are not recursed into."""
        tree = {'db': {'ports': [1, 2], 'replicas': [{'host': 'x'}]}}

        assert flatten_tree(tree) == {
            'db.ports': '[1,2]',
            'db.replicas': '[{"host":"x"}]',
        }

    @pytest.mark.unit
    def test_empty_mapping_produces_nothing(self):
        """Test that an empty section contributes no keys."""
        assert flatten_tree({'a': {}, 'b': 1}) == {'b': 1}

    @pytest.mark.unit
    def test_scalars_kept_as_is(self):
        """Test that scalar types survive flattening."""
        result = flatten_tree({'flag': True, 'ratio': 0.5, 'none': None})

        assert result == {'flag': True, 'ratio': 0.5, 'none': None}

    @pytest.mark.unit
    def test_nested_collision_keeps_first(self):
        """Test that a nested key never replaces an existing one."""
        tree = {'a.b': 'literal', 'a': {'b': 'nested'}}

        assert flatten_tree(tree) == {'a.b': 'literal'}

    @pytest.mark.unit
    def test_direct_leaf_overwrites(self):
        """Test that a later direct leaf replaces an earlier nested key."""
        tree = {'a': {'b': 'nested'}, 'a.b': 'literal'}

        assert flatten_tree(tree) == {'a.b': 'literal'}

    @pytest.mark.unit
    def test_order_follows_tree(self):
        """Test that keys are produced in insertion order."""
        tree = {'z': 1, 'm': {'y': 2, 'b': 3}, 'a': 4}

        assert list(flatten_tree(tree)) == ['z', 'm.y', 'm.b', 'a']

    @pytest.mark.unit
    def test_parent_prefix(self):
        """Test flattening under an explicit prefix."""
        assert flatten_tree({'x': 1}, parent='root') == {'root.x': 1}
