"""
Unit tests for PlacementConfig and recommended settings.
"""

import pytest

from bento_toolkit.core.models import SizeClass
from bento_toolkit.engine.config import (
    ConfigurationError,
    PlacementConfig,
    optimize_placement_settings,
)


class TestPlacementConfig:
    """Tests for PlacementConfig dataclass."""

    def test_init_when_defaults_then_all_criteria_enabled(self):
        # Act
        config = PlacementConfig()

        # Assert
        assert config.balance_rows and config.prevent_clustering
        assert config.maintain_reading_flow and config.prioritize_high_value
        assert config.columns == 4
        assert config.max_rows is None
        assert config.min_card_width == 280

    def test_init_when_zero_columns_then_raises_error(self):
        with pytest.raises(ConfigurationError, match="columns must be positive"):
            PlacementConfig(columns=0)

    def test_init_when_zero_max_rows_then_raises_error(self):
        with pytest.raises(ConfigurationError, match="max_rows must be positive"):
            PlacementConfig(max_rows=0)

    def test_init_when_negative_container_width_then_raises_error(self):
        with pytest.raises(ConfigurationError, match="container_width"):
            PlacementConfig(container_width=-1)

    def test_init_when_zero_card_width_then_raises_error(self):
        with pytest.raises(ConfigurationError, match="min_card_width"):
            PlacementConfig(min_card_width=0)

    def test_configuration_error_when_caught_as_value_error_then_matches(self):
        with pytest.raises(ValueError):
            PlacementConfig(columns=-3)

    def test_simplified_when_called_then_clustering_and_balance_off(self):
        config = PlacementConfig(columns=2).simplified()

        assert not config.prevent_clustering
        assert not config.balance_rows
        assert config.maintain_reading_flow
        assert config.columns == 2

    def test_with_columns_when_called_then_only_size_changes(self):
        config = PlacementConfig(prevent_clustering=False).with_columns(2, max_rows=8)

        assert (config.columns, config.max_rows) == (2, 8)
        assert not config.prevent_clustering


class TestOptimizePlacementSettings:
    """Tests for optimize_placement_settings function."""

    def test_optimize_when_few_items_then_clustering_off(self, mixed_items):
        config = optimize_placement_settings(mixed_items(4))
        assert not config.prevent_clustering

    def test_optimize_when_single_size_class_then_clustering_off(self, make_item):
        items = [make_item(f"c{i}", SizeClass.COMPACT) for i in range(8)]
        assert not optimize_placement_settings(items).prevent_clustering

    def test_optimize_when_varied_items_then_base_kept(self, mixed_items):
        base = PlacementConfig(columns=3)
        assert optimize_placement_settings(mixed_items(8), base) is base
