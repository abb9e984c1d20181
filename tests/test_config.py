import pytest

from comparators.config import DEFAULT_ORDERING, OrderingConfig, SortConfig, SortKey


def test_default_ordering_uses_locale_collation():
    assert DEFAULT_ORDERING.collation == "locale"
    assert DEFAULT_ORDERING.clamp_numbers is False


def test_unknown_collation_rejected():
    with pytest.raises(ValueError, match="Unknown collation"):
        OrderingConfig(collation="icu")


def test_unknown_null_placement_rejected():
    with pytest.raises(ValueError, match="Unknown null placement"):
        SortConfig(nulls="middle")


def test_sort_config_builds_ordering():
    config = SortConfig(keys=(SortKey("a"),), collation="codepoint", clamp_numbers=True)
    assert config.ordering() == OrderingConfig(collation="codepoint", clamp_numbers=True)
