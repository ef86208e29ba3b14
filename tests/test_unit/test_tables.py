import pandas as pd
import pytest

from servosphere.utils.tables import is_table, map_tables


@pytest.mark.parametrize(
    "obj, expected",
    [
        (pd.DataFrame(), True),
        (pd.DataFrame({"dx": [1.0]}), True),
        (pd.Series([1.0]), False),
        ({"dx": [1.0]}, False),
        (None, False),
    ],
)
def test_is_table(obj, expected):
    assert is_table(obj) is expected


def test_map_tables_applies_to_tables_only(table_collection, caplog):
    """Tables are replaced by their transformed versions; others are kept."""
    result = map_tables(table_collection, lambda table: table.head(1))
    assert len(result) == len(table_collection)
    assert len(result[0]) == 1
    assert len(result[3]) == 1
    assert result[1] is table_collection[1]
    assert result[2] is None
    assert result[4] is table_collection[4]
    assert "passing through non-table entry 1" in caplog.text


def test_map_tables_each_table_independently(three_step_table):
    seen = []

    def _record(table):
        seen.append(len(table))
        return table

    map_tables([three_step_table, three_step_table.head(2)], _record)
    assert seen == [3, 2]
