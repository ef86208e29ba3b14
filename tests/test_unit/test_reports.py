import numpy as np
import pandas as pd
import pytest

from servosphere.utils.reports import report_nan_values


@pytest.fixture
def table_with_nan():
    """Return a table with missing values in two of its columns."""
    return pd.DataFrame(
        {
            "dT": [100, 100, 100, 100],
            "bearing": [np.nan, 10.0, 20.0, np.nan],
            "turn_angle": [np.nan, np.nan, 10.0, np.nan],
        }
    )


@pytest.mark.parametrize(
    "columns, label, expected, not_expected",
    [
        (
            None,
            None,
            ["in table", "bearing", "2/4 (50.0%)", "turn_angle", "3/4"],
            ["dT"],
        ),
        (["bearing"], "trial_1", ["trial_1", "2/4"], ["turn_angle"]),
        (["dT"], None, ["No missing points"], ["bearing"]),
    ],
)
def test_report_nan_values(
    table_with_nan, columns, label, expected, not_expected, caplog
):
    """Test that the report lists only the columns with missing values."""
    report = report_nan_values(table_with_nan, columns, label)
    assert all(text in report for text in expected)
    assert not any(text in report for text in not_expected)
    assert report in caplog.text


def test_report_nan_values_missing_column(table_with_nan):
    with pytest.raises(KeyError, match="velocity"):
        report_nan_values(table_with_nan, ["velocity"])
