"""Utility functions for reporting missing data."""

from collections.abc import Iterable

import pandas as pd

from servosphere.utils.logging import logger
from servosphere.validators.tables import validate_columns


def report_nan_values(
    table: pd.DataFrame,
    columns: Iterable[str] | None = None,
    label: str | None = None,
) -> str:
    """Report the number and percentage of rows that are NaN per column.

    Derived variables are missing by construction at some rows, e.g.
    ``bearing`` at the first and last row of every table and
    ``turn_angle`` wherever the organism did not move. This report makes
    such gaps visible in the log file.

    Parameters
    ----------
    table : pandas.DataFrame
        The table to report on.
    columns : iterable of str, optional
        The columns to include. Defaults to all columns.
    label : str, optional
        Label to identify the table in the report. Defaults to "table".

    Returns
    -------
    str
        A string containing the report.

    """
    columns = list(table.columns) if columns is None else list(columns)
    validate_columns(table, columns)
    label = label or "table"
    nan_count = table[columns].isna().sum()
    nan_count = nan_count[nan_count > 0]
    if nan_count.empty:
        report = f"No missing points (marked as NaN) in {label}."
    else:
        total_count = len(table)
        nan_count_str = (
            nan_count.astype(str)
            + f"/{total_count} ("
            + (nan_count / total_count * 100).round(2).astype(str)
            + "%)"
        )
        report = (
            f"Missing points (marked as NaN) in {label}:"
            f"\n\n{nan_count_str.to_string()}"
        )
    logger.info(report)
    return report
