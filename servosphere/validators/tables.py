"""Validators for tables of servosphere recordings."""

from collections.abc import Iterable

import pandas as pd

from servosphere.utils.logging import logger


def validate_columns(
    table: pd.DataFrame,
    required_columns: Iterable[str],
    operation: str | None = None,
) -> None:
    """Validate that a table contains the required columns.

    Parameters
    ----------
    table : pandas.DataFrame
        The table to validate.
    required_columns : iterable of str
        Names of the columns that must be present in ``table``.
    operation : str, optional
        Name of the operation requiring the columns, used in the error
        message.

    Raises
    ------
    KeyError
        If any of the required columns is absent from the table.

    Examples
    --------
    >>> validate_columns(table, ["dx", "dy"], operation="calc_xy")

    """
    missing = [col for col in required_columns if col not in table.columns]
    if missing:
        prefix = f"{operation} requires" if operation else "Table must contain"
        raise logger.error(
            KeyError(
                f"{prefix} columns {missing}, but the table only has "
                f"{list(table.columns)}."
            )
        )


def validate_table_collection(tables) -> None:
    """Check that ``tables`` is an ordered collection, not a single table.

    Raises
    ------
    TypeError
        If ``tables`` is a DataFrame, a string, a mapping or not a
        sequence at all.

    """
    if isinstance(tables, pd.DataFrame):
        raise logger.error(
            TypeError(
                "Expected a collection of tables, but got a single "
                "DataFrame. Wrap it in a list, e.g. [table]."
            )
        )
    if isinstance(tables, (str, bytes, dict)) or not isinstance(
        tables, Iterable
    ):
        raise logger.error(
            TypeError(
                "Expected an ordered collection of tables, "
                f"but got {type(tables)}."
            )
        )
