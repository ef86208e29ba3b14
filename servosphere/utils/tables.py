"""Helpers for applying table operations across collections of tables."""

from collections.abc import Callable, Iterable
from typing import Any

import pandas as pd

from servosphere.utils.logging import logger
from servosphere.validators.tables import validate_table_collection


def is_table(obj: Any) -> bool:
    """Return True if ``obj`` is a table (a :class:`pandas.DataFrame`)."""
    return isinstance(obj, pd.DataFrame)


def map_tables(
    tables: Iterable[Any],
    func: Callable[[pd.DataFrame], pd.DataFrame],
) -> list[Any]:
    """Apply ``func`` to every table in a collection.

    Each table is transformed independently of the others. Entries that
    are not tables are returned unchanged, at the same position.

    Parameters
    ----------
    tables : iterable
        An ordered collection, typically a list of
        :class:`pandas.DataFrame` objects. Other elements are allowed.
    func : callable
        A function taking a single DataFrame and returning a DataFrame.

    Returns
    -------
    list
        A list of the same length and order as ``tables``.

    """
    validate_table_collection(tables)
    result = []
    for i, item in enumerate(tables):
        if is_table(item):
            result.append(func(item))
        else:
            logger.debug(
                f"{getattr(func, '__name__', 'operation')}: "
                f"passing through non-table entry {i} of type {type(item)}."
            )
            result.append(item)
    return result
