"""Valid and invalid servosphere table fixtures."""

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def three_step_table():
    """Return a table of three 1-second steps: east, north, west.

    The resulting positions are (1, 0), (1, 1) and (0, 1).
    """
    return pd.DataFrame(
        {
            "dT": [1000, 1000, 1000],
            "dx": [1.0, 0.0, -1.0],
            "dy": [0.0, 1.0, 0.0],
        }
    )


@pytest.fixture
def straight_line_table():
    """Return a factory for a table moving by a constant step.

    The returned function takes the per-row displacement ``(dx, dy)``,
    the number of rows and the time step in milliseconds.
    """

    def _straight_line_table(dx, dy, n_rows=5, dt=500):
        return pd.DataFrame(
            {
                "dT": np.full(n_rows, dt),
                "dx": np.full(n_rows, float(dx)),
                "dy": np.full(n_rows, float(dy)),
            }
        )

    return _straight_line_table


@pytest.fixture
def table_with_stops():
    """Return a table where the organism stops twice.

    Rows 0 and 3 have no displacement at all, row 4 has no time step.
    """
    return pd.DataFrame(
        {
            "dT": [250, 500, 500, 1000, 0, 100],
            "dx": [0.0, 3.0, -1.5, 0.0, 2.0, 0.0],
            "dy": [0.0, 4.0, 2.0, 0.0, 0.0, -1.0],
        }
    )


@pytest.fixture
def random_table(rng):
    """Return a table of 50 random displacements and time steps."""
    n_rows = 50
    return pd.DataFrame(
        {
            "dT": rng.integers(1, 100, n_rows),
            "dx": rng.normal(0, 2, n_rows),
            "dy": rng.normal(0, 2, n_rows),
        }
    )


@pytest.fixture
def table_collection(three_step_table, random_table):
    """Return a collection mixing tables with other objects."""
    return [three_step_table, "summary", None, random_table, {"dT": [1]}]


@pytest.fixture
def table_without_time(three_step_table):
    """Return a table lacking the ``dT`` column."""
    return three_step_table.drop(columns="dT")
