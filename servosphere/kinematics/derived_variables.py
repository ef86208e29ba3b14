"""Compute movement variables derived from servosphere displacements.

Each recording is a table (:class:`pandas.DataFrame`) with one row per
sampled position update, holding the time since the previous sample
(``dT``, in milliseconds) and the displacement along both axes since the
previous sample (``dx``, ``dy``). Rows must be in chronological order.

Every variable comes in two flavours:

- ``compute_<variable>(table)`` transforms a single table and returns a
  new table with the derived column(s) appended;
- ``calc_<variable>(tables)`` applies the same transform to every table
  in a collection. Entries that are not tables are passed through
  unchanged.

Some variables depend on others and must be derived in order:
position (``x``, ``y``) before ``bearing``, ``bearing`` before
``turn_angle`` and ``turn_angle`` before ``turn_velocity``. See
:func:`servosphere.kinematics.derive_movement_variables` for running
them in one go.

If the data will be thinned, thin it before deriving any of these
variables.
"""

import numpy as np
import pandas as pd

from servosphere.kinematics.columns import (
    BEARING,
    DISTANCE,
    DT,
    DX,
    DY,
    MS_PER_SECOND,
    TURN_ANGLE,
    TURN_VELOCITY,
    VELOCITY,
    X,
    Y,
)
from servosphere.utils.logging import log_to_attrs
from servosphere.utils.tables import map_tables
from servosphere.validators.tables import validate_columns


@log_to_attrs
def compute_position(table: pd.DataFrame) -> pd.DataFrame:
    """Compute (x, y) coordinates from ``dx`` and ``dy`` displacements.

    The position at each row is the running sum of the displacements up
    to and including that row, so the first row's ``x`` and ``y`` equal
    its ``dx`` and ``dy``. A missing displacement makes every following
    position missing.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with ``dx`` and ``dy`` columns.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with ``x`` and ``y`` columns added.

    """
    validate_columns(table, [DX, DY], operation="compute_position")
    result = table.copy()
    result[X] = table[DX].cumsum(skipna=False)
    result[Y] = table[DY].cumsum(skipna=False)
    return result


@log_to_attrs
def compute_distance(table: pd.DataFrame) -> pd.DataFrame:
    """Compute the distance moved between consecutive samples.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with ``dx`` and ``dy`` columns.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with a non-negative ``distance`` column added.

    """
    validate_columns(table, [DX, DY], operation="compute_distance")
    result = table.copy()
    result[DISTANCE] = np.sqrt(table[DX] ** 2 + table[DY] ** 2)
    return result


def _angle_from_y_axis(delta_x: pd.Series, delta_y: pd.Series) -> pd.Series:
    """Return the angle (radians) between a vector and the y-axis.

    :func:`numpy.arctan2` measures angles from the x-axis, so the
    arguments are swapped. The zero vector maps to an angle of 0,
    whatever the signs of its zero components.
    """
    angle = np.arctan2(delta_x, delta_y)
    return angle.mask((delta_x == 0) & (delta_y == 0), 0.0)


@log_to_attrs
def compute_bearing(table: pd.DataFrame) -> pd.DataFrame:
    """Compute the direction of movement at each sample.

    The bearing at row ``i`` is the direction of the vector going from
    the position at row ``i - 1`` to the position at row ``i + 1``,
    measured clockwise from the y-axis, in degrees within ``[0, 360)``.
    The first and last rows have no neighbour on one side, so their
    bearing is missing (NaN).

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with ``x`` and ``y`` columns, as returned by
        :func:`compute_position`.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with a ``bearing`` column added.

    Notes
    -----
    If the organism has not moved between rows ``i - 1`` and ``i + 1``,
    the bearing is 0.

    """
    validate_columns(table, [X, Y], operation="compute_bearing")
    x, y = table[X], table[Y]
    # shift() fills the boundary rows with NaN
    delta_x = x.shift(-1) - x.shift(1)
    delta_y = y.shift(-1) - y.shift(1)
    angle = _angle_from_y_axis(delta_x, delta_y)
    bearing = np.mod(np.degrees(angle), 360)
    # tiny negative angles round up to exactly 360
    bearing = bearing.mask(bearing >= 360, 0.0)
    result = table.copy()
    result[BEARING] = bearing
    return result


@log_to_attrs
def compute_turn_angle(table: pd.DataFrame) -> pd.DataFrame:
    """Compute the turn angle between two successive moves.

    The turn angle is the difference between a bearing and the last
    non-missing bearing before it. If the organism stopped for a while
    (missing bearings) and then moved again, the new move is compared
    with the last move made before stopping. Rows without a bearing, and
    the first row with one, have a missing turn angle.

    The result is the raw signed difference in degrees, so it is not
    wrapped into ``[-180, 180)``.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with a ``bearing`` column, as returned by
        :func:`compute_bearing`.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with a ``turn_angle`` column added.

    """
    validate_columns(table, [BEARING], operation="compute_turn_angle")
    bearing = table[BEARING]
    moving = bearing.notna().to_numpy()
    turn_angle = np.full(len(table), np.nan)
    turn_angle[moving] = bearing[moving].diff().to_numpy()
    result = table.copy()
    result[TURN_ANGLE] = turn_angle
    return result


@log_to_attrs
def compute_turn_velocity(table: pd.DataFrame) -> pd.DataFrame:
    """Compute the turning velocity in degrees per second.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with ``turn_angle`` and ``dT`` columns.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with a non-negative ``turn_velocity`` column.
        Rows with ``dT == 0`` get ``inf`` (or NaN for a zero turn).

    """
    validate_columns(
        table, [TURN_ANGLE, DT], operation="compute_turn_velocity"
    )
    result = table.copy()
    result[TURN_VELOCITY] = table[TURN_ANGLE].abs() / (
        table[DT] / MS_PER_SECOND
    )
    return result


@log_to_attrs
def compute_velocity(table: pd.DataFrame) -> pd.DataFrame:
    """Compute the average velocity between two position recordings.

    Velocity is in distance units per second, where distance is in the
    units the servosphere software recorded (e.g. cm/s for cm).
    Rows without any displacement have a velocity of exactly 0,
    whatever their ``dT``.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with ``dx``, ``dy`` and ``dT`` columns.

    Returns
    -------
    pandas.DataFrame
        A copy of ``table`` with a non-negative ``velocity`` column added.

    """
    validate_columns(table, [DX, DY, DT], operation="compute_velocity")
    dx, dy = table[DX], table[DY]
    velocity = np.sqrt(dx**2 + dy**2) / (table[DT] / MS_PER_SECOND)
    result = table.copy()
    result[VELOCITY] = velocity.mask((dx == 0) & (dy == 0), 0.0)
    return result


def calc_xy(tables: list) -> list:
    """Add ``x`` and ``y`` coordinates to every table in ``tables``.

    See :func:`compute_position`.
    """
    return map_tables(tables, compute_position)


def calc_distance(tables: list) -> list:
    """Add the ``distance`` column to every table in ``tables``.

    See :func:`compute_distance`.
    """
    return map_tables(tables, compute_distance)


def calc_bearing(tables: list) -> list:
    """Add the ``bearing`` column to every table in ``tables``.

    See :func:`compute_bearing`.
    """
    return map_tables(tables, compute_bearing)


def calc_turn_angle(tables: list) -> list:
    """Add the ``turn_angle`` column to every table in ``tables``.

    See :func:`compute_turn_angle`.
    """
    return map_tables(tables, compute_turn_angle)


def calc_turn_velocity(tables: list) -> list:
    """Add the ``turn_velocity`` column to every table in ``tables``.

    See :func:`compute_turn_velocity`.
    """
    return map_tables(tables, compute_turn_velocity)


def calc_velocity(tables: list) -> list:
    """Add the ``velocity`` column to every table in ``tables``.

    See :func:`compute_velocity`.
    """
    return map_tables(tables, compute_velocity)
