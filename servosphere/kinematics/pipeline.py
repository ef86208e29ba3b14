"""Derive several movement variables in dependency order."""

from collections.abc import Callable, Iterable
from enum import Enum

import pandas as pd

from servosphere.kinematics import columns as cols
from servosphere.kinematics import derived_variables as dv
from servosphere.utils.logging import logger
from servosphere.utils.reports import report_nan_values
from servosphere.utils.tables import is_table, map_tables
from servosphere.validators.tables import (
    validate_columns,
    validate_table_collection,
)


class DerivationStage(Enum):
    """A derivation step, with the columns it requires and adds.

    Members are declared in the order they must run.
    """

    XY = ("xy", (cols.DX, cols.DY), (cols.X, cols.Y))
    DISTANCE = ("distance", (cols.DX, cols.DY), (cols.DISTANCE,))
    BEARING = ("bearing", (cols.X, cols.Y), (cols.BEARING,))
    TURN_ANGLE = ("turn_angle", (cols.BEARING,), (cols.TURN_ANGLE,))
    TURN_VELOCITY = (
        "turn_velocity",
        (cols.TURN_ANGLE, cols.DT),
        (cols.TURN_VELOCITY,),
    )
    VELOCITY = ("velocity", (cols.DX, cols.DY, cols.DT), (cols.VELOCITY,))

    def __init__(self, label, requires, adds):
        self.label = label
        self.requires = requires
        self.adds = adds

    @property
    def transform(self) -> Callable[[pd.DataFrame], pd.DataFrame]:
        """The single-table function computing this stage."""
        return _TRANSFORMS[self]

    @classmethod
    def resolve(
        cls, stages: Iterable["DerivationStage | str"] | None = None
    ) -> list["DerivationStage"]:
        """Convert stages or stage labels into members, in run order.

        Parameters
        ----------
        stages : iterable of DerivationStage or str, optional
            The stages to run, given as members or labels such as
            ``"bearing"``. Duplicates are ignored and the order given is
            irrelevant. If None (default), all stages are returned.

        Raises
        ------
        ValueError
            If a label does not name any stage, or no stage is selected.

        """
        if stages is None:
            return list(cls)
        if isinstance(stages, (str, cls)):
            stages = [stages]
        by_label = {stage.label: stage for stage in cls}
        selected = set()
        for stage in stages:
            if isinstance(stage, cls):
                selected.add(stage)
            elif stage in by_label:
                selected.add(by_label[stage])
            else:
                raise logger.error(
                    ValueError(
                        f"Unknown derivation stage {stage!r}. "
                        f"Valid stages are {list(by_label)}."
                    )
                )
        if not selected:
            raise logger.error(
                ValueError("At least one derivation stage must be selected.")
            )
        return [stage for stage in cls if stage in selected]


_TRANSFORMS = {
    DerivationStage.XY: dv.compute_position,
    DerivationStage.DISTANCE: dv.compute_distance,
    DerivationStage.BEARING: dv.compute_bearing,
    DerivationStage.TURN_ANGLE: dv.compute_turn_angle,
    DerivationStage.TURN_VELOCITY: dv.compute_turn_velocity,
    DerivationStage.VELOCITY: dv.compute_velocity,
}


def validate_plan(
    table: pd.DataFrame, stages: list[DerivationStage]
) -> None:
    """Check that ``stages`` can run on ``table`` before running any.

    Every column a stage requires must either be in the table already
    or be added by an earlier stage.

    Raises
    ------
    KeyError
        If a stage's required columns would be missing when it runs.

    """
    available = set(table.columns)
    for stage in stages:
        missing = [col for col in stage.requires if col not in available]
        if missing:
            # Reuse the standard error message for missing columns
            validate_columns(
                table, missing, operation=f"the '{stage.label}' stage"
            )
        available.update(stage.adds)


def derive_table(
    table: pd.DataFrame,
    stages: Iterable[DerivationStage | str] | None = None,
) -> pd.DataFrame:
    """Derive the selected movement variables for a single table.

    Parameters
    ----------
    table : pandas.DataFrame
        A recording with at least the columns required by the selected
        stages (``dT``, ``dx`` and ``dy`` are enough for all of them).
    stages : iterable of DerivationStage or str, optional
        The variables to derive. Defaults to all of them.

    Returns
    -------
    pandas.DataFrame
        A new table with the derived columns appended.

    """
    stages = DerivationStage.resolve(stages)
    validate_plan(table, stages)
    result = table
    for stage in stages:
        result = stage.transform(result)
    return result


def derive_movement_variables(
    tables: Iterable,
    stages: Iterable[DerivationStage | str] | None = None,
) -> list:
    """Derive movement variables for every table in a collection.

    The selected stages always run in dependency order:
    position, distance, bearing, turn angle, turn velocity, velocity.
    Each table is checked up front, so a table lacking a required
    column raises before anything is computed for it.
    Entries that are not tables are passed through unchanged.

    Parameters
    ----------
    tables : iterable
        An ordered collection of :class:`pandas.DataFrame` recordings.
    stages : iterable of DerivationStage or str, optional
        The variables to derive. Defaults to all of them.

    Returns
    -------
    list
        The transformed collection, same length and order as ``tables``.

    Examples
    --------
    >>> derived = derive_movement_variables(tables)
    >>> derived = derive_movement_variables(tables, ["xy", "bearing"])

    """
    validate_table_collection(tables)
    stages = DerivationStage.resolve(stages)
    tables = list(tables)
    n_tables = sum(is_table(item) for item in tables)
    logger.info(
        f"Deriving {[stage.label for stage in stages]} "
        f"for {n_tables} table(s)."
    )

    def _derive(table):
        result = derive_table(table, stages)
        derived = [col for stage in stages for col in stage.adds]
        report_nan_values(result, derived)
        return result

    return map_tables(tables, _derive)
