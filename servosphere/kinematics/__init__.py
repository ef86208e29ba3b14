"""Compute movement variables derived from servosphere displacements."""

from servosphere.kinematics.derived_variables import (
    calc_bearing,
    calc_distance,
    calc_turn_angle,
    calc_turn_velocity,
    calc_velocity,
    calc_xy,
    compute_bearing,
    compute_distance,
    compute_position,
    compute_turn_angle,
    compute_turn_velocity,
    compute_velocity,
)
from servosphere.kinematics.pipeline import (
    DerivationStage,
    derive_movement_variables,
    derive_table,
)

__all__ = [
    "calc_xy",
    "calc_distance",
    "calc_bearing",
    "calc_turn_angle",
    "calc_turn_velocity",
    "calc_velocity",
    "compute_position",
    "compute_distance",
    "compute_bearing",
    "compute_turn_angle",
    "compute_turn_velocity",
    "compute_velocity",
    "DerivationStage",
    "derive_movement_variables",
    "derive_table",
]
