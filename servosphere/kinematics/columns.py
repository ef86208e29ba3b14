"""Column names used by the derived movement variables."""

DT = "dT"
DX = "dx"
DY = "dy"

X = "x"
Y = "y"
DISTANCE = "distance"
BEARING = "bearing"
TURN_ANGLE = "turn_angle"
TURN_VELOCITY = "turn_velocity"
VELOCITY = "velocity"

# dT is recorded in milliseconds
MS_PER_SECOND = 1000
