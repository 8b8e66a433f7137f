"""
Axis conventions and physical constants shared by the flight model.

World frame (ENU)
-----------------
    X : East
    Y : North
    Z : Up

Body frame
----------
    X : forward, out of the nose
    Y : right, along the starboard wing
    Z : up, out of the canopy

Sign consequences
-----------------
Because body Z points up rather than down, several signs differ from the
textbook NED/FRD aircraft convention:

- positive pitch (rotation about +Y) moves the nose DOWN
- positive elevator commands a positive pitch rate, so nose down
- positive roll (rotation about +X) raises the right wing
- positive yaw (rotation about +Z) swings the nose to the left
- the coordinated-turn term yaws right when the right wing is up

The model reads its axes from the constants below.
"""

import numpy as np

# =============================================================================
# Body Axes
# =============================================================================

BODY_FORWARD = np.array([1.0, 0.0, 0.0])
BODY_RIGHT = np.array([0.0, 1.0, 0.0])
BODY_UP = np.array([0.0, 0.0, 1.0])

# Wing span axis used to build the lift direction.
SPAN_AXIS = BODY_RIGHT

# =============================================================================
# World Axes (ENU)
# =============================================================================

WORLD_EAST = np.array([1.0, 0.0, 0.0])
WORLD_NORTH = np.array([0.0, 1.0, 0.0])
WORLD_UP = np.array([0.0, 0.0, 1.0])

for _axis in (BODY_FORWARD, BODY_RIGHT, BODY_UP, WORLD_EAST, WORLD_NORTH, WORLD_UP):
    _axis.setflags(write=False)

# =============================================================================
# Constants
# =============================================================================

G0_EARTH = 9.80665  # Standard gravity [m/s²]
SEA_LEVEL_DENSITY = 1.225  # Air density [kg/m³], used at every altitude

MPS_TO_KNOTS = 1.9438444924574
METERS_TO_FEET = 3.28084
