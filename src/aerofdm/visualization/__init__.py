"""
Visualization utilities for aerofdm.

Plotting
--------
- plot_flight: Overview grid of a recorded flight
- plot_time_series: One or more logged channels against time
- plot_trajectory_3d: 3D ENU flight path

Example
-------
>>> from aerofdm import create_default_aircraft, FlightDynamicsModel, simulate
>>> from aerofdm.visualization import plot_flight
>>>
>>> log = simulate(model, controller, duration=30.0)
>>> fig, axes = plot_flight(log)
>>> plt.show()
"""

from aerofdm.visualization.plotters import (
    plot_flight,
    plot_time_series,
    plot_trajectory_3d,
)

__all__ = [
    "plot_flight",
    "plot_time_series",
    "plot_trajectory_3d",
]
