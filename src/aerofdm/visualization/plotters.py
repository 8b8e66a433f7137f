"""
Plotting utilities for aerofdm.

This module provides functions for visualizing a recorded
:class:`~aerofdm.simulation.FlightLog`:
- Flight overview (altitude, speed, attitude, rates, controls, ground track)
- Time series of any logged channel
- 3D ENU trajectory
"""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from aerofdm.aircraft import CONTROL_NAMES
from aerofdm.simulation import FlightLog

# =============================================================================
# Time Series Plots
# =============================================================================


def plot_time_series(
    t: np.ndarray,
    y: np.ndarray,
    names: Optional[List[str]] = None,
    ylabel: str = "",
    title: str = "",
    ax: Optional[Axes] = None,
    figsize: Tuple[float, float] = (8, 4),
    grid: bool = True,
) -> Tuple[Figure, Axes]:
    """
    Plot one or more channels against time on a single axes.

    Parameters
    ----------
    t : np.ndarray, shape (N,)
        Time array. Longer than ``y`` by one when ``y`` holds per-interval
        values such as controls; the last sample is then dropped.
    y : np.ndarray, shape (N,) or (N, k)
        Channel values.
    names : list of str, optional
        Legend entries, one per channel.
    ylabel, title : str
        Axis label and title.
    ax : Axes, optional
        Existing axes to draw on.
    figsize : tuple
        Figure size when a new figure is created.
    grid : bool
        Show grid.

    Returns
    -------
    fig : Figure
    ax : Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    y = np.asarray(y)
    if y.ndim == 1:
        y = y[:, None]
    t_y = t[: len(y)]

    for i in range(y.shape[1]):
        label = names[i] if names is not None else None
        ax.plot(t_y, y[:, i], linewidth=1.5, label=label)

    ax.set_xlabel("Time [s]")
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.3)
    if names is not None:
        ax.legend(loc="best", fontsize="small")

    return fig, ax


def plot_flight(
    log: FlightLog,
    title: str = "Flight",
    figsize: Tuple[float, float] = (12, 9),
) -> Tuple[Figure, np.ndarray]:
    """
    Overview of a flight on a 3x2 grid.

    Panels: altitude, ground speed, Euler angles, body rates, controls and the
    ground track (East/North).

    Parameters
    ----------
    log : FlightLog
        Recorded flight.
    title : str
        Figure title.
    figsize : tuple
        Figure size.

    Returns
    -------
    fig : Figure
    axes : ndarray of Axes, shape (6,)

    Example
    -------
    >>> log = simulate(model, controller, duration=30.0)
    >>> fig, axes = plot_flight(log)
    >>> plt.show()
    """
    fig, axes = plt.subplots(3, 2, figsize=figsize)
    axes = axes.flatten()

    plot_time_series(log.t, log.altitude, ylabel="Altitude [m]", ax=axes[0])
    plot_time_series(log.t, log.ground_speed, ylabel="Ground speed [m/s]", ax=axes[1])
    plot_time_series(
        log.t,
        np.degrees(log.euler),
        names=["yaw", "pitch", "roll"],
        ylabel="Attitude [deg]",
        ax=axes[2],
    )
    plot_time_series(
        log.t,
        np.degrees(log.rates),
        names=["p", "q", "r"],
        ylabel="Body rate [deg/s]",
        ax=axes[3],
    )
    plot_time_series(log.t, log.controls, names=CONTROL_NAMES, ylabel="Control", ax=axes[4])

    track = axes[5]
    track.plot(log.position[:, 0], log.position[:, 1], linewidth=1.5)
    track.scatter([log.position[0, 0]], [log.position[0, 1]], c="green", s=40, label="Start")
    track.scatter([log.position[-1, 0]], [log.position[-1, 1]], c="red", s=40, label="End")
    track.set_xlabel("East [m]")
    track.set_ylabel("North [m]")
    track.set_aspect("equal", adjustable="datalim")
    track.grid(True, alpha=0.3)
    track.legend(loc="best", fontsize="small")

    fig.suptitle(title)
    fig.tight_layout()

    return fig, axes


# =============================================================================
# Trajectory Plots
# =============================================================================


def plot_trajectory_3d(
    log: FlightLog,
    title: str = "3D Trajectory",
    figsize: Tuple[float, float] = (10, 8),
    ax: Optional[Axes] = None,
    show_start: bool = True,
    show_end: bool = True,
    show_projection: bool = False,
    **plot_kwargs,
) -> Tuple[Figure, Axes]:
    """
    Plot the ENU flight path in 3D.

    Parameters
    ----------
    log : FlightLog
        Recorded flight.
    title : str
        Title.
    figsize : tuple
        Figure size.
    ax : Axes3D, optional
        Existing 3D axes.
    show_start, show_end : bool
        Mark the first and last sample.
    show_projection : bool
        Draw the ground track on the lowest Z plane.
    **plot_kwargs
        Arguments to plot().

    Returns
    -------
    fig : Figure
    ax : Axes3D
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection="3d")
    else:
        fig = ax.figure

    if "linewidth" not in plot_kwargs:
        plot_kwargs["linewidth"] = 2

    east, north, up = log.position[:, 0], log.position[:, 1], log.position[:, 2]
    ax.plot(east, north, up, **plot_kwargs)

    if show_start:
        ax.scatter([east[0]], [north[0]], [up[0]], c="green", s=100, label="Start")
    if show_end:
        ax.scatter([east[-1]], [north[-1]], [up[-1]], c="red", s=100, label="End")

    if show_projection:
        z_min = ax.get_zlim()[0]
        ax.plot(east, north, z_min * np.ones(len(east)), "k--", alpha=0.3, linewidth=1)

    ax.set_xlabel("East [m]")
    ax.set_ylabel("North [m]")
    ax.set_zlabel("Up [m]")
    ax.set_title(title)

    if show_start or show_end:
        ax.legend()

    return fig, ax
