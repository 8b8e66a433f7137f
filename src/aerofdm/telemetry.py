"""
Display-oriented view of the flight state.

:func:`hud_state` converts an :class:`~aerofdm.aircraft.AircraftState` into
the unit system a cockpit display uses, and :class:`StateBus` hands the
latest value to any number of listeners.
"""

import math
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

import numpy as np

from aerofdm.aircraft import AircraftState
from aerofdm.frames import METERS_TO_FEET, MPS_TO_KNOTS
from aerofdm.utils.vectors import as_vec3

T = TypeVar("T")


@dataclass(frozen=True)
class FlightHudState:
    """One frame of display values."""

    airspeed_mps: float
    airspeed_kts: float
    altitude_m: float
    altitude_ft: float
    pitch_deg: float
    roll_deg: float
    yaw_deg: float
    heading_deg: float
    throttle: float


def hud_state(state: AircraftState, throttle: float, wind: Optional[np.ndarray] = None) -> FlightHudState:
    """
    Derive display values from the model state.

    Parameters
    ----------
    state : AircraftState
        Current model state.
    throttle : float
        Throttle setting being flown, reported unchanged.
    wind : array-like, shape (3,), optional
        ENU wind the model is flying in, usually ``model.wind``. The
        reported airspeed is the speed relative to this air mass; without
        it the state is taken to be in still air.

    Returns
    -------
    FlightHudState
    """
    if wind is None:
        airspeed = state.ground_speed
    else:
        airspeed = float(np.linalg.norm(state.velocity - as_vec3(wind)))
    altitude = state.altitude
    return FlightHudState(
        airspeed_mps=airspeed,
        airspeed_kts=airspeed * MPS_TO_KNOTS,
        altitude_m=altitude,
        altitude_ft=altitude * METERS_TO_FEET,
        pitch_deg=math.degrees(state.pitch),
        roll_deg=math.degrees(state.roll),
        yaw_deg=math.degrees(state.yaw),
        heading_deg=state.heading_deg,
        throttle=throttle,
    )


class StateBus(Generic[T]):
    """
    Synchronous publish/subscribe channel holding the last published value.

    Subscribers are called inline by :meth:`publish`, in subscription order.
    A subscriber added after a value was published receives that value
    immediately.
    """

    def __init__(self):
        self._subscribers: List[Callable[[T], None]] = []
        self._last: Optional[T] = None

    def subscribe(self, fn: Callable[[T], None]) -> Callable[[], None]:
        """
        Register ``fn`` and return a callable that unregisters it.

        Subscribing the same callable twice has no additional effect.
        """
        if fn not in self._subscribers:
            self._subscribers.append(fn)
        if self._last is not None:
            fn(self._last)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe

    def publish(self, value: T) -> None:
        self._last = value
        for fn in list(self._subscribers):
            fn(value)

    @property
    def last(self) -> Optional[T]:
        """Most recently published value, or ``None``."""
        return self._last

    def __len__(self) -> int:
        return len(self._subscribers)
