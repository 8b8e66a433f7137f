"""
Six-degree-of-freedom flight dynamics model.

Point-mass translational dynamics driven by a rate-command attitude model.
Control deflections command body angular rates directly (no moment or
inertia model); forces come from thrust, the coefficient model in
:mod:`aerofdm.aerodynamics`, and gravity.

Dynamics
--------
    ω_B  = controls ⊙ max_rates ⊙ rate_gains · speed_factor  (+ coordination yaw)
    q̇    = (1/2)·q ⊗ [0, ω_B]
    v_A  = C_BW^T · (v_W - wind_W)
    F_B  = T·x̂ + L·l̂(v_A) + D·d̂(v_A) + Y·ŷ
    v̇_W  = (1/m)·C_BW·F_B + g_W
    ṙ_W  = v_W

where:
    q     : body→ENU attitude quaternion [w, x, y, z]
    C_BW  : body→ENU DCM built from q
    v_A   : velocity relative to the air mass, body axes
    l̂     : lift direction, normalize(relative_wind × span)
    d̂     : drag direction, opposite v_A

Integration
-----------
``update(dt)`` caps ``dt`` at 0.25 s and consumes it in substeps of at most
0.02 s. Every substep advances the whole state once: commanded rates,
attitude, frame transforms, airflow, forces, then semi-implicit Euler on
velocity and position (position uses the updated velocity). Speed is
capped at 250 m/s after each velocity update.

References
----------
- Stevens & Lewis - Aircraft Control and Simulation
- Beard & McLain - Small Unmanned Aircraft: Theory and Practice
"""

import math
from typing import Optional, Tuple

import numpy as np

from aerofdm import aerodynamics as aero
from aerofdm.aircraft import AircraftParameters, AircraftState, ControlInputs, FdmConfig
from aerofdm.frames import BODY_FORWARD, BODY_RIGHT, G0_EARTH, SEA_LEVEL_DENSITY, SPAN_AXIS
from aerofdm.logging_system import get_logger
from aerofdm.utils.quaternion import quat_integrate, quat_normalize, quat_to_dcm
from aerofdm.utils.rotations import dcm_transpose, yaw_pitch_roll
from aerofdm.utils.vectors import as_vec3, clamp, clamp_magnitude, normalize

logger = get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

MAX_FRAME_DT = 0.25  # Largest dt honoured by one update call [s]
SUBSTEP_DT = 0.02  # Largest integration step [s]
DT_RESIDUE = 1e-6  # Remaining time below this is discarded [s]
MAX_SPEED = 250.0  # Velocity magnitude cap [m/s]
FULL_AUTHORITY_AIRSPEED = 50.0  # Control rates reach full scale here [m/s]
COORDINATION_SCALE = 0.2

# Below these speeds the flow direction is undefined and a fallback is used.
MIN_LIFT_DIRECTION_SPEED = 1e-3
MIN_DRAG_DIRECTION_SPEED = 1e-3


def _frozen(v: np.ndarray) -> np.ndarray:
    v.setflags(write=False)
    return v


class FlightDynamicsModel:
    """
    Flight dynamics model owning one aircraft state.

    The caller keeps a single instance for the whole session, calls
    :meth:`update` once per tick with the elapsed time and the current
    controls, and reads :attr:`state` back. Nothing else writes the state.

    Parameters
    ----------
    params : AircraftParameters
        Airframe constants.
    initial_state : AircraftState
        Starting pose and velocity. The model keeps its own copy, with the
        quaternion renormalized and the Euler angles re-derived from it.
    config : FdmConfig, optional
        Control and aerodynamic tuning. Defaults to ``FdmConfig()``.

    Example
    -------
    >>> params, state = create_default_aircraft()
    >>> model = FlightDynamicsModel(params, state)
    >>> model.update(1 / 60, ControlInputs(throttle=0.75))
    >>> model.state.velocity
    """

    def __init__(
        self,
        params: AircraftParameters,
        initial_state: AircraftState,
        config: Optional[FdmConfig] = None,
    ):
        self.params = params
        self.config = config if config is not None else FdmConfig()

        self._wind = _frozen(np.zeros(3))
        self._lift_scale = 1.0
        self._drag_scale = 1.0
        self._state = self._seat(initial_state)

        logger.info(
            "Flight model created: mass=%.1f kg, S=%.2f m², b=%.2f m, T_max=%.0f N, altitude=%.1f m",
            params.mass,
            params.wing_area,
            params.wing_span,
            params.max_thrust,
            self._state.altitude,
        )

    # =========================================================================
    # Public State and Settings
    # =========================================================================

    @property
    def state(self) -> AircraftState:
        """Current state. Treat as read-only; its arrays are not writeable."""
        return self._state

    @property
    def wind(self) -> np.ndarray:
        """Ambient wind in ENU [m/s]."""
        return self._wind

    @property
    def aero_scale(self) -> Tuple[float, float]:
        """Current (lift, drag) force multipliers."""
        return self._lift_scale, self._drag_scale

    def set_wind_enu(self, wind) -> None:
        """
        Set the ambient wind used for the airflow from the next substep on.

        Parameters
        ----------
        wind : array-like, shape (3,)
            Air-mass velocity in ENU [m/s].

        Raises
        ------
        ValueError
            If ``wind`` is not a finite 3-vector.
        """
        wind = as_vec3(wind)
        if not np.all(np.isfinite(wind)):
            raise ValueError(f"wind must be finite, got {wind}")
        self._wind = _frozen(wind)
        logger.info("Wind set to (%.2f, %.2f, %.2f) m/s ENU", *wind)

    def set_aero_scale(self, lift: float = 1.0, drag: float = 1.0) -> None:
        """
        Scale lift and drag magnitudes.

        Intended for deterministic tests and demonstrations. Any factor not
        given returns to 1.0.

        Raises
        ------
        ValueError
            If a factor is negative or not finite.
        """
        for name, value in (("lift", lift), ("drag", drag)):
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} scale must be non-negative and finite, got {value}")
        self._lift_scale = float(lift)
        self._drag_scale = float(drag)
        logger.info("Aero scale set to lift=%.3f drag=%.3f", self._lift_scale, self._drag_scale)

    def reset(self, state: AircraftState) -> None:
        """Restart from ``state``. Wind and aero scale are kept."""
        self._state = self._seat(state)
        logger.info("Flight model reset: altitude=%.1f m, speed=%.1f m/s", self._state.altitude, self._state.ground_speed)

    # =========================================================================
    # Integration
    # =========================================================================

    def update(self, dt: float, controls: ControlInputs) -> None:
        """
        Advance the state by ``dt`` seconds of simulated time.

        Parameters
        ----------
        dt : float
            Elapsed time [s]. Non-finite or non-positive values are ignored;
            values above 0.25 s are truncated to 0.25 s.
        controls : ControlInputs
            Inputs held constant over ``dt``. Out-of-range values are clamped.
        """
        if not math.isfinite(dt) or dt <= 0:
            return

        if dt > MAX_FRAME_DT:
            logger.debug("Capping dt %.3f s to %.2f s", dt, MAX_FRAME_DT)
            dt = MAX_FRAME_DT

        controls = controls.clamped()
        remaining = dt
        while remaining > DT_RESIDUE:
            h = min(SUBSTEP_DT, remaining)
            self._substep(h, controls)
            remaining -= h

    def commanded_rates(self, controls: ControlInputs, airspeed: float, roll: float) -> np.ndarray:
        """
        Body rates [p, q, r] commanded by the controls.

        Parameters
        ----------
        controls : ControlInputs
            Clamped controls.
        airspeed : float
            Speed relative to the air mass [m/s].
        roll : float
            Current roll angle [rad], driving the coordination yaw.

        Returns
        -------
        np.ndarray, shape (3,)
            [p, q, r] in rad/s.
        """
        cfg = self.config
        speed_factor = clamp(airspeed / FULL_AUTHORITY_AIRSPEED, 0.0, 1.0)

        deflections = np.array([controls.ailerons, controls.elevator, controls.rudder])
        rates = deflections * cfg.max_rates * cfg.rate_gains * speed_factor
        rates[2] += -math.sin(roll) * cfg.max_yaw_rate * cfg.coordination_gain * speed_factor * COORDINATION_SCALE
        return rates

    def body_forces(self, v_air_body: np.ndarray, throttle: float) -> np.ndarray:
        """
        Thrust and aerodynamic force in body axes [N], gravity excluded.

        Parameters
        ----------
        v_air_body : np.ndarray, shape (3,)
            Velocity relative to the air mass in body axes [m/s].
        throttle : float
            Throttle fraction, clamped to [0, 1].

        Returns
        -------
        np.ndarray, shape (3,)
            Sum of thrust, lift, drag and sideforce, with lift and drag
            multiplied by the current aero scale.
        """
        params = self.params
        v_air_body = np.asarray(v_air_body, dtype=np.float64)

        v_aero = np.array([max(0.0, v_air_body[0]), v_air_body[1], v_air_body[2]])
        speed_aero = float(np.linalg.norm(v_aero))
        alpha, beta = aero.aero_angles(v_air_body)

        cl = aero.lift_coefficient(alpha, params.cl_slope_per_rad, self.config.stall_alpha)
        cd = aero.drag_coefficient(params.parasite_drag_coefficient, cl, params.aspect_ratio, params.oswald_efficiency)
        lift = aero.lift_force(cl, speed_aero, params.wing_area) * self._lift_scale
        drag = aero.drag_force(cd, speed_aero, params.wing_area) * self._drag_scale
        q_bar = aero.dynamic_pressure(speed_aero, SEA_LEVEL_DENSITY)
        side = aero.sideforce(q_bar, params.wing_area, self.config.lateral_drag_coefficient, beta)

        thrust = params.max_thrust * clamp(throttle, 0.0, 1.0)

        # Lift is perpendicular to both the oncoming air and the span.
        flow_dir = BODY_FORWARD if speed_aero < MIN_LIFT_DIRECTION_SPEED else normalize(v_aero)
        lift_dir = normalize(np.cross(-flow_dir, SPAN_AXIS))

        # Drag opposes the true (unclamped) airflow, including backward flow.
        if np.linalg.norm(v_air_body) < MIN_DRAG_DIRECTION_SPEED:
            drag_dir = -BODY_FORWARD
        else:
            drag_dir = normalize(-v_air_body)

        return thrust * BODY_FORWARD + lift * lift_dir + drag * drag_dir + side * BODY_RIGHT

    def _substep(self, h: float, controls: ControlInputs) -> None:
        state = self._state
        params = self.params

        v_air_world = state.velocity - self._wind
        airspeed = float(np.linalg.norm(v_air_world))

        # 1-2. Commanded rates and attitude
        rates = self.commanded_rates(controls, airspeed, state.roll)
        q = quat_integrate(state.orientation, rates, h)
        yaw, pitch, roll = yaw_pitch_roll(q)

        # 3-4. Frames and airflow
        body_to_world = quat_to_dcm(q)
        world_to_body = dcm_transpose(body_to_world)
        v_air_body = world_to_body @ v_air_world

        # 5-7. Forces
        force_world = body_to_world @ self.body_forces(v_air_body, controls.throttle)
        force_world[2] -= params.mass * G0_EARTH

        # 8. Translation
        velocity = clamp_magnitude(state.velocity + force_world / params.mass * h, MAX_SPEED)
        position = state.position + velocity * h

        self._state = AircraftState(
            position=position,
            velocity=velocity,
            orientation=q,
            yaw=yaw,
            pitch=pitch,
            roll=roll,
            angular_rates=rates,
        )

    @staticmethod
    def _seat(state: AircraftState) -> AircraftState:
        q = quat_normalize(state.orientation)
        yaw, pitch, roll = yaw_pitch_roll(q)
        return AircraftState(
            position=state.position,
            velocity=state.velocity,
            orientation=q,
            yaw=yaw,
            pitch=pitch,
            roll=roll,
            angular_rates=state.angular_rates,
        )
