#!/usr/bin/env python3
"""
Example 01: Basic Flight

Demonstrates fundamental aerofdm usage:
- Building a model from the bundled aircraft configuration
- Flying trimmed, turning and stalling scenarios
- Using visualization utilities

Outputs saved to: examples/outputs/
"""

import math
from pathlib import Path

import matplotlib.pyplot as plt

import aerofdm as af
from aerofdm.utils import angle_difference
from aerofdm.visualization import plot_flight, plot_trajectory_3d

# Output directory
OUTPUT_DIR = Path(__file__).parent / "outputs"


def level_flight_example(params, config):
    """Trimmed cruise at 50 m/s with a HUD readout."""
    print("=" * 60)
    print("Trimmed Level Flight")
    print("=" * 60)

    state, throttle = af.trimmed_state(params, 50.0, position=(0.0, 0.0, 1000.0), config=config)
    print(f"Trim: nose {math.degrees(state.nose_elevation):.2f} deg, throttle {throttle:.3f}")

    model = af.FlightDynamicsModel(params, state, config)
    bus = af.StateBus()
    bus.subscribe(
        lambda hud: print(f"HUD: {hud.airspeed_kts:.1f} kt, {hud.altitude_ft:.0f} ft, heading {hud.heading_deg:.1f} deg")
    )

    dt = 0.05

    def controller(t, s):
        # Refresh the display every 5 s of flight
        if round(t / dt) % 100 == 0:
            bus.publish(af.hud_state(s, throttle, model.wind))
        return af.ControlInputs(throttle=throttle)

    log = af.simulate(model, controller, duration=20.0, dt=dt)

    fig, _ = plot_flight(log, title="Level Flight")
    fig.savefig(OUTPUT_DIR / "01a_level_flight.png", dpi=150)
    print("Saved: 01a_level_flight.png")

    plt.close("all")


def turn_example(params, config):
    """Bank with a small aileron input and let the coordination yaw turn the aircraft."""
    print("=" * 60)
    print("Coordinated Turn")
    print("=" * 60)

    state, throttle = af.trimmed_state(params, 50.0, position=(0.0, 0.0, 1000.0), config=config)
    model = af.FlightDynamicsModel(params, state, config)

    def controller(t, s):
        ailerons = 0.05 if t < 6.0 else 0.0
        return af.ControlInputs(ailerons=ailerons, throttle=throttle)

    log = af.simulate(model, controller, duration=15.0)
    turn = math.degrees(angle_difference(log.euler[-1, 0], log.euler[0, 0]))
    print(f"Heading change: {turn:.1f} deg")
    print(f"Altitude change: {log.altitude[-1] - log.altitude[0]:.1f} m")

    fig, _ = plot_trajectory_3d(log, title="Coordinated Turn", show_projection=True)
    fig.savefig(OUTPUT_DIR / "01b_turn_trajectory.png", dpi=150)
    print("Saved: 01b_turn_trajectory.png")

    plt.close("all")


def stall_example(params, config):
    """Hang on the propeller nose-high, then cut the power."""
    print("=" * 60)
    print("Power-Off Stall")
    print("=" * 60)

    state = af.initial_state(position=(0.0, 0.0, 1000.0), velocity=(24.0, 0.0, 0.0), pitch=math.radians(-60.0))
    model = af.FlightDynamicsModel(params, state, config)

    def controller(t, s):
        return af.ControlInputs(throttle=0.7 if t < 3.0 else 0.05)

    log = af.simulate(model, controller, duration=8.0)
    print(f"Peak altitude gain: {log.altitude.max() - log.altitude[0]:.1f} m")
    print(f"Altitude at end: {log.altitude[-1] - log.altitude[0]:.1f} m relative to start")

    fig, _ = plot_flight(log, title="Power-Off Stall")
    fig.savefig(OUTPUT_DIR / "01c_stall.png", dpi=150)
    print("Saved: 01c_stall.png")

    plt.close("all")


def main():
    print("#" * 60)
    print("# aerofdm Example 01: Basic Flight")
    print("#" * 60)

    af.initialize_logging(level="INFO")

    # Create output directory
    OUTPUT_DIR.mkdir(exist_ok=True)
    print(f"\nOutputs: {OUTPUT_DIR.absolute()}\n")

    params, config = af.load_default_aircraft()

    level_flight_example(params, config)
    turn_example(params, config)
    stall_example(params, config)

    print("\n" + "=" * 60)
    print(f"Done! Check {OUTPUT_DIR.name}/ for outputs.")
    print("=" * 60)


if __name__ == "__main__":
    main()
