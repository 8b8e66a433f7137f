"""
YAML configuration for aircraft and model tuning.

File layout::

    aircraft:
      name: Cessna 172          # optional, informational
      mass: 1110.0              # kg
      wing_area: 16.2           # m²
      wing_span: 11.0           # m
      max_thrust: 4500.0        # N
      parasite_drag_coefficient: 0.03
      cl_slope_per_rad: 5.7
      oswald_efficiency: 0.8
    fdm:                        # optional, every key optional
      max_roll_rate_deg: 180.0  # or max_roll_rate in rad/s
      stall_alpha_deg: 15.0     # or stall_alpha in rad
      roll_rate_gain: 0.6
      ...

Any ``FdmConfig`` field holding an angle or angular rate may be given in
degrees by appending ``_deg`` to its name.
"""

import math
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from aerofdm.aircraft import AircraftParameters, FdmConfig
from aerofdm.logging_system import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_AIRCRAFT_FILE = DATA_DIR / "cessna172.yaml"

_ANGULAR_FDM_FIELDS = ("max_roll_rate", "max_pitch_rate", "max_yaw_rate", "stall_alpha")


def _section(config: Dict[str, Any], name: str, required: bool, path: Path) -> Dict[str, Any]:
    section = config.get(name)
    if section is None:
        if required:
            raise ValueError(f"{path}: missing '{name}' section")
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"{path}: '{name}' must be a mapping")
    return dict(section)


def _number(section: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{section}.{key} must be a number, got {value!r}")
    return float(value)


def aircraft_parameters_from_dict(data: Dict[str, Any]) -> AircraftParameters:
    """
    Build :class:`AircraftParameters` from an ``aircraft:`` mapping.

    Every parameter is required; ``name`` is accepted and ignored.

    Raises
    ------
    ValueError
        On missing, unknown or non-numeric keys, or invalid values.
    """
    data = {k: v for k, v in data.items() if k != "name"}
    names = [f.name for f in fields(AircraftParameters)]

    missing = [n for n in names if n not in data]
    if missing:
        raise ValueError(f"aircraft: missing keys {missing}")
    unknown = sorted(set(data) - set(names))
    if unknown:
        raise ValueError(f"aircraft: unknown keys {unknown}")

    return AircraftParameters(**{n: _number("aircraft", n, data[n]) for n in names})


def fdm_config_from_dict(data: Dict[str, Any]) -> FdmConfig:
    """
    Build :class:`FdmConfig` from an ``fdm:`` mapping.

    Omitted keys keep their defaults. Angular fields accept a ``_deg``
    variant, converted to radians.

    Raises
    ------
    ValueError
        On unknown or non-numeric keys, a field given in both units, or
        invalid values.
    """
    names = {f.name for f in fields(FdmConfig)}
    kwargs: Dict[str, float] = {}

    for key, value in data.items():
        if key.endswith("_deg") and key[: -len("_deg")] in _ANGULAR_FDM_FIELDS:
            name = key[: -len("_deg")]
            converted = math.radians(_number("fdm", key, value))
        elif key in names:
            name = key
            converted = _number("fdm", key, value)
        else:
            raise ValueError(f"fdm: unknown key '{key}'")

        if name in kwargs:
            raise ValueError(f"fdm: '{name}' given more than once")
        kwargs[name] = converted

    return FdmConfig(**kwargs)


def load_aircraft_config(path: Union[str, Path]) -> Tuple[AircraftParameters, FdmConfig]:
    """
    Load aircraft parameters and model configuration from a YAML file.

    Parameters
    ----------
    path : str or Path
        YAML file with an ``aircraft:`` section and an optional ``fdm:``
        section.

    Returns
    -------
    params : AircraftParameters
    config : FdmConfig

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the content is not a mapping, a section is malformed, or a value
        fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Aircraft config not found: {path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if not isinstance(config, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    aircraft_section = _section(config, "aircraft", required=True, path=path)
    fdm_section = _section(config, "fdm", required=False, path=path)

    name = aircraft_section.get("name", path.stem)
    params = aircraft_parameters_from_dict(aircraft_section)
    fdm = fdm_config_from_dict(fdm_section)

    logger.info("Loaded aircraft '%s' from %s", name, path)
    return params, fdm


def load_default_aircraft() -> Tuple[AircraftParameters, FdmConfig]:
    """Load the bundled Cessna 172 configuration."""
    return load_aircraft_config(DEFAULT_AIRCRAFT_FILE)
