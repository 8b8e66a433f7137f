"""
Logging setup for aerofdm.

Library modules obtain their logger with ``get_logger(__name__)`` and never
configure handlers themselves. Applications (example scripts, notebooks)
call :func:`initialize_logging` once at start-up, either with a YAML file
in ``logging.config.dictConfig`` format or with a level for a plain
console configuration.

Example
-------
>>> from aerofdm.logging_system import get_logger, initialize_logging
>>> initialize_logging(level="DEBUG")
>>> logger = get_logger(__name__)
>>> logger.info("Simulation starting")
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional, Union

import yaml

PACKAGE_LOGGER_NAME = "aerofdm"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Parameters
    ----------
    name : str
        Usually ``__name__``. Names outside the ``aerofdm`` namespace are
        nested under it so that one call to :func:`initialize_logging`
        controls every logger the package creates.

    Returns
    -------
    logging.Logger
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def initialize_logging(
    config_path: Optional[Union[str, Path]] = None,
    level: Union[str, int] = "INFO",
) -> None:
    """
    Configure logging for an application using aerofdm.

    Parameters
    ----------
    config_path : str or Path, optional
        YAML file holding a ``dictConfig`` mapping. When omitted, a console
        handler is installed with :func:`logging.basicConfig`.
    level : str or int
        Level applied to the ``aerofdm`` logger when no file is given.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` does not exist.
    ValueError
        If the file does not contain a mapping, or the level is unknown.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Logging config not found: {path}")
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Logging config {path} must be a mapping")
        config.setdefault("version", 1)
        config.setdefault("disable_existing_loggers", False)
        logging.config.dictConfig(config)
        get_logger(__name__).debug("Logging configured from %s", path)
        return

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    logging.basicConfig(format=DEFAULT_FORMAT)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)
