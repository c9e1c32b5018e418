"""Logging setup for ra_sampling.

Library code only creates module loggers under the ``ra_sampling``
namespace. Applications (the ``ra-sampling`` CLI included) call
``setup_logging`` once to route them, using a TOML file in
``logging.config.dictConfig`` layout. See ``logging_config.toml`` at the
repository root for an example.
"""

import logging
import logging.config
import os
from pathlib import Path

import tomli

from ra_sampling.scripts.parameter import log_cfg_env_var

DEFAULT_LOG_CFG = Path(__file__).parent.parent.parent / "logging_config.toml"


def _resolve_config_path(cfg_path=None) -> Path:
    """Explicit argument first, then $RA_SAMPLING_LOG_CFG, then the repo default."""
    return Path(cfg_path or os.getenv(log_cfg_env_var) or DEFAULT_LOG_CFG)


def _silence_package_logger() -> None:
    # Library default when nobody configured logging: emit nothing
    ra_logger = logging.getLogger("ra_sampling")
    ra_logger.handlers = [logging.NullHandler()]


def setup_logging(cfg_path=None) -> None:
    """Configure the ``ra_sampling`` loggers from a TOML dictConfig file.

    Args:
        cfg_path: Path to the TOML file; see ``_resolve_config_path``

    Raises:
        FileNotFoundError: If the path exists but is not a regular file
    """
    path = _resolve_config_path(cfg_path)

    if not path.exists():
        _silence_package_logger()
        return

    if not path.is_file():
        raise FileNotFoundError(f"Logging config not found at {path}")

    with path.open("rb") as f:
        logging.config.dictConfig(tomli.load(f))
