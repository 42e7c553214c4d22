# lss/runner.py
"""
Build, populate and solve a linear system described by a YAML file.
"""
from pathlib import Path
from typing import Optional

from lss.core.exceptions import LSSError
from lss.core.system import LinearSystem
from lss.inout.config import SystemConfig, load_system_config
from lss.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_system(config: SystemConfig) -> LinearSystem:
    """Create the system and populate it from the configured files."""
    system = LinearSystem(dtype=config.dtype, solver=config.solver)
    return system.initialize(config.matrix, config.rhs, config.solution)


def run_system(path, log_file: Optional[str] = None) -> LinearSystem:
    """
    Load the description at `path`, then build and solve the system.

    Returns:
        The solved LinearSystem (solution in .x).

    Raises:
        LSSError (ConfigError, FormatDetectionError, ParseError, ...)
    """
    config = load_system_config(Path(path))
    setup_logging(config.log_level, log_file)
    try:
        system = build_system(config)
        system.solve()
    except LSSError as e:
        logger.error("Linear system '%s' failed (%s): %s", path, e.kind.value, e)
        raise
    logger.info("Solved %s", system)
    return system
