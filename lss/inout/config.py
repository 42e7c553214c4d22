# lss/inout/config.py
"""
Load and validate YAML linear system descriptions.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import yaml
from cerberus import Validator

from lss.core.exceptions import ConfigError

PRECISIONS: Dict[str, Any] = {
    "double": np.float64,
    "single": np.float32,
}

# Cerberus schema for a system description
SYSTEM_SCHEMA: Dict[str, Any] = {
    'matrix':    {'type': 'string', 'required': True, 'empty': False},
    'rhs':       {'type': 'string', 'required': False, 'nullable': True},
    'solution':  {'type': 'string', 'required': False, 'nullable': True},
    'precision': {'type': 'string', 'required': False, 'default': 'double',
                  'allowed': list(PRECISIONS)},
    'solver':    {'type': 'string', 'required': False, 'default': 'lapack'},
    'log_level': {'type': 'string', 'required': False, 'default': 'INFO',
                  'allowed': ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']},
}


@dataclass
class SystemConfig:
    matrix: Path
    rhs: Optional[Path] = None
    solution: Optional[Path] = None
    precision: str = "double"
    solver: str = "lapack"
    log_level: str = "INFO"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(PRECISIONS[self.precision])


def _resolve(base: Path, value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    p = Path(value)
    return p if p.is_absolute() else base / p


def load_system_config(path) -> SystemConfig:
    """
    Load a YAML system description, validate its schema, and return a SystemConfig.
    Relative file names are taken relative to the YAML file's directory.

    Raises:
        ConfigError: If the file cannot be read or fails schema validation.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read system YAML '{path}': {e}", path)

    if not isinstance(raw, dict):
        raise ConfigError(f"System YAML '{path}' must contain a mapping.", path)

    validator = Validator(SYSTEM_SCHEMA, allow_unknown=False)
    if not validator.validate(raw):
        raise ConfigError(f"System schema validation errors: {validator.errors}", path)
    doc: Dict[str, Any] = validator.document

    base = path.parent
    return SystemConfig(
        matrix=_resolve(base, doc['matrix']),
        rhs=_resolve(base, doc.get('rhs')),
        solution=_resolve(base, doc.get('solution')),
        precision=doc['precision'],
        solver=doc['solver'],
        log_level=doc['log_level'],
    )
