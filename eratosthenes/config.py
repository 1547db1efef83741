"""
Configuration loading.

Settings come from a YAML file (see config/default.yaml). Anything the
file leaves out falls back to DEFAULT_CONFIG.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .output import DEFAULT_SEPARATOR, validate_separator
from .sieve import N_MAX, InvalidBound, validate_bound

DEFAULT_CONFIG: Dict[str, Any] = {
    'bound': N_MAX,
    'separator': DEFAULT_SEPARATOR,
}

# Only present in a source checkout; installed wheels do not ship config/.
CHECKOUT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'default.yaml'


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load sieve settings from a YAML file.

    Parameters
    ----------
    path : str or Path, optional
        Config file. None returns the defaults without touching disk.

    Returns
    -------
    dict
        Settings with keys 'bound' and 'separator'.

    Raises
    ------
    FileNotFoundError
        If path is given but does not exist.
    ValueError
        On unknown keys or a separator that is not whitespace. InvalidBound (a
        ValueError) on a bad bound.
    """
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(loaded).__name__}")

    unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"{path}: unknown config keys {unknown}")

    config.update(loaded)
    config['bound'] = validate_bound(_numeric_bound(config['bound']))

    try:
        validate_separator(config['separator'])
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None

    return config


def _numeric_bound(bound):
    # PyYAML reads 1e6 (no dot, unsigned exponent) as a string.
    if not isinstance(bound, str):
        return bound
    for convert in (int, float):
        try:
            return convert(bound)
        except ValueError:
            pass
    raise InvalidBound(f"bound must be an integer, got {bound!r}")
