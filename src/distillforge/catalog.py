"""Built-in catalog of Antoine constants (P in mmHg, T in degrees C)."""

import json
from dataclasses import dataclass
from importlib.resources import files
from types import MappingProxyType

from loguru import logger

from .errors import InvalidParameterError


@dataclass(frozen=True)
class SubstanceParams:
    """
    Antoine constants for one pure substance.
    log10(P [mmHg]) = A - B / (T [C] + C)
    """

    name: str
    A: float
    B: float
    C: float


def _load_substances():
    raw = json.loads(
        files("distillforge.data")
        .joinpath("substances.json")
        .read_text(encoding="utf-8")
    )
    table = {
        name: SubstanceParams(name, float(c["A"]), float(c["B"]), float(c["C"]))
        for name, c in raw.items()
    }
    logger.debug(f"Loaded {len(table)} substances from catalog")
    return MappingProxyType(table)


SUBSTANCES = _load_substances()


def get_substance(name):
    """Look up a catalog entry by name (case-insensitive)."""
    for key, params in SUBSTANCES.items():
        if key.lower() == str(name).strip().lower():
            return params
    available = ", ".join(SUBSTANCES)
    logger.error(f"Unknown substance '{name}'")
    raise InvalidParameterError(f"Unknown substance '{name}'. Available: {available}")
