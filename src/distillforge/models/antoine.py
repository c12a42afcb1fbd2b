import numpy as np
from loguru import logger

from ..series import format_series
from ..thermo import boiling_point, vapor_pressure
from ._checks import require, require_finite

ANTOINE_STEPS = 50
ANTOINE_PRECISION = {"temperature": 1, "pressure": 2}


def generate_antoine_data(params, min_t, max_t, rounded=True):
    """
    Vapor pressure curve of one substance over [min_t, max_t] in degrees C.

    Returns 51 points (50 equal steps, both bounds included), each
    {"temperature": C, "pressure": mmHg}. A ComputationError from the Antoine
    equation is propagated, never clamped.
    """
    require_finite(min_t=min_t, max_t=max_t)
    require(min_t < max_t, f"min_t must be below max_t, got {min_t} >= {max_t}")

    points = [
        {"temperature": float(t), "pressure": vapor_pressure(float(t), params)}
        for t in np.linspace(min_t, max_t, ANTOINE_STEPS + 1)
    ]
    logger.debug(
        f"Antoine curve for {params.name}: {points[0]['pressure']:.2f} -> "
        f"{points[-1]['pressure']:.2f} mmHg"
    )
    return format_series(points, ANTOINE_PRECISION, rounded)


def summarize_antoine(series, params):
    """Normal boiling point [C] and the highest pressure on the curve [mmHg]."""
    return {
        "boilingPoint": boiling_point(params),
        "maxPressure": series[-1]["pressure"],
    }
