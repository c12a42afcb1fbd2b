"""
First-order relaxation models.

Both the still heating up and the distillate conductivity settling follow
value(t) = target + (initial - target) * exp(-k t), sampled once per minute.
"""

import numpy as np
from loguru import logger

from ..series import format_series
from ._checks import require, require_duration, require_finite

DEFAULT_DURATION = 60  # minutes


def first_order_response(initial, target, k, duration=DEFAULT_DURATION):
    """Return (times, values) for t = 0..duration whole minutes."""
    require_finite(initial=initial, target=target, k=k)
    require(k > 0, f"rate constant k must be positive, got {k}")
    duration = require_duration(duration)
    t = np.arange(duration + 1)
    values = target + (initial - target) * np.exp(-k * t)
    return t, values


def time_constant(k):
    """Time [min] to cover 63 % of the way to the target."""
    require_finite(k=k)
    require(k > 0, f"rate constant k must be positive, got {k}")
    return 1 / k


def conductivity_reduction(initial, final):
    """Percentage drop from the initial to the final conductivity."""
    require_finite(initial=initial, final=final)
    require(initial != 0, "initial conductivity must be non-zero")
    return (1 - final / initial) * 100


def generate_heating_data(t0, t_max, k, duration=DEFAULT_DURATION, rounded=True):
    """Newtonian heating of the boiler from t0 towards t_max [C]."""
    times, temps = first_order_response(t0, t_max, k, duration)
    points = [
        {"time": int(t), "temperature": float(v)} for t, v in zip(times, temps)
    ]
    logger.debug(f"Heating curve: {t0} -> {points[-1]['temperature']:.2f} C")
    return format_series(points, {"temperature": 2}, rounded)


def generate_conductivity_data(initial, final, k, duration=DEFAULT_DURATION, rounded=True):
    """Conductivity cleanup of the distillate from `initial` towards `final` [uS/cm]."""
    times, values = first_order_response(initial, final, k, duration)
    points = [
        {"time": int(t), "conductivity": float(v)} for t, v in zip(times, values)
    ]
    return format_series(points, {"conductivity": 2}, rounded)


def summarize_heating(series, t0, t_max, k, duration=DEFAULT_DURATION):
    return {
        "finalTemperature": series[-1]["temperature"],
        "timeConstant": time_constant(k),
    }


def summarize_conductivity(series, initial, final, k, duration=DEFAULT_DURATION):
    return {
        "finalConductivity": series[-1]["conductivity"],
        "reduction": conductivity_reduction(initial, final),
    }
