import numpy as np
from loguru import logger

from ..series import format_series
from ._checks import require, require_duration, require_finite

JOULES_PER_GRAM = 2594.0  # latent (~2260 J/g) + sensible (~334 J/g) heat of water
WARMUP_RATE = 0.5  # 1/min
FLOW_PRECISION = {"flowRate": 1, "totalVolume": 2}


def max_flow_rate(power, efficiency):
    """Steady distillate production [mL/min] for a heater of `power` W."""
    grams_per_second = power * efficiency / JOULES_PER_GRAM
    return grams_per_second * 60


def generate_flow_data(power, efficiency, duration=60, rounded=True):
    """
    Distillate flow rate [mL/min] and produced volume [L] per minute.

    The flow ramps up as flow(t) = max_flow * (1 - exp(-0.5 t)) with
    flow(0) = 0. Total volume is the running sum of the per-minute flow
    rates, one rectangle per elapsed minute, not an exact integral of the
    ramp. Its error grows with the warm-up rate; it is a known approximation
    and downstream figures rely on it.
    """
    require_finite(power=power, efficiency=efficiency)
    require(power >= 0, f"power must be non-negative, got {power}")
    require(0 < efficiency <= 1, f"efficiency must be in (0, 1], got {efficiency}")
    duration = require_duration(duration)

    peak = max_flow_rate(power, efficiency)
    t = np.arange(duration + 1)
    flow = np.where(t == 0, 0.0, peak * (1 - np.exp(-WARMUP_RATE * t)))
    total_ml = np.cumsum(flow)

    points = [
        {"time": int(ti), "flowRate": float(f), "totalVolume": float(v) / 1000}
        for ti, f, v in zip(t, flow, total_ml)
    ]
    logger.debug(f"Flow curve: peak {peak:.1f} mL/min, total {points[-1]['totalVolume']:.2f} L")
    return format_series(points, FLOW_PRECISION, rounded)


def summarize_flow(series, power, efficiency, duration=60):
    return {
        "outputRate": series[-1]["flowRate"],
        "totalVolume": series[-1]["totalVolume"],
        "efficiency": efficiency * 100,
    }
