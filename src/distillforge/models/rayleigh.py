"""
Batch (Rayleigh) distillation of a binary mixture.

The Rayleigh balance ln(F/W) = integral of dx / (y - x) is stepped with an
explicit Euler scheme: each step boils off a fixed slice of the charge as
vapor of the current equilibrium composition and updates the residue by a
component balance.
"""

from loguru import logger

from ..series import format_series
from ..thermo import equilibrium_y
from ._checks import require, require_finite

RAYLEIGH_STEPS = 50
CUTOFF_FRACTION = 0.95
RAYLEIGH_PRECISION = {
    "percentDistilled": 1,
    "residueComposition": 3,
    "distillateComposition": 3,
}


def generate_rayleigh_data(alpha, initial_f, initial_xf, rounded=True):
    """
    Residue and distillate composition as the charge is boiled off.

    Args:
        alpha: relative volatility of the light component, > 1.
        initial_f: initial charge, > 0 (any mass or mole unit).
        initial_xf: light-component mole fraction of the charge, in (0, 1).

    Returns:
        list of {"percentDistilled", "residueComposition",
        "distillateComposition"} points, starting at 0 % distilled.

    Stepping stops once 95 % of the charge has been distilled: the update
    divides by the remaining holdup, which goes to zero at full depletion.
    """
    require_finite(alpha=alpha, initial_f=initial_f, initial_xf=initial_xf)
    require(alpha > 1, f"alpha must be greater than 1, got {alpha}")
    require(initial_f > 0, f"initial_f must be positive, got {initial_f}")
    require(0 < initial_xf < 1, f"initial_xf must be in (0, 1), got {initial_xf}")

    step = initial_f / RAYLEIGH_STEPS
    cutoff = CUTOFF_FRACTION * initial_f

    holdup, x = initial_f, initial_xf
    points = [{
        "percentDistilled": 0.0,
        "residueComposition": x,
        "distillateComposition": equilibrium_y(x, alpha),
    }]

    i = 1
    while i * step < cutoff:
        distilled = i * step
        y = equilibrium_y(x, alpha)
        remaining = holdup - step
        # composition cannot undershoot zero near depletion
        x = max(0.0, (x * holdup - y * step) / remaining)
        holdup = remaining
        points.append({
            "percentDistilled": distilled / initial_f * 100,
            "residueComposition": x,
            "distillateComposition": y,
        })
        i += 1

    logger.debug(
        f"Rayleigh run: xF={initial_xf} -> xW={x:.3f} after {len(points) - 1} steps"
    )
    return format_series(points, RAYLEIGH_PRECISION, rounded)


def rayleigh_yield(series, initial_xf):
    """
    Share [%] of the light component removed from the still, judged from the
    last residue composition of a Rayleigh series.
    """
    require_finite(initial_xf=initial_xf)
    require(0 < initial_xf < 1, f"initial_xf must be in (0, 1), got {initial_xf}")
    require(len(series) > 0, "series must not be empty")
    return 100 - series[-1]["residueComposition"] / initial_xf * 100


def summarize_rayleigh(series, alpha, initial_f, initial_xf):
    return {
        "finalResidueComposition": series[-1]["residueComposition"],
        "yield": rayleigh_yield(series, initial_xf),
    }
