from loguru import logger

from ..series import format_series
from ..thermo import equilibrium_y
from ._checks import require, require_finite

MCCABE_THIELE_STEPS = 50  # x advances by 0.02
MCCABE_THIELE_PRECISION = {"x": 2, "yEq": 3, "yOp": 3, "xLine": 2}


def rectifying_line(x, reflux_ratio, xd):
    """Rectifying-section operating line y = R/(R+1) x + xD/(R+1)."""
    return (reflux_ratio / (reflux_ratio + 1)) * x + xd / (reflux_ratio + 1)


def min_reflux_estimate(alpha):
    """Rough minimum reflux ratio 1 / (alpha - 1) for a sharp split."""
    require_finite(alpha=alpha)
    require(alpha > 1, f"alpha must be greater than 1, got {alpha}")
    return 1 / (alpha - 1)


def generate_mccabe_thiele_data(alpha, reflux_ratio, xd, rounded=True):
    """
    Points of a McCabe-Thiele diagram for x = 0, 0.02, ..., 1.0.

    Each point holds the equilibrium curve (yEq), the rectifying operating
    line (yOp) and the y = x diagonal (xLine). yOp is None for x > xd: the
    operating line is not drawn past the distillate composition.
    """
    require_finite(alpha=alpha, reflux_ratio=reflux_ratio, xd=xd)
    require(alpha > 1, f"alpha must be greater than 1, got {alpha}")
    require(reflux_ratio > -1, f"reflux_ratio must be greater than -1, got {reflux_ratio}")
    require(0 < xd <= 1, f"xd must be in (0, 1], got {xd}")

    points = []
    for i in range(MCCABE_THIELE_STEPS + 1):
        x = i / MCCABE_THIELE_STEPS
        y_op = rectifying_line(x, reflux_ratio, xd) if x <= xd else None
        points.append({
            "x": x,
            "yEq": equilibrium_y(x, alpha),
            "yOp": y_op,
            "xLine": x,
        })
    logger.debug(f"McCabe-Thiele diagram: alpha={alpha}, R={reflux_ratio}, xD={xd}")
    return format_series(points, MCCABE_THIELE_PRECISION, rounded)


def summarize_mccabe_thiele(series, alpha, reflux_ratio, xd):
    return {"minRefluxEstimate": min_reflux_estimate(alpha), "alpha": alpha}
