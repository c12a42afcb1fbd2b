from ..series import format_series
from ._checks import require, require_duration, require_finite

POWER_PRECISION = {"energy": 3, "cost": 2}


def generate_power_data(power, cost_per_kwh, duration=60, rounded=True):
    """
    Energy used [kWh] and its cost since start-up, per minute.

    Each point is computed in closed form from t alone; nothing is carried
    from one minute to the next.
    """
    require_finite(power=power, cost_per_kwh=cost_per_kwh)
    require(power >= 0, f"power must be non-negative, got {power}")
    require(cost_per_kwh >= 0, f"cost_per_kwh must be non-negative, got {cost_per_kwh}")
    duration = require_duration(duration)

    points = []
    for t in range(duration + 1):
        energy = power * (t / 60) / 1000
        points.append({"time": t, "energy": energy, "cost": energy * cost_per_kwh})
    return format_series(points, POWER_PRECISION, rounded)


def summarize_power(series, power, cost_per_kwh, duration=60):
    return {"totalEnergy": series[-1]["energy"], "totalCost": series[-1]["cost"]}
