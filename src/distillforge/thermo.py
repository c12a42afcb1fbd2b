import math

from .errors import ComputationError, InvalidParameterError

ATMOSPHERIC_PRESSURE = 760.0  # mmHg


def vapor_pressure(temperature, params):
    """
    Vapor pressure [mmHg] of a pure substance at `temperature` [C] from the
    Antoine equation P = 10^(A - B / (T + C)).

    Raises ComputationError when T + C == 0 or the result is not finite.
    """
    denominator = temperature + params.C
    if denominator == 0:
        raise ComputationError(
            f"Antoine denominator is zero for {params.name} at T={temperature}"
        )
    try:
        pressure = math.pow(10.0, params.A - params.B / denominator)
    except OverflowError as err:
        raise ComputationError(
            f"Vapor pressure of {params.name} overflows at T={temperature}"
        ) from err
    if not math.isfinite(pressure):
        raise ComputationError(
            f"Vapor pressure of {params.name} is not finite at T={temperature}"
        )
    return pressure


def boiling_point(params, pressure=ATMOSPHERIC_PRESSURE):
    """Temperature [C] at which the vapor pressure equals `pressure` [mmHg]."""
    if pressure <= 0:
        raise InvalidParameterError(f"pressure must be positive, got {pressure}")
    denominator = params.A - math.log10(pressure)
    if denominator == 0:
        raise ComputationError(
            f"No boiling point for {params.name} at P={pressure} mmHg"
        )
    return params.B / denominator - params.C


def equilibrium_y(x, alpha):
    """
    Vapor mole fraction in equilibrium with liquid mole fraction `x` for a
    binary mixture of constant relative volatility `alpha`.

    Preconditions (not checked): 0 <= x <= 1 and alpha > 1. With alpha == 1
    the vapor has the liquid's composition, i.e. no separation.
    """
    return (alpha * x) / (1 + (alpha - 1) * x)
