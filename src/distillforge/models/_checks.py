import math
import numbers

from loguru import logger

from ..errors import InvalidParameterError


def require(condition, message):
    """Raise InvalidParameterError with `message` unless `condition` holds."""
    if not condition:
        logger.error(message)
        raise InvalidParameterError(message)


def require_finite(**values):
    """Reject NaN, infinite and non-numeric parameters, named by keyword."""
    for name, value in values.items():
        require(
            isinstance(value, numbers.Real)
            and not isinstance(value, bool)
            and math.isfinite(value),
            f"{name} must be a finite number, got {value!r}",
        )


def require_duration(duration):
    """Check a duration in whole minutes and return it as an int."""
    require(
        not isinstance(duration, bool)
        and isinstance(duration, numbers.Real)
        and float(duration).is_integer()
        and duration >= 0,
        f"duration must be a non-negative whole number of minutes, got {duration!r}",
    )
    return int(duration)
