"""
Helpers shared by the generators and the export layer.

A sample point is a plain dict of field name -> float (or None); a series is
a list of sample points. Field order is insertion order and is relied upon by
the charting code.
"""

import pandas as pd

AXIS_HINTS = ("time", "date", "hour", "minute")


def round_point(point, precision):
    """
    Return a copy of `point` with each field rounded to the number of decimals
    given in `precision`. Fields missing from `precision` and None values are
    passed through unchanged.
    """
    out = {}
    for field, value in point.items():
        digits = precision.get(field)
        if value is None or digits is None:
            out[field] = value
        else:
            out[field] = round(float(value), digits)
    return out


def format_series(points, precision, rounded=True):
    """Final formatting step applied by every generator before returning."""
    if not rounded:
        return [dict(p) for p in points]
    return [round_point(p, precision) for p in points]


def infer_x_axis(series):
    """
    Pick the field a chart should use as its horizontal axis: the first field
    whose name mentions time, date, hour or minute, otherwise the first field.
    """
    if not series:
        return None
    fields = list(series[0].keys())
    for field in fields:
        if any(hint in field.lower() for hint in AXIS_HINTS):
            return field
    return fields[0] if fields else None


def to_dataframe(series):
    """Convert a series to a DataFrame keeping the field order."""
    if not series:
        return pd.DataFrame()
    return pd.DataFrame.from_records(series, columns=list(series[0].keys()))
