import json
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
from loguru import logger

from .errors import InvalidParameterError
from .series import infer_x_axis, to_dataframe
from .thermo import ATMOSPHERIC_PRESSURE

AXIS_LABELS = {
    "time": "Time [min]",
    "temperature": "Temperature [C]",
    "pressure": "Vapor pressure [mmHg]",
    "conductivity": "Conductivity [uS/cm]",
    "flowRate": "Flow rate [mL/min]",
    "totalVolume": "Total volume [L]",
    "energy": "Energy [kWh]",
    "cost": "Cost",
    "x": "Liquid mole fraction x",
    "percentDistilled": "Distilled [%]",
}


def save_series_json(results, fname="series.json", output_dir="outputs"):
    """Save {run name: series} to a single JSON file, keeping field order."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)
    return path


def save_series_csv(series, fname="series.csv", output_dir="outputs"):
    """Save one series to CSV; None values are written as empty cells."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)
    to_dataframe(series).to_csv(path, index=False)
    return path


def generate_series_excel(results, fname="series.xlsx", output_dir="outputs"):
    """Write every series to its own sheet of one workbook."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)
    # Excel caps sheet names at 31 characters and compares them case-insensitively
    sheets = {}
    for run_name in results:
        sheet = run_name[:31]
        if sheet.lower() in sheets:
            message = (
                f"Runs '{sheets[sheet.lower()]}' and '{run_name}' map to the same sheet '{sheet}'"
            )
            logger.error(message)
            raise InvalidParameterError(message)
        sheets[sheet.lower()] = run_name

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for run_name, series in results.items():
            to_dataframe(series).to_excel(writer, sheet_name=run_name[:31], index=False)
    logger.info(f"Workbook ready: {path}")
    return path


def plot_series(series, title, fname="series.png", output_dir="outputs"):
    """Chart every field of a series against its inferred horizontal axis."""
    df = to_dataframe(series)
    if df.empty:
        return None
    x_field = infer_x_axis(series)
    y_fields = [c for c in df.columns if c != x_field]

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)

    plt.figure(figsize=(8, 5))
    for field in y_fields:
        plt.plot(df[x_field], df[field].astype(float), label=field)
    if "pressure" in y_fields:
        plt.axhline(ATMOSPHERIC_PRESSURE, color="red", linestyle="--", label="1 atm")
    plt.xlabel(AXIS_LABELS.get(x_field, x_field))
    if len(y_fields) == 1:
        plt.ylabel(AXIS_LABELS.get(y_fields[0], y_fields[0]))
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(path)
    plt.close()
    return path
