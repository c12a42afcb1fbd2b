"""
DistillForge - chart data for a water distillation unit.

Provides deterministic generators for:
- Antoine vapor pressure curves over a built-in substance catalog
- McCabe-Thiele equilibrium and operating lines
- Boiler heating and distillate conductivity transients
- Distillate flow, produced volume, energy use and cost
- Batch (Rayleigh) distillation composition drift
- Summary metrics: minimum reflux, time constant, conductivity reduction, batch yield
- JSON-schema validated scenario files with CSV, JSON, Excel and chart export
"""

from .catalog import SubstanceParams, SUBSTANCES, get_substance
from .errors import DistillForgeError, InvalidParameterError, ComputationError
from .thermo import vapor_pressure, boiling_point, equilibrium_y
from .series import infer_x_axis, to_dataframe
from .models import (
    generate_antoine_data,
    generate_mccabe_thiele_data,
    generate_heating_data,
    generate_conductivity_data,
    generate_flow_data,
    generate_power_data,
    generate_rayleigh_data,
    min_reflux_estimate,
    time_constant,
    conductivity_reduction,
    rayleigh_yield,
)
from .scenario import Scenario
from .validate import validate_scenario
from .result import (
    save_series_json,
    save_series_csv,
    generate_series_excel,
    plot_series,
)

__version__ = "0.1.0"

__all__ = [
    "SubstanceParams",
    "SUBSTANCES",
    "get_substance",
    "DistillForgeError",
    "InvalidParameterError",
    "ComputationError",
    "vapor_pressure",
    "boiling_point",
    "equilibrium_y",
    "infer_x_axis",
    "to_dataframe",
    "generate_antoine_data",
    "generate_mccabe_thiele_data",
    "generate_heating_data",
    "generate_conductivity_data",
    "generate_flow_data",
    "generate_power_data",
    "generate_rayleigh_data",
    "min_reflux_estimate",
    "time_constant",
    "conductivity_reduction",
    "rayleigh_yield",
    "Scenario",
    "validate_scenario",
    "save_series_json",
    "save_series_csv",
    "generate_series_excel",
    "plot_series",
    "__version__",
]
