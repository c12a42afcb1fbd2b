"""Generators for the distillation unit's charts, and their summary metrics."""

from .antoine import generate_antoine_data, summarize_antoine
from .mccabe_thiele import (
    generate_mccabe_thiele_data,
    min_reflux_estimate,
    summarize_mccabe_thiele,
)
from .transient import (
    generate_heating_data,
    generate_conductivity_data,
    time_constant,
    conductivity_reduction,
    summarize_heating,
    summarize_conductivity,
)
from .flow import generate_flow_data, summarize_flow
from .power import generate_power_data, summarize_power
from .rayleigh import generate_rayleigh_data, rayleigh_yield, summarize_rayleigh
