from loguru import logger

from .catalog import get_substance
from .errors import InvalidParameterError
from .models import (
    generate_antoine_data,
    generate_conductivity_data,
    generate_flow_data,
    generate_heating_data,
    generate_mccabe_thiele_data,
    generate_power_data,
    generate_rayleigh_data,
    summarize_antoine,
    summarize_conductivity,
    summarize_flow,
    summarize_heating,
    summarize_mccabe_thiele,
    summarize_power,
    summarize_rayleigh,
)


def _run_antoine(substance, min_t, max_t, rounded):
    return generate_antoine_data(get_substance(substance), min_t, max_t, rounded=rounded)


def _summarize_antoine(series, substance, min_t, max_t):
    return summarize_antoine(series, get_substance(substance))


# model type -> (generator, summary metrics)
MODEL_TYPES = {
    "antoine": (_run_antoine, _summarize_antoine),
    "mccabe_thiele": (generate_mccabe_thiele_data, summarize_mccabe_thiele),
    "heating": (generate_heating_data, summarize_heating),
    "conductivity": (generate_conductivity_data, summarize_conductivity),
    "flow": (generate_flow_data, summarize_flow),
    "power": (generate_power_data, summarize_power),
    "rayleigh": (generate_rayleigh_data, summarize_rayleigh),
}


class Scenario:
    """
    A named set of model runs for one distillation unit.
    Attributes:
        config (dict): Scenario configuration with a "models" mapping of
                       run name -> {"type": ..., **parameters}.
        name (str): Scenario name, defaults to "scenario".
        rounded (bool): Whether generators apply display rounding.
        results (dict): run name -> series, populated by run().
        metrics (dict): run name -> summary metrics of that series.
    """

    def __init__(self, config):
        logger.info("Initializing Scenario")
        self.config = config
        self.name = config.get("name", "scenario")
        self.rounded = config.get("rounded", True)
        self.results = {}
        self.metrics = {}

    def build_runs(self):
        """Resolve each configured model to its generator, summary and keyword arguments."""
        runs = {}
        for run_name, model_config in self.config["models"].items():
            model_type = model_config["type"]
            if model_type not in MODEL_TYPES:
                logger.error(f"Unknown model type: {model_type}")
                raise InvalidParameterError(f"Unknown model type: {model_type}")
            generator, summarize = MODEL_TYPES[model_type]
            params = {k: v for k, v in model_config.items() if k != "type"}
            runs[run_name] = (model_type, generator, summarize, params)
        return runs

    def run(self):
        """Run every model of the scenario and return run name -> series."""
        logger.info(f"Running scenario '{self.name}'")
        for run_name, (model_type, generator, summarize, params) in self.build_runs().items():
            series = generator(**params, rounded=self.rounded)
            self.results[run_name] = series
            self.metrics[run_name] = summarize(series, **params)
            logger.info(f"Generated {len(series)} points for {run_name} ({model_type})")
            for metric, value in self.metrics[run_name].items():
                logger.info(f"   {run_name}.{metric} = {value:.3f}")
        return self.results
