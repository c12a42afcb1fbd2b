import json
from importlib.resources import files

import jsonschema
from jsonschema import validate
from loguru import logger


def load_scenario_schema():
    """Return the scenario JSON schema bundled under distillforge/schemas."""
    return json.loads(
        files("distillforge.schemas")
        .joinpath("scenario_schema.json")
        .read_text(encoding="utf-8")
    )


def validate_scenario(config, schema=None):
    """
    Validates a scenario against the bundled schema.
    `config` is either a path to a JSON file or an already loaded dict.
    Returns the loaded config; raises jsonschema.ValidationError if invalid.
    """
    if schema is None:
        schema = load_scenario_schema()

    source = "<dict>"
    if not isinstance(config, dict):
        source = str(config)
        with open(config, "r", encoding="utf-8") as f:
            config = json.load(f)

    try:
        validate(instance=config, schema=schema)
        logger.info(f"Scenario '{source}' validated successfully.")
        return config
    except jsonschema.exceptions.ValidationError as err:
        logger.error(f"Validation error in '{source}': {err.message}")
        if err.path:
            logger.error(f"   Path: {' -> '.join(map(str, err.path))}")
        raise
