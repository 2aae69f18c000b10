import json
import os
from dataclasses import fields

from appdirs import user_config_dir
from loguru import logger

from .common import BitwidthParams


def default_params_path() -> str:
    return os.path.join(user_config_dir("BitInterval", "BitInterval"), "params.json")


def load_params(path: str | None = None) -> BitwidthParams:
    """
    Load bitwidth parameters from a JSON file, falling back to the defaults.

    The file holds an object whose keys are `BitwidthParams` field names. A missing file
    yields the default parameters; a malformed file or an unknown key raises `ValueError`.
    """
    path = path if path is not None else default_params_path()
    if not os.path.isfile(path):
        logger.debug(f"No parameters file at `{path}`, using defaults.")
        return BitwidthParams()

    with open(path, "r") as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Parameters file `{path}` is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Parameters file `{path}` must contain a JSON object.")

    known = {field.name for field in fields(BitwidthParams)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown parameters in `{path}`: {', '.join(unknown)}")
    for key, value in data.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Parameter `{key}` in `{path}` must be an integer, got {value!r}.")

    params = BitwidthParams(**data)

    logger.debug(f"Loaded {params} from `{path}`.")
    return params
