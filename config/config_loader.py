import json
import os
from datetime import datetime

from simulator.alphabet import Alphabet

DEFAULT_CONFIG = {
    "first_symbol": "a",
    "last_symbol": "z",
    "blank_symbol": "~",
    "prompt": "dtm> ",
    "log_runs": False,
    "output_directory": "logs/",
    "log_file_prefix": "dtm_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "first_symbol": str,
    "last_symbol": str,
    "blank_symbol": str,
    "prompt": str,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    # Alphabet must be constructible
    alphabet_from_config(config)

def alphabet_from_config(config):
    return Alphabet(config["first_symbol"], config["last_symbol"], config["blank_symbol"])

def load_config(path="config/runtime_config.json", verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    if config["log_runs"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
