import json
import os

DEFAULT_CONFIG = {
    "max_steps": 1_000_000,
    "verbose": False,
    "log_runs": False,
    "log_trace": False,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "verbose": bool,
    "log_runs": bool,
    "log_trace": bool,
    "output_directory": str,
    "log_file_prefix": str,
}


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; keep the two apart
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be 0 (unlimited) or a positive step count.")


def load_config(path=None):
    """
    Merge the JSON file at `path` over DEFAULT_CONFIG and validate the result.

    Without a path the defaults are returned as-is.
    """
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    # Validate schema
    validate_config(config)

    if config["log_runs"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    return config
