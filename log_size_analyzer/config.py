"""Configuration module — frozen dataclass loaded from environment variables."""

import os
from dataclasses import dataclass

from log_size_analyzer.parser import GROUP_KEY

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("table", "json")


@dataclass(frozen=True)
class Config:
    group_key: str = GROUP_KEY
    log_level: str = "INFO"
    output: str = "table"


def load_config(**overrides) -> Config:
    """Build Config from environment variables, then apply non-None overrides.

    Raises ValueError for an empty group key, unknown log level or output format.
    """
    values = {
        "group_key": os.environ.get("LOG_ANALYZER_GROUP_KEY", Config.group_key),
        "log_level": os.environ.get("LOG_ANALYZER_LOG_LEVEL", Config.log_level),
        "output": os.environ.get("LOG_ANALYZER_OUTPUT", Config.output),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    cfg = Config(
        group_key=values["group_key"],
        log_level=values["log_level"].strip().upper(),
        output=values["output"].strip().lower(),
    )

    if not cfg.group_key:
        raise ValueError("Group key must not be empty")
    if cfg.log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {cfg.log_level}")
    if cfg.output not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {cfg.output}")
    return cfg
