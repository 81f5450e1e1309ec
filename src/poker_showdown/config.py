"""Configuration for hand evaluation."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "parallel": {"type": "boolean"},
        "maxWorkers": {"type": ["integer", "null"], "minimum": 1},
        "logLevel": {"type": "string", "enum": LOG_LEVELS},
    },
    "additionalProperties": False,
}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class EvaluatorConfig:
    """
    Settings for HandEvaluator.

    Attributes:
        parallel: Evaluate hands on a thread pool instead of one by one
        max_workers: Thread pool size; None lets the executor decide
        log_level: Level used when the CLI configures logging
    """

    parallel: bool = False
    max_workers: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'EvaluatorConfig':
        """
        Build a configuration from POKER_SHOWDOWN_* environment variables.

        Raises:
            ValueError: If a variable holds a value CONFIG_SCHEMA rejects
        """
        raw_workers = os.environ.get("POKER_SHOWDOWN_MAX_WORKERS")
        max_workers = None
        if raw_workers:
            try:
                max_workers = int(raw_workers)
            except ValueError:
                raise ValueError(
                    f"Invalid evaluator configuration: POKER_SHOWDOWN_MAX_WORKERS "
                    f"must be an integer, got {raw_workers!r}"
                )

        return cls.from_dict({
            "parallel": _env_flag("POKER_SHOWDOWN_PARALLEL"),
            "maxWorkers": max_workers,
            "logLevel": os.environ.get("POKER_SHOWDOWN_LOG_LEVEL", "WARNING").upper(),
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'EvaluatorConfig':
        """
        Build a configuration from a dictionary.

        Raises:
            ValueError: If the data does not match CONFIG_SCHEMA
        """
        try:
            jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
        except jsonschema.exceptions.ValidationError as e:
            raise ValueError(f"Invalid evaluator configuration: {e.message}")

        return cls(
            parallel=data.get("parallel", False),
            max_workers=data.get("maxWorkers"),
            log_level=data.get("logLevel", "WARNING"),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'EvaluatorConfig':
        """
        Load a configuration from a JSON file.

        Raises:
            ValueError: If the file is not valid JSON or fails validation
        """
        path = Path(path)
        logger.info(f"Loading evaluator configuration from {path}")
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}")
        return cls.from_dict(data)
