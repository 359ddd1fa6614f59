"""Configuration file discovery and loading for css-order-analyzer."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from css_order_analyzer.exceptions import ConfigurationError
from css_order_analyzer.models.config import WAIT_STATES, AnalyzerConfig

# Searched for in this order
CONFIG_FILE_NAMES = (".css-order-analyzer.yaml", ".css-order-analyzer.yml")


def find_config_file(directory: Path | None = None) -> Path | None:
    """Return the first configuration file present in the directory, if any."""
    search_dir = directory or Path.cwd()
    candidates = (search_dir / name for name in CONFIG_FILE_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def load_config_file(path: Path) -> AnalyzerConfig:
    """Load and validate one configuration file.

    Empty and comment-only files yield the default configuration.

    Raises:
        ConfigurationError: If the file is unreadable, is not a YAML
            mapping, or holds invalid options.
    """
    data = _read_mapping(path)
    try:
        return AnalyzerConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(_describe_problem(err) for err in e.errors())
        raise ConfigurationError(f"Invalid configuration in '{path}': {problems}") from e


def load_config(config_path: str | None = None) -> AnalyzerConfig:
    """Load the explicit file, else the discovered one, else the defaults."""
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return AnalyzerConfig()
    return load_config_file(path)


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping of options, got {type(data).__name__}"
        )
    return data


def _describe_problem(error: Any) -> str:
    """Render one validation error in terms of configuration options."""
    location = ".".join(str(part) for part in error["loc"]) or "root"
    kind = error["type"]
    if kind == "extra_forbidden":
        known = ", ".join(AnalyzerConfig.model_fields)
        return f"unknown option '{location}' (known options: {known})"
    if kind == "literal_error" and location == "wait_until":
        return (
            f"wait_until must be one of {', '.join(WAIT_STATES)}, "
            f"got {error['input']!r}"
        )
    if kind == "value_error":
        return f"{location}: {error['ctx']['error']}"
    return f"{location}: {error['msg']}"
