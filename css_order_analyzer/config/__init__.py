"""Configuration handling for css-order-analyzer."""
from __future__ import annotations

from css_order_analyzer.config.loader import (
    CONFIG_FILE_NAMES,
    find_config_file,
    load_config,
    load_config_file,
)
from css_order_analyzer.models.config import AnalyzerConfig

__all__ = [
    "AnalyzerConfig",
    "CONFIG_FILE_NAMES",
    "find_config_file",
    "load_config",
    "load_config_file",
]
