"""Centralized configuration for the interpolator.

This module defines:
- Input limits applied by the API and CLI layers
- Point text format
- Output and logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with INTERPOLATOR_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("interpolator")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("INTERPOLATOR_MAX_INPUT_LENGTH", "10000")
)  # characters per number or point
MAX_POINTS = int(os.getenv("INTERPOLATOR_MAX_POINTS", "1000"))

# Point text format: "<x><sep><y>"
POINT_SEPARATOR = os.getenv("INTERPOLATOR_POINT_SEPARATOR", ",")

# Output
DEFAULT_OUTPUT_FORMAT = os.getenv(
    "INTERPOLATOR_OUTPUT_FORMAT", "human"
)  # "human", "json", "latex"
POLYNOMIAL_VARIABLE = os.getenv("INTERPOLATOR_POLYNOMIAL_VARIABLE", "x")

VAR_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Logging
DEFAULT_LOG_LEVEL = os.getenv("INTERPOLATOR_LOG_LEVEL", "WARNING")
