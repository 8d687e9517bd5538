"""
mesh-quai Configuration

Loads the middleware configuration from environment variables.
"""

from .loader import (
    Configuration,
    Mode,
    Network,
    load_configuration,
    parse_bool,
    parse_port,
)

__all__ = [
    "Configuration",
    "Mode",
    "Network",
    "load_configuration",
    "parse_bool",
    "parse_port",
]
