"""
Graph Configuration Utilities

Shared configuration for node construction and graph reporting.
Values come from the environment once at import time and can be
replaced at runtime with set_config().
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)

SUPPORTED_DTYPES = ("float64", "float32")

ENV_DTYPE = "VALUEGRAPH_DTYPE"
ENV_MAX_PRINT_NODES = "VALUEGRAPH_MAX_PRINT_NODES"


@dataclass(frozen=True)
class GraphConfig:
    """
    Settings shared by all nodes of the process.

    Attributes
    ----------
    dtype : str
        NumPy floating type used for `data` and `grad` slots.
    max_print_nodes : int
        Default number of nodes shown by print_computation_graph().
    """
    dtype: str = "float64"
    max_print_nodes: int = 20

    def __post_init__(self):
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(
                f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}"
            )
        if isinstance(self.max_print_nodes, bool) or not isinstance(self.max_print_nodes, int):
            raise ValueError(f"max_print_nodes must be an int, got {self.max_print_nodes!r}")
        if self.max_print_nodes < 1:
            raise ValueError(f"max_print_nodes must be positive, got {self.max_print_nodes}")

    @property
    def scalar_type(self):
        """The NumPy scalar type matching `dtype` (e.g. np.float64)."""
        return np.dtype(self.dtype).type


def load_config(environ: Optional[Mapping[str, str]] = None) -> GraphConfig:
    """
    Build a GraphConfig from environment variables.

    Args:
        environ: mapping to read from (defaults to os.environ)

    Returns:
        GraphConfig with defaults for unset variables

    Raises:
        ValueError: if a variable is set to an invalid value
    """
    env = os.environ if environ is None else environ

    dtype = env.get(ENV_DTYPE, GraphConfig.dtype).strip().lower()

    raw_max = env.get(ENV_MAX_PRINT_NODES)
    if raw_max is None or raw_max.strip() == "":
        max_print_nodes = GraphConfig.max_print_nodes
    else:
        try:
            max_print_nodes = int(raw_max)
        except ValueError:
            raise ValueError(f"{ENV_MAX_PRINT_NODES} must be an integer, got {raw_max!r}") from None

    return GraphConfig(dtype=dtype, max_print_nodes=max_print_nodes)


_config = load_config()


def get_config() -> GraphConfig:
    return _config


def set_config(config: GraphConfig) -> GraphConfig:
    """Replace the active configuration and return the previous one."""
    global _config
    if not isinstance(config, GraphConfig):
        raise TypeError(f"set_config expects a GraphConfig, got {type(config)}")
    previous = _config
    _config = config
    logger.debug("Active config changed: %r -> %r", previous, config)
    return previous
