# valuegraph/ops/__init__.py

# Convenience re-exports so users can do: from valuegraph.ops import mul, tanh
from .arithmetic import add, sub, mul
from .transcendental import tanh

__all__ = [
    "add", "sub", "mul",
    "tanh",
]
