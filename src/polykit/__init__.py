"""Provides immutable polynomials and their arithmetic."""

from importlib.metadata import PackageNotFoundError, version

from polykit.config import PolyConfig, get_default_config, reset_default_config
from polykit.polynomial import (
    Polynomial,
    add,
    clone,
    equals,
    multiply,
    negate,
    render,
    scale,
    subtract,
)

try:
    __version__ = version("polykit")
except PackageNotFoundError:
    pass

__all__ = [
    "Polynomial",
    "PolyConfig",
    "get_default_config",
    "reset_default_config",
    "equals",
    "add",
    "negate",
    "subtract",
    "scale",
    "multiply",
    "render",
    "clone",
]
