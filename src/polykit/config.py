"""Configuration for polynomial comparison precision.

The comparison precision governs two things:

* canonicalization, where leading coefficients with magnitude at most the
  precision are dropped, and
* equality, where two coefficients are equal if they differ by at most the
  precision.

The process-wide default is read once from the ``COMPARISON_PRECISION``
environment variable. Individual polynomials can override it through the
``precision`` argument of :class:`polykit.polynomial.Polynomial`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Mapping

from polykit.logger import polykit_logger
from polykit.utils.validate import validate_precision

__all__ = [
    "DEFAULT_COMPARISON_PRECISION",
    "PRECISION_ENV_VAR",
    "PolyConfig",
    "get_default_config",
    "reset_default_config",
]

DEFAULT_COMPARISON_PRECISION = 1.0e-10
PRECISION_ENV_VAR = "COMPARISON_PRECISION"


class PolyConfig:
    """Configuration shared by polynomials built without an explicit precision."""

    def __init__(self, comparison_precision: float = DEFAULT_COMPARISON_PRECISION):
        """Initialize configuration.

        Args:
            comparison_precision:
                Absolute tolerance used for leading-zero stripping and
                coefficient-wise equality. Must be finite and non-negative.

        Raises:
            ValueError: If ``comparison_precision`` is negative or not finite.
        """
        self.comparison_precision = validate_precision(comparison_precision)

    def __repr__(self) -> str:
        return f"PolyConfig(comparison_precision={self.comparison_precision!r})"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PolyConfig:
        """Builds a configuration from environment variables.

        Falls back to :data:`DEFAULT_COMPARISON_PRECISION` when the variable is
        unset or empty. An unparsable, negative or non-finite value also falls
        back, with a warning on ``polykit_logger``.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new :class:`PolyConfig`.
        """
        env = os.environ if environ is None else environ
        raw = env.get(PRECISION_ENV_VAR)
        if not raw or not raw.strip():
            return cls()
        try:
            return cls(float(raw))
        except ValueError:
            polykit_logger.warning(
                "Ignoring invalid %s=%r; using default %g.",
                PRECISION_ENV_VAR,
                raw,
                DEFAULT_COMPARISON_PRECISION,
            )
            return cls()


@lru_cache(maxsize=1)
def get_default_config() -> PolyConfig:
    """Returns the process-wide configuration, loading it on first use."""
    return PolyConfig.from_env()


def reset_default_config() -> None:
    """Forgets the cached process-wide configuration.

    The next call to :func:`get_default_config` reads the environment again.
    """
    get_default_config.cache_clear()
