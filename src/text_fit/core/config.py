# SPDX-License-Identifier: Apache-2.0
"""Configuration for font size fitting.

A configuration holds the two tunable parameters of the fitting algorithm:

- ``delta``: font size decrement applied per shrink step.
- ``min_size_factor``: lower bound of the shrunk size, as a fraction of the
  size derived from the bounding box.

Configurations are immutable. Besides direct construction they can be built
from a mapping, a JSON/YAML file or environment variables; missing values fall
back to the defaults.
"""

from __future__ import annotations

import json
import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from pathlib import Path
from typing import Any

import yaml

from text_fit.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

DEFAULT_DELTA = 0.5
DEFAULT_MIN_SIZE_FACTOR = 0.3

ENV_DELTA = "TEXT_FIT_DELTA"
ENV_MIN_SIZE_FACTOR = "TEXT_FIT_MIN_SIZE_FACTOR"


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    result = float(value)
    if math.isnan(result):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    return result


@dataclass(frozen=True)
class FitConfig:
    """Validated parameters for the font size calculator.

    Attributes:
        delta: Font size decrement per iteration (must be > 0).
        min_size_factor: Minimum size as a fraction of the original size
            (must be within [0, 1]).
    """

    delta: float = DEFAULT_DELTA
    min_size_factor: float = DEFAULT_MIN_SIZE_FACTOR

    def __post_init__(self) -> None:
        delta = _as_float("delta", self.delta)
        factor = _as_float("min_size_factor", self.min_size_factor)
        if not delta > 0:
            raise InvalidConfiguration("delta must be positive")
        if not 0.0 <= factor <= 1.0:
            raise InvalidConfiguration("min_size_factor must be between 0 and 1")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "delta", delta)
        object.__setattr__(self, "min_size_factor", factor)

    @classmethod
    def default(cls) -> FitConfig:
        """Return the default configuration (delta=0.5, min_size_factor=0.3)."""
        return cls()

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        base: FitConfig | None = None,
    ) -> FitConfig:
        """Create from a key-value mapping.

        Only ``delta`` and ``min_size_factor`` are read; missing or null
        values fall back to ``base`` (the defaults when None).

        Args:
            data: Source mapping (e.g. a parsed config file).
            base: Configuration supplying values absent from data.

        Returns:
            Validated FitConfig.

        Raises:
            InvalidConfiguration: If data is not a mapping or values are invalid.
        """
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(
                f"configuration must be a mapping, got {type(data).__name__}"
            )
        base = base or cls.default()
        return base.with_overrides(
            delta=data.get("delta"),
            min_size_factor=data.get("min_size_factor"),
        )

    @classmethod
    def from_file(cls, path: Path | str, base: FitConfig | None = None) -> FitConfig:
        """Load configuration from a JSON or YAML file.

        Files ending in ``.json`` are parsed as JSON, everything else as YAML.
        Keys missing from the file (or an empty file) fall back to ``base``.

        Args:
            path: Path to the configuration file.
            base: Configuration supplying values absent from the file
                (default: FitConfig.default()).

        Returns:
            Validated FitConfig.

        Raises:
            FileNotFoundError: If the file does not exist.
            InvalidConfiguration: If the file cannot be parsed or holds invalid values.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
            if path.suffix.lower() == ".json":
                data = json.loads(content) if content.strip() else None
            else:
                data = yaml.safe_load(content)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise InvalidConfiguration(f"Unable to parse config file {path}: {exc}") from exc

        logger.debug("Loaded configuration from %s", path)
        return cls.from_mapping(data or {}, base=base)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FitConfig:
        """Load configuration from environment variables.

        Reads ``TEXT_FIT_DELTA`` and ``TEXT_FIT_MIN_SIZE_FACTOR``. Unset or
        blank variables fall back to the defaults.

        Args:
            environ: Variable source (default: ``os.environ``).

        Returns:
            Validated FitConfig.

        Raises:
            InvalidConfiguration: If a variable is not a valid number.
        """
        env = os.environ if environ is None else environ

        def read(name: str, default: float) -> float:
            raw = env.get(name, "").strip()
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as exc:
                raise InvalidConfiguration(f"{name} must be a number, got {raw!r}") from exc

        return cls(
            delta=read(ENV_DELTA, DEFAULT_DELTA),
            min_size_factor=read(ENV_MIN_SIZE_FACTOR, DEFAULT_MIN_SIZE_FACTOR),
        )

    def with_overrides(
        self,
        delta: float | None = None,
        min_size_factor: float | None = None,
    ) -> FitConfig:
        """Return a copy with the given non-None values replaced."""
        return FitConfig(
            delta=self.delta if delta is None else delta,
            min_size_factor=self.min_size_factor if min_size_factor is None else min_size_factor,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"delta": self.delta, "min_size_factor": self.min_size_factor}
