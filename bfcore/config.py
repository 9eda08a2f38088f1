from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import numpy as np
import yaml
from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

# 16 bit instruction pointer
DEFAULT_TAPE_SIZE = 65535
DEFAULT_NESTED_LOOP_LIMIT = 1024
DEFAULT_CELL_BITS = 8

CELL_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
}


@dataclass(frozen=True)
class InterpreterConfig:
    tape_size: int = DEFAULT_TAPE_SIZE
    nested_loop_limit: int = DEFAULT_NESTED_LOOP_LIMIT
    cell_bits: int = DEFAULT_CELL_BITS

    def __post_init__(self):
        if self.tape_size < 1:
            raise ConfigError(f"tape_size must be positive, got {self.tape_size}")
        if self.nested_loop_limit < 1:
            raise ConfigError(f"nested_loop_limit must be positive, got {self.nested_loop_limit}")
        if self.cell_bits not in CELL_DTYPES:
            raise ConfigError(
                f"cell_bits must be one of {sorted(CELL_DTYPES)}, got {self.cell_bits}"
            )

    @property
    def cell_dtype(self):
        return CELL_DTYPES[self.cell_bits]

    @property
    def max_cell(self) -> int:
        return (1 << self.cell_bits) - 1

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "InterpreterConfig":
        """Build a config from BF_* environment variables (a .env file is honoured)."""
        env = os.environ if environ is None else environ
        try:
            return cls(
                tape_size=int(env.get("BF_TAPE_SIZE", DEFAULT_TAPE_SIZE)),
                nested_loop_limit=int(env.get("BF_NESTED_LOOP_LIMIT", DEFAULT_NESTED_LOOP_LIMIT)),
                cell_bits=int(env.get("BF_CELL_BITS", DEFAULT_CELL_BITS)),
            )
        except ValueError as e:
            raise ConfigError(f"invalid interpreter setting in environment: {e}") from e

    def with_overrides(self, **overrides: Any) -> "InterpreterConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str, base: Optional[InterpreterConfig] = None) -> InterpreterConfig:
    """Load interpreter settings from a YAML file.

    Supported formats:
      1) { interpreter: { tape_size, nested_loop_limit, cell_bits } }
      2) The same keys at top level
    Keys missing from the file keep the values of `base` (environment defaults
    when omitted).
    """
    with open(path, "r") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")
    if isinstance(data.get("interpreter"), dict):
        data = data["interpreter"]

    known = {f.name for f in fields(InterpreterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown settings {unknown}")

    # bool is an int subclass; YAML `true` must not pass as 1
    bad = sorted(k for k, v in data.items() if isinstance(v, bool) or not isinstance(v, int))
    if bad:
        raise ConfigError(f"{path}: settings must be integers, got {[data[k] for k in bad]!r} for {bad}")

    base = base if base is not None else InterpreterConfig.from_env()
    return replace(base, **data)
